from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

import pytest
from dacite import DaciteError
from pulumi import runtime

from infra_kube.lib.config import (
    Environment,
    HierarchicalConfig,
    InfraConfigException,
    get_environment,
    get_stack_config,
    infra_env,
    load_config_file,
)
from infra_kube.lib.config.infra_env import discover_config_files
from infra_kube.lib.config.mapper import get_raw_stack_config
from infra_kube.lib.kubernetes.quantity import Quantity


class Tier(str, Enum):
    GOLD = "gold"
    SILVER = "silver"


@dataclass
class DemoConfig:
    name: str
    replicas: int = 1
    tier: Tier = Tier.SILVER
    size: Optional[Quantity] = None
    labels: dict[str, str] = field(default_factory=dict)


@pytest.fixture
def project(tmp_path):
    """A git checkout holding a Pulumi project two levels down"""
    repo = tmp_path / "repo"
    (repo / ".git").mkdir(parents=True)
    (repo / "Infra.common.yaml").write_text("environment: production\nlabel_namespace: acme\n")

    project_dir = repo / "sysenvs" / "local"
    project_dir.mkdir(parents=True)
    (project_dir / "Infra.common.yaml").write_text("environment: local\nrender_manifests: true\n")

    return project_dir


def test_closest_config_wins(project):
    config = HierarchicalConfig(entrypoint=project / "infra.py")

    assert config["environment"] == "local"
    assert config["label_namespace"] == "acme"
    assert config["render_manifests"] is True


def test_search_stops_at_the_git_root(tmp_path, project):
    (tmp_path / "Infra.common.yaml").write_text("kube_context: outside\n")

    config = HierarchicalConfig(entrypoint=project / "infra.py")

    assert "kube_context" not in config


def test_limit(project):
    config = HierarchicalConfig(limit=1, entrypoint=project / "infra.py")

    assert config["environment"] == "local"
    assert "label_namespace" not in config


def test_no_config_files(tmp_path):
    (tmp_path / ".git").mkdir()

    config = HierarchicalConfig(entrypoint=tmp_path / "infra.py")

    assert config.data == {}
    with pytest.raises(InfraConfigException, match="'environment'"):
        config.require("environment")


def test_get_environment():
    assert get_environment() is Environment.TEST


def test_unknown_environment(monkeypatch):
    monkeypatch.setitem(infra_env.data, "environment", "qa")

    with pytest.raises(ValueError, match="unknown environment `qa`"):
        get_environment()


def test_missing_environment(monkeypatch):
    monkeypatch.delitem(infra_env.data, "environment")

    with pytest.raises(InfraConfigException):
        get_environment()


def test_stack_config(monkeypatch):
    monkeypatch.setattr(
        runtime.config,
        "CONFIG",
        {
            "demo:name": "demo",
            "demo:replicas": "3",
            "demo:tier": "gold",
            "demo:size": "10Gi",
            "demo:labels": '{"team": "infra"}',
            "other:name": "ignored",
        },
    )

    assert get_raw_stack_config("demo") == {
        "name": "demo",
        "replicas": 3,
        "tier": "gold",
        "size": "10Gi",
        "labels": {"team": "infra"},
    }

    config = get_stack_config("demo", DemoConfig)

    assert config == DemoConfig(
        name="demo", replicas=3, tier=Tier.GOLD, size=Quantity("10Gi"), labels={"team": "infra"}
    )


def test_stack_config_keeps_numeric_strings_for_str_fields(monkeypatch):
    monkeypatch.setattr(runtime.config, "CONFIG", {"demo:name": "42", "demo:replicas": "3"})

    assert get_raw_stack_config("demo", DemoConfig) == {"name": "42", "replicas": 3}
    assert get_stack_config("demo", DemoConfig) == DemoConfig(name="42", replicas=3)


def test_stack_config_rejects_unknown_keys(monkeypatch):
    monkeypatch.setattr(runtime.config, "CONFIG", {"demo:name": "demo", "demo:replica": "3"})

    with pytest.raises(DaciteError, match="replica"):
        get_stack_config("demo", DemoConfig)


def test_load_config_file_merges_files(tmp_path):
    base = tmp_path / "base.yaml"
    base.write_text("name: demo\nreplicas: 2\nlabels:\n  team: infra\n")
    override = tmp_path / "override.yaml"
    override.write_text("replicas: 4\nlabels:\n  tier: gold\n")

    config = load_config_file([base, override], DemoConfig)

    assert config.replicas == 4
    assert config.labels == {"team": "infra", "tier": "gold"}


def test_discover_config_files_farthest_first(project):
    paths = discover_config_files(project / "infra.py")

    assert [path.parent.name for path in paths] == ["repo", "local"]
