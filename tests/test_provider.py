from pathlib import Path
from unittest import mock

from infra_kube.lib.config import Environment, infra_env
from infra_kube.lib.kubernetes.labels import get_labels
from infra_kube.lib.kubernetes.namespaces import ResourceType
from infra_kube.lib.kubernetes.provider import create_provider, get_manifests_dir


def test_manifests_dir():
    path = get_manifests_dir(ResourceType.INFRASTRUCTURE, "seaweedfs", Environment.LOCAL)

    assert path == Path("generated_manifests/local/infrastructure/seaweedfs")


def test_manifests_dir_from_environment_config(monkeypatch):
    monkeypatch.setitem(infra_env.data, "manifests_dir", "/tmp/manifests")

    path = get_manifests_dir(ResourceType.SERVICES, "api", Environment.PRODUCTION)

    assert path == Path("/tmp/manifests/production/services/api")


def test_provider_renders_manifests(monkeypatch):
    monkeypatch.setitem(infra_env.data, "render_manifests", True)

    with mock.patch("infra_kube.lib.kubernetes.provider.Provider") as provider:
        create_provider("sealed-secrets", ResourceType.INFRASTRUCTURE)

    provider.assert_called_once_with(
        "infrastructure-sealed-secrets",
        render_yaml_to_directory="generated_manifests/test/infrastructure/sealed-secrets",
        opts=None,
    )


def test_provider_uses_the_kube_context(monkeypatch):
    monkeypatch.setitem(infra_env.data, "kube_context", "k3d-local")

    with mock.patch("infra_kube.lib.kubernetes.provider.Provider") as provider:
        create_provider("seaweedfs", ResourceType.INFRASTRUCTURE)

    provider.assert_called_once_with("infrastructure-seaweedfs", context="k3d-local", opts=None)


def test_labels():
    labels = get_labels("seaweedfs", "filer")

    assert labels == {
        "app.kubernetes.io/name": "seaweedfs",
        "app.kubernetes.io/component": "filer",
        "app.kubernetes.io/instance": "seaweedfs-filer",
        "app.kubernetes.io/managed-by": "pulumi",
        "app.kubernetes.io/part-of": "main",
        "infra-kube/environment": "test",
        "infra-kube/stack": "seaweedfs",
        "infra-kube/project": "infrastructure",
    }


def test_labels_with_group():
    labels = get_labels("argo-events", "eventbus", group="default")

    assert labels["app.kubernetes.io/instance"] == "argo-events-eventbus-default"
    assert labels["app.kubernetes.io/part-of"] == "default"
