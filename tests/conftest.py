from unittest import mock

import pulumi
import pytest

from infra_kube.lib.config import infra_env


class InfraMocks(pulumi.runtime.Mocks):
    def new_resource(self, args: pulumi.runtime.MockResourceArgs):
        return [f"{args.name}_id", args.inputs]

    def call(self, args: pulumi.runtime.MockCallArgs):
        return {}


pulumi.runtime.set_mocks(InfraMocks(), project="infrastructure", stack="seaweedfs", preview=False)


@pytest.fixture(autouse=True)
def environment(monkeypatch):
    monkeypatch.setitem(infra_env.data, "environment", "test")
    monkeypatch.delitem(infra_env.data, "render_manifests", raising=False)
    monkeypatch.delitem(infra_env.data, "manifests_dir", raising=False)


@pytest.fixture
def helm_mock():
    """Stands in for ``pulumi_kubernetes.helm``, rendering a chart needs the helm binary and the network"""
    with mock.patch("infra_kube.lib.kubernetes.helm.helm_chart.helm") as helm:
        yield helm


@pytest.fixture
def yaml_mock():
    with mock.patch("infra_kube.lib.kubernetes.helm.helm_chart.yaml") as yaml:
        # pulumi only accepts Resource instances in ``depends_on``
        yaml.ConfigFile.return_value = mock.MagicMock(spec=pulumi.Resource)
        yield yaml
