from unittest import mock

import pulumi
import pytest

from infra_kube.lib.config import config_from_dict, get_stack_config
from infra_kube.lib.kubernetes.quantity import CpuQuantity, Quantity
from infra_kube.modules.kubernetes.sealed_secrets import SealedSecrets
from infra_kube.modules.kubernetes.sealed_secrets.config import ResourceArgs, SealedSecretsConfig


def test_default_values():
    values = SealedSecrets.validated_values(SealedSecretsConfig())

    assert values == {
        "fullnameOverride": "sealed-secrets",
        "keyrenewperiod": "720h",
        "updateStatus": True,
        "tolerations": [{"operator": "Exists", "effect": "NoSchedule"}],
        "metrics": {"serviceMonitor": {"enabled": False}},
    }


def test_resources_and_namespaces():
    config = SealedSecretsConfig(
        additional_namespaces=["applications"],
        resources=ResourceArgs(cpu=CpuQuantity("50m"), memory=Quantity("64Mi"), memory_limit=Quantity("128Mi")),
        metrics_enabled=True,
    )

    values = SealedSecrets.validated_values(config)

    assert values["additionalNamespaces"] == ["applications"]
    assert values["resources"] == {"requests": {"cpu": "50m", "memory": "64Mi"}, "limits": {"memory": "128Mi"}}
    assert values["metrics"]["serviceMonitor"]["enabled"] is True


def test_config_from_stack_values():
    config = config_from_dict(
        {
            "key_renew_period": "0",
            "tolerations": [{"operator": "Equal", "key": "dedicated", "value": "infra", "effect": "NoSchedule"}],
            "resources": {"cpu": "100m"},
        },
        SealedSecretsConfig,
    )

    assert config.tolerations[0].key == "dedicated"
    assert isinstance(config.resources.cpu, CpuQuantity)

    values = SealedSecrets.validated_values(config)
    assert values["keyrenewperiod"] == "0"
    assert values["tolerations"] == [
        {"operator": "Equal", "effect": "NoSchedule", "key": "dedicated", "value": "infra"}
    ]


@pytest.mark.parametrize("period", ["1h30m", "720h", "0"])
def test_key_renew_period(period):
    assert SealedSecretsConfig(key_renew_period=period).key_renew_period == period


@pytest.mark.parametrize("period", ["", "monthly", "30d"])
def test_invalid_key_renew_period(period):
    with pytest.raises(ValueError, match="key_renew_period"):
        SealedSecretsConfig(key_renew_period=period)


def test_invalid_cpu_quantity():
    with pytest.raises(ValueError, match="not a valid CPU quantity"):
        config_from_dict({"resources": {"cpu": "lots"}}, SealedSecretsConfig)


@pulumi.runtime.test
def test_module_installs_into_kube_system(helm_mock):
    with mock.patch("infra_kube.lib.kubernetes.base.helm_chart_module.core") as core:
        exports = SealedSecrets("sealed-secrets", SealedSecretsConfig()).run()

    # kube-system comes with the cluster
    core.v1.Namespace.assert_not_called()

    assert exports.namespace == "kube-system"
    assert exports.controller_name == "sealed-secrets"
    assert exports.chart_version == "1.1.6"

    helm_mock.v3.FetchOpts.assert_called_once_with(repo="https://charts.bitnami.com/bitnami", version="1.1.6")
    assert helm_mock.v3.ChartOpts.call_args.kwargs["namespace"] == "kube-system"


def test_stack_config_turns_renewal_off(monkeypatch):
    monkeypatch.setattr(
        pulumi.runtime.config,
        "CONFIG",
        {"sealed-secrets:key_renew_period": "0", "sealed-secrets:update_status": "false"},
    )

    config = get_stack_config("sealed-secrets", SealedSecretsConfig)

    assert config.key_renew_period == "0"
    assert config.update_status is False
    assert SealedSecrets.validated_values(config)["keyrenewperiod"] == "0"
