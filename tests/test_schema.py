from dataclasses import dataclass
from typing import Optional

import pytest

from infra_kube.lib.kubernetes.crds.core import Container, ContainerPort, SecurityContext, Toleration
from infra_kube.lib.kubernetes.schema import ManifestError, SchemaModel, alias
from infra_kube.lib.kubernetes.values_schema import ValuesSchemaError, validate_values


def test_to_manifest_uses_camel_case_and_drops_unset_fields():
    container = Container(name="sensor", image_pull_policy="Always", ports=[ContainerPort(container_port=8080)])

    assert container.to_manifest() == {
        "name": "sensor",
        "imagePullPolicy": "Always",
        "ports": [{"containerPort": 8080}],
    }


def test_aliased_keys():
    port = ContainerPort.from_manifest({"containerPort": 53, "hostIP": "10.0.0.1"})
    assert port.host_ip == "10.0.0.1"
    assert port.to_manifest() == {"containerPort": 53, "hostIP": "10.0.0.1"}

    context = SecurityContext.from_manifest({"seLinuxOptions": {"level": "s0"}})
    assert context.se_linux_options.level == "s0"


def test_free_form_maps_keep_their_keys():
    container = Container.from_manifest({"resources": {"limits": {"nvidia.com/gpu": 1, "memory": "1Gi"}}})

    assert container.resources.limits == {"nvidia.com/gpu": 1, "memory": "1Gi"}


def test_unknown_key_is_rejected_with_its_path():
    with pytest.raises(ManifestError, match=r"unknown key `Container.ports\[0\].hostport`"):
        Container.from_manifest({"ports": [{"containerPort": 80, "hostport": 8080}]})


def test_snake_case_keys_are_unknown():
    with pytest.raises(ManifestError, match="unknown key `ContainerPort.host_port`"):
        ContainerPort.from_manifest({"containerPort": 80, "host_port": 8080})


def test_null_keys_are_ignored():
    assert ContainerPort.from_manifest({"containerPort": 80, "hostPort": None}) == ContainerPort(container_port=80)


def test_conflicting_aliases_are_refused():
    with pytest.raises(TypeError, match="other schemas use `hostIP`"):

        @dataclass
        class Endpoint(SchemaModel):
            host_ip: Optional[str] = alias("hostIp")


def test_wrong_type_is_rejected():
    with pytest.raises(ManifestError, match="Toleration"):
        Toleration.from_manifest({"tolerationSeconds": "soon"})


def test_non_mapping_is_rejected():
    with pytest.raises(ManifestError, match="expects a mapping"):
        Toleration.from_manifest(["Exists"])


def test_validate_values_ignores_none_entries():
    typed = validate_values({"operator": "Exists", "key": None}, Toleration)

    assert typed == Toleration(operator="Exists")


def test_validate_values_names_the_chart():
    with pytest.raises(ValuesSchemaError, match="values for chart `demo`") as e:
        validate_values({"operatr": "Exists"}, Toleration, chart="demo")

    assert e.value.chart == "demo"
    assert isinstance(e.value, ValueError)
