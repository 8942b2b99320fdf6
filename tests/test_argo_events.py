from unittest import mock

import pulumi
import pytest

from infra_kube.lib.config import config_from_dict
from infra_kube.modules.kubernetes.argo_events import ArgoEvents
from infra_kube.modules.kubernetes.argo_events.config import ArgoEventsConfig, EventBusType
from infra_kube.modules.kubernetes.argo_events.event_bus import build_event_bus


def test_default_event_bus_uses_jetstream():
    bus = build_event_bus(ArgoEventsConfig())
    manifest = bus.to_manifest()

    assert manifest["metadata"]["name"] == "default"
    assert manifest["metadata"]["namespace"] == "argo-event"
    assert manifest["metadata"]["labels"]["infra-kube/environment"] == "test"

    jet_stream = manifest["spec"]["jetStream"]
    assert jet_stream["version"] == "latest"
    assert jet_stream["replicas"] == 3
    assert jet_stream["persistence"] == {"accessMode": "ReadWriteOnce", "volumeSize": "10Gi"}

    (term,) = jet_stream["affinity"]["podAntiAffinity"]["preferredDuringSchedulingIgnoredDuringExecution"]
    assert term["podAffinityTerm"]["topologyKey"] == "kubernetes.io/hostname"
    assert term["podAffinityTerm"]["labelSelector"]["matchLabels"]["eventbus-name"] == "default"


def test_native_event_bus():
    config = ArgoEventsConfig(bus_type=EventBusType.NATIVE, persistence_size=None, anti_affinity=False)

    spec = build_event_bus(config).to_manifest()["spec"]

    assert spec == {"nats": {"native": {"replicas": 3, "auth": "token"}}}


def test_config_from_stack_values():
    config = config_from_dict(
        {"bus_type": "native", "bus_replicas": 5, "persistence_size": "20Gi", "storage_class": "longhorn"},
        ArgoEventsConfig,
    )

    assert config.bus_type is EventBusType.NATIVE
    native = build_event_bus(config).spec.nats.native
    assert native.replicas == 5
    assert native.persistence.storage_class_name == "longhorn"
    assert native.persistence.volume_size == "20Gi"


def test_event_bus_needs_a_quorum():
    with pytest.raises(ValueError, match="at least 3"):
        ArgoEventsConfig(bus_replicas=1)


def test_values():
    values = ArgoEvents.validated_values(ArgoEventsConfig(webhook_enabled=True))

    assert values["crds"] == {"install": True, "keep": True}
    assert values["controller"]["replicas"] == 1
    assert values["webhook"] == {"enabled": True}


@pulumi.runtime.test
def test_module_creates_the_event_bus_after_the_chart(helm_mock):
    with mock.patch("infra_kube.lib.kubernetes.crds.base.CustomResource") as custom_resource:
        exports = ArgoEvents("argo-events", ArgoEventsConfig()).run()

    assert exports.namespace == "argo-event"
    assert exports.event_bus_name == "default"
    assert exports.chart_version == "2.0.6"

    helm_mock.v3.FetchOpts.assert_called_once_with(repo="https://argoproj.github.io/argo-helm", version="2.0.6")

    args, kwargs = custom_resource.call_args
    assert args == ("argo-events-eventbus-default",)
    assert kwargs["api_version"] == "argoproj.io/v1alpha1"
    assert kwargs["kind"] == "EventBus"
    assert kwargs["spec"]["jetStream"]["replicas"] == 3
    assert len(kwargs["opts"].depends_on) == 1
