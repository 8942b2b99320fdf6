from unittest import mock

import pytest

from infra_kube.lib.kubernetes.crds.argo_events import (
    API_VERSION,
    EventBus,
    EventBusSpec,
    EventSource,
    NATSBus,
    NativeStrategy,
    Sensor,
)
from infra_kube.lib.kubernetes.crds.core import ObjectMeta
from infra_kube.lib.kubernetes.quantity import Quantity
from infra_kube.lib.kubernetes.schema import ManifestError

EVENT_BUS = {
    "apiVersion": "argoproj.io/v1alpha1",
    "kind": "EventBus",
    "metadata": {"name": "default", "namespace": "argo-event"},
    "spec": {
        "jetStream": {
            "version": "latest",
            "replicas": 3,
            "persistence": {"storageClassName": "standard", "accessMode": "ReadWriteOnce", "volumeSize": "10Gi"},
        }
    },
}

WEBHOOK_EVENT_SOURCE = {
    "apiVersion": "argoproj.io/v1alpha1",
    "kind": "EventSource",
    "metadata": {"name": "webhook"},
    "spec": {
        "service": {"ports": [{"port": 12000, "targetPort": 12000}]},
        "webhook": {"example": {"port": "12000", "endpoint": "/example", "method": "POST"}},
        "calendar": {"every-minute": {"interval": "1m"}},
    },
}

WEBHOOK_SENSOR = {
    "apiVersion": "argoproj.io/v1alpha1",
    "kind": "Sensor",
    "metadata": {"name": "webhook"},
    "spec": {
        "dependencies": [{"name": "test-dep", "eventSourceName": "webhook", "eventName": "example"}],
        "triggers": [
            {"template": {"name": "log-trigger", "log": {"intervalSeconds": 1}}},
            {
                "template": {
                    "name": "http-trigger",
                    "http": {
                        "url": "http://example.com/hook",
                        "method": "POST",
                        "payload": [{"src": {"dependencyName": "test-dep", "dataKey": "body"}, "dest": "message"}],
                    },
                },
                "retryStrategy": {"steps": 3, "duration": "1s"},
            },
        ],
    },
}


class TestEventBus:
    def test_parse(self):
        bus = EventBus.from_manifest(EVENT_BUS)

        assert bus.name == "default"
        assert bus.spec.jet_stream.replicas == 3
        assert isinstance(bus.spec.jet_stream.persistence.volume_size, Quantity)
        assert bus.to_manifest() == EVENT_BUS

    def test_build(self):
        bus = EventBus(
            metadata=ObjectMeta(name="default"),
            spec=EventBusSpec(nats=NATSBus(native=NativeStrategy(replicas=3, auth="token"))),
        )

        assert bus.to_manifest() == {
            "apiVersion": API_VERSION,
            "kind": "EventBus",
            "metadata": {"name": "default"},
            "spec": {"nats": {"native": {"replicas": 3, "auth": "token"}}},
        }

    def test_native_needs_a_quorum(self):
        with pytest.raises(ValueError, match="at least 3 replicas"):
            NativeStrategy(replicas=2)

    def test_single_technology(self):
        manifest = {**EVENT_BUS, "spec": {**EVENT_BUS["spec"], "nats": {"native": {}}}}

        with pytest.raises(ManifestError, match="single technology"):
            EventBus.from_manifest(manifest)

    def test_unknown_key(self):
        manifest = {**EVENT_BUS, "spec": {"jetstream": {}}}

        with pytest.raises(ManifestError, match="unknown key `EventBus.spec.jetstream`"):
            EventBus.from_manifest(manifest)

    def test_invalid_volume_size(self):
        manifest = {**EVENT_BUS, "spec": {"jetStream": {"persistence": {"volumeSize": "ten gigs"}}}}

        with pytest.raises(ManifestError, match="not a valid size"):
            EventBus.from_manifest(manifest)

    def test_wrong_kind(self):
        with pytest.raises(ManifestError, match="expected kind `EventBus`, got `Sensor`"):
            EventBus.from_manifest({**EVENT_BUS, "kind": "Sensor"})

    def test_custom_resource(self):
        with mock.patch("infra_kube.lib.kubernetes.crds.base.CustomResource") as custom_resource:
            EventBus.from_manifest(EVENT_BUS).custom_resource("eventbus-default")

        custom_resource.assert_called_once_with(
            "eventbus-default",
            api_version="argoproj.io/v1alpha1",
            kind="EventBus",
            metadata=EVENT_BUS["metadata"],
            spec=EVENT_BUS["spec"],
            opts=None,
        )


class TestEventSource:
    def test_parse(self):
        source = EventSource.from_manifest(WEBHOOK_EVENT_SOURCE)

        assert source.spec.webhook["example"].endpoint == "/example"
        assert source.spec.service.ports[0].target_port == 12000
        assert source.event_names() == {"webhook": ["example"], "calendar": ["every-minute"]}
        assert source.to_manifest() == WEBHOOK_EVENT_SOURCE

    def test_calendar_needs_a_schedule_or_an_interval(self):
        manifest = {**WEBHOOK_EVENT_SOURCE, "spec": {"calendar": {"never": {"timezone": "UTC"}}}}

        with pytest.raises(ManifestError, match="schedule or an interval"):
            EventSource.from_manifest(manifest)

    def test_webhook_requires_an_endpoint(self):
        manifest = {**WEBHOOK_EVENT_SOURCE, "spec": {"webhook": {"example": {"port": "12000", "method": "POST"}}}}

        with pytest.raises(ManifestError, match="endpoint"):
            EventSource.from_manifest(manifest)


class TestSensor:
    def test_parse(self):
        sensor = Sensor.from_manifest(WEBHOOK_SENSOR)

        assert sensor.spec.dependencies[0].event_source_name == "webhook"
        http = sensor.spec.triggers[1].template.http
        assert http.payload[0].src.data_key == "body"
        assert sensor.spec.triggers[1].retry_strategy.duration == "1s"
        assert sensor.to_manifest() == WEBHOOK_SENSOR

    def test_duplicate_dependencies(self):
        dependency = WEBHOOK_SENSOR["spec"]["dependencies"][0]
        manifest = {**WEBHOOK_SENSOR, "spec": {"dependencies": [dependency, dependency]}}

        with pytest.raises(ManifestError, match="duplicate dependency names: test-dep"):
            Sensor.from_manifest(manifest)

    def test_parameters_refer_to_known_dependencies(self):
        dependency = {"name": "other", "eventSourceName": "webhook", "eventName": "example"}
        manifest = {**WEBHOOK_SENSOR, "spec": {**WEBHOOK_SENSOR["spec"], "dependencies": [dependency]}}

        with pytest.raises(ManifestError, match="unknown dependency `test-dep`"):
            Sensor.from_manifest(manifest)

    def test_single_trigger_type(self):
        trigger = {"template": {"name": "both", "log": {}, "http": {"url": "http://example.com"}}}
        manifest = {**WEBHOOK_SENSOR, "spec": {**WEBHOOK_SENSOR["spec"], "triggers": [trigger]}}

        with pytest.raises(ManifestError, match="more than one trigger type"):
            Sensor.from_manifest(manifest)
