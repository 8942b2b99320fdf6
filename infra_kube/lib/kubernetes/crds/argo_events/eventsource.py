from dataclasses import dataclass, field
from typing import Optional

from infra_kube.lib.kubernetes.crds.base import CrdResource
from infra_kube.lib.kubernetes.crds.core import ObjectMeta, SecretKeySelector, ServicePort, Status
from infra_kube.lib.kubernetes.schema import SchemaModel, alias
from .common import API_VERSION, Backoff, BasicAuth, SASLConfig, TLSConfig, Template


@dataclass
class EventSourceFilter(SchemaModel):
    expression: Optional[str] = None


@dataclass
class Service(SchemaModel):
    ports: Optional[list[ServicePort]] = None
    cluster_ip: Optional[str] = alias("clusterIP")


@dataclass
class WebhookEventSource(SchemaModel):
    endpoint: str
    method: str
    port: str
    url: Optional[str] = None
    server_cert_secret: Optional[SecretKeySelector] = None
    server_key_secret: Optional[SecretKeySelector] = None
    metadata: Optional[dict[str, str]] = None
    auth_secret: Optional[SecretKeySelector] = None
    max_payload_size: Optional[int] = None
    filter: Optional[EventSourceFilter] = None


@dataclass
class CatchupConfiguration(SchemaModel):
    enabled: Optional[bool] = None
    max_duration: Optional[str] = None


@dataclass
class ConfigMapPersistence(SchemaModel):
    name: Optional[str] = None
    create_if_not_exist: Optional[bool] = None


@dataclass
class EventPersistence(SchemaModel):
    catchup: Optional[CatchupConfiguration] = None
    config_map: Optional[ConfigMapPersistence] = None


@dataclass
class CalendarEventSource(SchemaModel):
    schedule: Optional[str] = None
    interval: Optional[str] = None
    exclusion_dates: Optional[list[str]] = None
    timezone: Optional[str] = None
    metadata: Optional[dict[str, str]] = None
    persistence: Optional[EventPersistence] = None
    filter: Optional[EventSourceFilter] = None

    def __post_init__(self):
        if not self.schedule and not self.interval:
            raise ValueError("calendar event source needs either a schedule or an interval")


@dataclass
class Selector(SchemaModel):
    key: str
    operation: Optional[str] = None
    value: Optional[str] = None


@dataclass
class ResourceFilter(SchemaModel):
    prefix: Optional[str] = None
    labels: Optional[list[Selector]] = None
    fields: Optional[list[Selector]] = None
    created_by: Optional[str] = None
    after_start: Optional[bool] = None


@dataclass
class ResourceEventSource(SchemaModel):
    group: str
    version: str
    resource: str
    namespace: Optional[str] = None
    filter: Optional[ResourceFilter] = None
    event_types: Optional[list[str]] = None
    """ADD, UPDATE and/or DELETE"""

    metadata: Optional[dict[str, str]] = None


@dataclass
class WatchPathConfig(SchemaModel):
    directory: Optional[str] = None
    path: Optional[str] = None
    path_regexp: Optional[str] = None


@dataclass
class FileEventSource(SchemaModel):
    event_type: str
    watch_path_config: WatchPathConfig
    polling: Optional[bool] = None
    metadata: Optional[dict[str, str]] = None
    filter: Optional[EventSourceFilter] = None


@dataclass
class NATSAuth(SchemaModel):
    basic: Optional[BasicAuth] = None
    token: Optional[SecretKeySelector] = None
    nkey: Optional[SecretKeySelector] = None
    credential: Optional[SecretKeySelector] = None


@dataclass
class NATSEventsSource(SchemaModel):
    url: str
    subject: str
    connection_backoff: Optional[Backoff] = None
    json_body: Optional[bool] = None
    tls: Optional[TLSConfig] = None
    metadata: Optional[dict[str, str]] = None
    auth: Optional[NATSAuth] = None
    filter: Optional[EventSourceFilter] = None


@dataclass
class KafkaConsumerGroup(SchemaModel):
    group_name: str
    oldest: Optional[bool] = None
    rebalance_strategy: Optional[str] = None


@dataclass
class KafkaEventSource(SchemaModel):
    url: str
    topic: str
    partition: Optional[str] = None
    connection_backoff: Optional[Backoff] = None
    tls: Optional[TLSConfig] = None
    json_body: Optional[bool] = None
    metadata: Optional[dict[str, str]] = None
    consumer_group: Optional[KafkaConsumerGroup] = None
    limit_events_per_second: Optional[int] = None
    version: Optional[str] = None
    sasl: Optional[SASLConfig] = None
    filter: Optional[EventSourceFilter] = None


@dataclass
class RedisEventSource(SchemaModel):
    host_address: str
    channels: list[str] = field(default_factory=list)
    password: Optional[SecretKeySelector] = None
    namespace: Optional[str] = None
    db: Optional[int] = None
    tls: Optional[TLSConfig] = None
    metadata: Optional[dict[str, str]] = None
    filter: Optional[EventSourceFilter] = None
    json_body: Optional[bool] = None
    username: Optional[str] = None


@dataclass
class EventSourceSpec(SchemaModel):
    template: Optional[Template] = None
    service: Optional[Service] = None
    event_bus_name: Optional[str] = None
    """Defaults to ``default``"""

    replicas: Optional[int] = None
    webhook: Optional[dict[str, WebhookEventSource]] = None
    calendar: Optional[dict[str, CalendarEventSource]] = None
    resource: Optional[dict[str, ResourceEventSource]] = None
    file: Optional[dict[str, FileEventSource]] = None
    nats: Optional[dict[str, NATSEventsSource]] = None
    kafka: Optional[dict[str, KafkaEventSource]] = None
    redis: Optional[dict[str, RedisEventSource]] = None


@dataclass
class EventSource(CrdResource):
    api_version: str = API_VERSION
    kind: str = "EventSource"
    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: EventSourceSpec = field(default_factory=EventSourceSpec)
    status: Optional[Status] = None

    def event_names(self) -> dict[str, list[str]]:
        """Names of the events this source emits, by source type"""
        names = {}
        for source_type in ("webhook", "calendar", "resource", "file", "nats", "kafka", "redis"):
            sources = getattr(self.spec, source_type)
            if sources:
                names[source_type] = sorted(sources)
        return names
