from dataclasses import dataclass, field
from typing import Optional

from infra_kube.lib.kubernetes.crds.base import CrdResource
from infra_kube.lib.kubernetes.crds.core import (
    Affinity,
    Condition,
    LocalObjectReference,
    Metadata,
    ObjectMeta,
    PodSecurityContext,
    ResourceRequirements,
    SecretKeySelector,
    SecurityContext,
    Toleration,
)
from infra_kube.lib.kubernetes.quantity import Quantity
from infra_kube.lib.kubernetes.schema import SchemaModel, alias
from .common import API_VERSION, SASLConfig, TLSConfig


@dataclass
class ContainerTemplate(SchemaModel):
    resources: Optional[ResourceRequirements] = None
    image_pull_policy: Optional[str] = None
    security_context: Optional[SecurityContext] = None


@dataclass
class PersistenceStrategy(SchemaModel):
    storage_class_name: Optional[str] = None
    access_mode: Optional[str] = None
    volume_size: Optional[Quantity] = None


@dataclass
class NativeStrategy(SchemaModel):
    """NATS streaming cluster managed by the EventBus controller"""

    replicas: Optional[int] = None
    auth: Optional[str] = None
    """``none`` or ``token``"""

    persistence: Optional[PersistenceStrategy] = None
    container_template: Optional[ContainerTemplate] = None
    metrics_container_template: Optional[ContainerTemplate] = None
    node_selector: Optional[dict[str, str]] = None
    tolerations: Optional[list[Toleration]] = None
    metadata: Optional[Metadata] = None
    security_context: Optional[PodSecurityContext] = None
    max_age: Optional[str] = None
    image_pull_secrets: Optional[list[LocalObjectReference]] = None
    service_account_name: Optional[str] = None
    priority_class_name: Optional[str] = None
    priority: Optional[int] = None
    affinity: Optional[Affinity] = None
    max_msgs: Optional[int] = None
    max_bytes: Optional[str] = None
    max_subs: Optional[int] = None
    max_payload: Optional[str] = None
    raft_heartbeat_timeout: Optional[str] = None
    raft_election_timeout: Optional[str] = None
    raft_lease_timeout: Optional[str] = None
    raft_commit_timeout: Optional[str] = None

    def __post_init__(self):
        if self.replicas is not None and self.replicas < 3:
            # NATS streaming needs a raft quorum
            raise ValueError(f"native NATS needs at least 3 replicas, got {self.replicas}")


@dataclass
class NATSConfig(SchemaModel):
    """An existing NATS streaming cluster"""

    url: Optional[str] = None
    cluster_id: Optional[str] = alias("clusterID")
    auth: Optional[str] = None
    access_secret: Optional[SecretKeySelector] = None


@dataclass
class NATSBus(SchemaModel):
    native: Optional[NativeStrategy] = None
    exotic: Optional[NATSConfig] = None


@dataclass
class JetStreamBus(SchemaModel):
    version: Optional[str] = None
    replicas: Optional[int] = None
    container_template: Optional[ContainerTemplate] = None
    reloader_container_template: Optional[ContainerTemplate] = None
    metrics_container_template: Optional[ContainerTemplate] = None
    persistence: Optional[PersistenceStrategy] = None
    metadata: Optional[Metadata] = None
    node_selector: Optional[dict[str, str]] = None
    tolerations: Optional[list[Toleration]] = None
    security_context: Optional[PodSecurityContext] = None
    image_pull_secrets: Optional[list[LocalObjectReference]] = None
    priority_class_name: Optional[str] = None
    priority: Optional[int] = None
    affinity: Optional[Affinity] = None
    service_account_name: Optional[str] = None
    settings: Optional[str] = None
    """nats-server config, overrides the controller defaults"""

    start_args: Optional[list[str]] = None
    stream_config: Optional[str] = None
    max_payload: Optional[str] = None


@dataclass
class KafkaBus(SchemaModel):
    url: Optional[str] = None
    topic: Optional[str] = None
    version: Optional[str] = None
    tls: Optional[TLSConfig] = None
    sasl: Optional[SASLConfig] = None


@dataclass
class EventBusSpec(SchemaModel):
    nats: Optional[NATSBus] = None
    jet_stream: Optional[JetStreamBus] = None
    kafka: Optional[KafkaBus] = None

    def __post_init__(self):
        configured = [name for name in ("nats", "jet_stream", "kafka") if getattr(self, name) is not None]
        if len(configured) > 1:
            raise ValueError(f"an EventBus uses a single technology, got {', '.join(configured)}")


@dataclass
class BusConfigNATS(SchemaModel):
    url: Optional[str] = None
    cluster_id: Optional[str] = alias("clusterID")
    auth: Optional[str] = None
    access_secret: Optional[SecretKeySelector] = None


@dataclass
class BusConfigJetStream(SchemaModel):
    url: Optional[str] = None
    access_secret: Optional[SecretKeySelector] = None
    stream_config: Optional[str] = None


@dataclass
class BusConfig(SchemaModel):
    nats: Optional[BusConfigNATS] = None
    jet_stream: Optional[BusConfigJetStream] = None
    kafka: Optional[KafkaBus] = None


@dataclass
class EventBusStatus(SchemaModel):
    conditions: Optional[list[Condition]] = None
    config: Optional[BusConfig] = None


@dataclass
class EventBus(CrdResource):
    api_version: str = API_VERSION
    kind: str = "EventBus"
    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: EventBusSpec = field(default_factory=EventBusSpec)
    status: Optional[EventBusStatus] = None
