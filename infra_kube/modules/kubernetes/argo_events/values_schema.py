"""
Deep partial of the argo-events chart values.
"""
from dataclasses import dataclass
from typing import Any, Optional

from infra_kube.lib.kubernetes.crds.core import ResourceRequirements, Toleration
from infra_kube.lib.kubernetes.schema import SchemaModel, alias


@dataclass
class Crds(SchemaModel):
    install: Optional[bool] = None
    keep: Optional[bool] = None
    annotations: Optional[dict[str, str]] = None


@dataclass
class GlobalImage(SchemaModel):
    repository: Optional[str] = None
    tag: Optional[str] = None
    image_pull_policy: Optional[str] = None


@dataclass
class Global(SchemaModel):
    image: Optional[GlobalImage] = None
    image_pull_secrets: Optional[list[dict[str, str]]] = None
    pod_annotations: Optional[dict[str, str]] = None
    pod_labels: Optional[dict[str, str]] = None
    additional_labels: Optional[dict[str, str]] = None


@dataclass
class Rbac(SchemaModel):
    enabled: Optional[bool] = None
    namespaced: Optional[bool] = None
    managed_namespace: Optional[str] = None


@dataclass
class ServiceMonitor(SchemaModel):
    enabled: Optional[bool] = None
    interval: Optional[str] = None
    additional_labels: Optional[dict[str, str]] = None


@dataclass
class ControllerMetrics(SchemaModel):
    enabled: Optional[bool] = None
    service_monitor: Optional[ServiceMonitor] = None


@dataclass
class Controller(SchemaModel):
    name: Optional[str] = None
    rbac: Optional[Rbac] = None
    replicas: Optional[int] = None
    resources: Optional[ResourceRequirements] = None
    node_selector: Optional[dict[str, str]] = None
    tolerations: Optional[list[Toleration]] = None
    affinity: Optional[dict[str, Any]] = None
    priority_class_name: Optional[str] = None
    metrics: Optional[ControllerMetrics] = None

    def __post_init__(self):
        if self.replicas is not None and self.replicas < 0:
            raise ValueError(f"`replicas` must not be negative, got {self.replicas}")


@dataclass
class Webhook(SchemaModel):
    enabled: Optional[bool] = None
    port: Optional[int] = None
    replicas: Optional[int] = None


@dataclass
class StreamingVersion(SchemaModel):
    version: str
    nats_streaming_image: Optional[str] = None
    metrics_exporter_image: Optional[str] = None
    nats_image: Optional[str] = None
    config_reloader_image: Optional[str] = None
    start_command: Optional[str] = None


@dataclass
class NatsConfigs(SchemaModel):
    versions: Optional[list[StreamingVersion]] = None


@dataclass
class JetStreamConfigs(SchemaModel):
    settings: Optional[str] = None
    stream_config: Optional[str] = None
    versions: Optional[list[StreamingVersion]] = None


@dataclass
class Configs(SchemaModel):
    nats: Optional[NatsConfigs] = None
    jetstream: Optional[JetStreamConfigs] = None


@dataclass
class ArgoEventsValues(SchemaModel):
    create_aggregate_roles: Optional[bool] = None
    crds: Optional[Crds] = None
    global_: Optional[Global] = alias("global")
    configs: Optional[Configs] = None
    controller: Optional[Controller] = None
    webhook: Optional[Webhook] = None
    extra_objects: Optional[list[dict[str, Any]]] = None
