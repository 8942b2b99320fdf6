"""
Deep partial of the Bitnami sealed-secrets chart values.
"""
from dataclasses import dataclass
from typing import Any, Optional

from infra_kube.lib.kubernetes.crds.core import ResourceRequirements, Toleration
from infra_kube.lib.kubernetes.schema import SchemaModel


@dataclass
class Image(SchemaModel):
    registry: Optional[str] = None
    repository: Optional[str] = None
    tag: Optional[str] = None
    pull_policy: Optional[str] = None
    pull_secrets: Optional[list[str]] = None


@dataclass
class PodSecurityContext(SchemaModel):
    enabled: Optional[bool] = None
    fs_group: Optional[int] = None


@dataclass
class ContainerSecurityContext(SchemaModel):
    enabled: Optional[bool] = None
    read_only_root_filesystem: Optional[bool] = None
    run_as_non_root: Optional[bool] = None
    run_as_user: Optional[int] = None


@dataclass
class Service(SchemaModel):
    type: Optional[str] = None
    port: Optional[int] = None
    node_port: Optional[str] = None
    annotations: Optional[dict[str, str]] = None


@dataclass
class ServiceAccount(SchemaModel):
    create: Optional[bool] = None
    labels: Optional[dict[str, str]] = None
    name: Optional[str] = None


@dataclass
class Rbac(SchemaModel):
    create: Optional[bool] = None
    labels: Optional[dict[str, str]] = None
    psp_enabled: Optional[bool] = None


@dataclass
class NetworkPolicy(SchemaModel):
    enabled: Optional[bool] = None


@dataclass
class ServiceMonitor(SchemaModel):
    enabled: Optional[bool] = None
    namespace: Optional[str] = None
    labels: Optional[dict[str, str]] = None
    annotations: Optional[dict[str, str]] = None
    interval: Optional[str] = None
    scrape_timeout: Optional[str] = None


@dataclass
class Dashboards(SchemaModel):
    create: Optional[bool] = None
    labels: Optional[dict[str, str]] = None
    namespace: Optional[str] = None


@dataclass
class Metrics(SchemaModel):
    service_monitor: Optional[ServiceMonitor] = None
    dashboards: Optional[Dashboards] = None


@dataclass
class SealedSecretsValues(SchemaModel):
    image: Optional[Image] = None
    fullname_override: Optional[str] = None
    namespace_override: Optional[str] = None
    common_labels: Optional[dict[str, str]] = None
    common_annotations: Optional[dict[str, str]] = None
    create_controller: Optional[bool] = None
    secret_name: Optional[str] = None
    update_status: Optional[bool] = None
    keyrenewperiod: Optional[str] = None
    rate_limit: Optional[str] = None
    rate_limit_burst: Optional[str] = None
    additional_namespaces: Optional[list[str]] = None
    command: Optional[list[str]] = None
    args: Optional[list[str]] = None
    resources: Optional[ResourceRequirements] = None
    pod_security_context: Optional[PodSecurityContext] = None
    container_security_context: Optional[ContainerSecurityContext] = None
    pod_labels: Optional[dict[str, str]] = None
    pod_annotations: Optional[dict[str, str]] = None
    priority_class_name: Optional[str] = None
    affinity: Optional[dict[str, Any]] = None
    node_selector: Optional[dict[str, str]] = None
    tolerations: Optional[list[Toleration]] = None
    service: Optional[Service] = None
    service_account: Optional[ServiceAccount] = None
    rbac: Optional[Rbac] = None
    network_policy: Optional[NetworkPolicy] = None
    metrics: Optional[Metrics] = None
