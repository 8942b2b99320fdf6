"""
Deep partial of the SeaweedFS chart values (oyelowo/seaweedfs 3.30).

Every field is optional, unset fields fall back to the chart defaults. Keys that are multi-line YAML strings in the
chart (``affinity``, ``tolerations``, ``nodeSelector``, ``extraVolumes``,...) are typed as ``str``.
"""
from dataclasses import dataclass
from typing import Any, Optional, Union

from infra_kube.lib.kubernetes.quantity import is_memory
from infra_kube.lib.kubernetes.schema import SchemaModel, alias


def _check_non_negative(obj, *names: str):
    for name in names:
        value = getattr(obj, name)
        if value is not None and value < 0:
            raise ValueError(f"`{name}` must not be negative, got {value}")


@dataclass
class Monitoring(SchemaModel):
    enabled: Optional[bool] = None
    gateway_host: Optional[str] = None
    gateway_port: Optional[int] = None


@dataclass
class Global(SchemaModel):
    image_name: Optional[str] = None
    image_pull_policy: Optional[str] = None
    image_pull_secrets: Optional[str] = None
    restart_policy: Optional[str] = None
    logging_level: Optional[int] = None
    enable_security: Optional[bool] = None
    monitoring: Optional[Monitoring] = None
    enable_replication: Optional[bool] = None
    # the chart spells it this way
    replication_placment: Optional[str] = None
    extra_environment_vars: Optional[dict[str, str]] = None


@dataclass
class Image(SchemaModel):
    registry: Optional[str] = None
    repository: Optional[str] = None


@dataclass
class Storage(SchemaModel):
    type: Optional[str] = None
    """``persistentVolumeClaim``, ``hostPath`` or ``emptyDir``"""

    size: Optional[str] = None
    storage_class: Optional[str] = None
    host_path_prefix: Optional[str] = None

    def __post_init__(self):
        # the chart accepts an empty size for hostPath volumes
        if self.size and not is_memory(self.size):
            raise ValueError(f"`{self.size}` is not a valid volume size")


@dataclass
class Ingress(SchemaModel):
    enabled: Optional[bool] = None
    class_name: Optional[str] = None
    host: Optional[str] = None
    annotations: Optional[dict[str, str]] = None


@dataclass
class Master(SchemaModel):
    enabled: Optional[bool] = None
    repository: Optional[str] = None
    image_name: Optional[str] = None
    image_tag: Optional[str] = None
    image_override: Optional[str] = None
    restart_policy: Optional[str] = None
    replicas: Optional[int] = None
    port: Optional[int] = None
    grpc_port: Optional[int] = None
    metrics_port: Optional[int] = None
    ip_bind: Optional[str] = None
    volume_preallocate: Optional[bool] = None
    volume_size_limit_mb: Optional[int] = alias("volumeSizeLimitMB")
    logging_override_level: Optional[int] = None
    pulse_seconds: Optional[int] = None
    garbage_threshold: Optional[float] = None
    metrics_interval_sec: Optional[int] = None
    default_replication: Optional[str] = None
    disable_http: Optional[bool] = None
    data: Optional[Storage] = None
    logs: Optional[Storage] = None
    init_containers: Optional[str] = None
    extra_volumes: Optional[str] = None
    extra_volume_mounts: Optional[str] = None
    resources: Optional[Union[str, dict[str, Any]]] = None
    update_partition: Optional[int] = None
    affinity: Optional[str] = None
    tolerations: Optional[str] = None
    node_selector: Optional[str] = None
    priority_class_name: Optional[str] = None
    ingress: Optional[Ingress] = None
    extra_environment_vars: Optional[dict[str, Union[str, int]]] = None

    def __post_init__(self):
        _check_non_negative(self, "replicas", "update_partition", "volume_size_limit_mb")


@dataclass
class Volume(SchemaModel):
    enabled: Optional[bool] = None
    image_override: Optional[str] = None
    replicas: Optional[int] = None
    port: Optional[int] = None
    grpc_port: Optional[int] = None
    metrics_port: Optional[int] = None
    ip_bind: Optional[str] = None
    compaction_mbps: Optional[int] = alias("compactionMBps")
    file_size_limit_mb: Optional[int] = alias("fileSizeLimitMB")
    min_free_space_percent: Optional[int] = None
    data: Optional[Storage] = None
    idx: Optional[Storage] = None
    logs: Optional[Storage] = None
    node_selector: Optional[str] = None
    resources: Optional[Union[str, dict[str, Any]]] = None
    extra_environment_vars: Optional[dict[str, str]] = None

    def __post_init__(self):
        _check_non_negative(self, "replicas")


@dataclass
class FilerS3(SchemaModel):
    enabled: Optional[bool] = None
    port: Optional[int] = None
    enable_auth: Optional[bool] = None
    allow_empty_folder: Optional[bool] = None
    domain_name: Optional[str] = None
    skip_auth_secret_creation: Optional[bool] = None
    audit_log_config: Optional[dict[str, Any]] = None


@dataclass
class Filer(SchemaModel):
    enabled: Optional[bool] = None
    image_override: Optional[str] = None
    replicas: Optional[int] = None
    port: Optional[int] = None
    grpc_port: Optional[int] = None
    metrics_port: Optional[int] = None
    default_replica_placement: Optional[str] = None
    max_mb: Optional[int] = alias("maxMB")
    encrypt_volume_data: Optional[bool] = None
    dir_list_limit: Optional[int] = None
    data: Optional[Storage] = None
    logs: Optional[Storage] = None
    affinity: Optional[str] = None
    node_selector: Optional[str] = None
    resources: Optional[Union[str, dict[str, Any]]] = None
    ingress: Optional[Ingress] = None
    extra_environment_vars: Optional[dict[str, str]] = None
    s3: Optional[FilerS3] = None

    def __post_init__(self):
        _check_non_negative(self, "replicas", "dir_list_limit")


@dataclass
class S3(SchemaModel):
    enabled: Optional[bool] = None
    enable_auth: Optional[bool] = None
    replicas: Optional[int] = None
    port: Optional[int] = None
    metrics_port: Optional[int] = None
    allow_empty_folder: Optional[bool] = None
    domain_name: Optional[str] = None
    skip_auth_secret_creation: Optional[bool] = None
    audit_log_config: Optional[dict[str, Any]] = None
    node_selector: Optional[str] = None

    def __post_init__(self):
        _check_non_negative(self, "replicas")


@dataclass
class Certificates(SchemaModel):
    common_name: Optional[str] = None
    ip_addresses: Optional[list[str]] = None
    key_algorithm: Optional[str] = None
    key_size: Optional[int] = None
    duration: Optional[str] = None
    renew_before: Optional[str] = None


@dataclass
class SeaweedfsValues(SchemaModel):
    global_: Optional[Global] = alias("global")
    image: Optional[Image] = None
    master: Optional[Master] = None
    volume: Optional[Volume] = None
    filer: Optional[Filer] = None
    s3: Optional[S3] = None
    certificates: Optional[Certificates] = None
