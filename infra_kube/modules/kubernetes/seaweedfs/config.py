import re
from dataclasses import dataclass, field
from typing import Optional

from infra_kube.lib.kubernetes.namespaces import Namespace
from infra_kube.lib.kubernetes.quantity import Quantity

_PLACEMENT_RE = re.compile(r"^\d{3}$")


@dataclass
class StorageArgs:
    size: Quantity
    """Volume size, e.g. `24Ti`"""

    storage_class: str = "local-path-provisioner"
    """Storage class of the claim, any provisioner works"""

    type: str = "persistentVolumeClaim"
    """`persistentVolumeClaim` or `hostPath`"""


@dataclass
class SeaweedfsConfig:
    tikv_pd_address: str = f"tikv-pd.{Namespace.TIKV_ADMIN.value}:2379"
    """TiKV placement driver address the filer stores its metadata in"""

    master_replicas: int = 1
    """Number of master servers"""

    filer_replicas: int = 1
    """Number of filer servers"""

    volume_replicas: Optional[int] = None
    """Number of volume servers, chart default when unset"""

    s3_replicas: int = 1
    """Number of standalone S3 gateways"""

    master_data: StorageArgs = field(default_factory=lambda: StorageArgs(size=Quantity("0.4Ti")))
    """Master data volume"""

    filer_data: StorageArgs = field(default_factory=lambda: StorageArgs(size=Quantity("0.4Ti")))
    """Filer data volume"""

    volume_data: StorageArgs = field(default_factory=lambda: StorageArgs(size=Quantity("24Ti")))
    """Volume server data volume"""

    node_selector: str = 'sw-backend: "true"'
    """nodeSelector for master and S3 pods, as a YAML string"""

    logging_level: int = 1
    """glog verbosity"""

    replication_placement: str = "001"
    """
    Replication type XYZ:
    X replicas in other data centers, Y in other racks of the same data center, Z in other servers of the same rack
    """

    default_replication: str = "000"
    """Replication type for the master and the filer, same XYZ format as `replication_placement`"""

    enable_replication: bool = False
    """Use `replication_placement` instead of the master and filer defaults"""

    volume_size_limit_mb: int = 1000
    """Master stops assigning to volumes above this size"""

    metrics_interval_sec: int = 15
    """Prometheus push interval in seconds"""

    filer_s3_enabled: bool = True
    """Run the S3 API inside the filer"""

    standalone_s3_enabled: bool = False
    """Run separate S3 gateway pods"""

    ingress_enabled: bool = False
    """Expose the master UI with an ingress"""

    ingress_class_name: str = "nginx"
    """Ingress class for the master UI"""

    basic_auth_secret: str = "default/ingress-basic-auth-secret"
    """`namespace/name` of the htpasswd secret protecting the master UI"""

    image_name: str = "chrislusf/seaweedfs"
    """Image for all components"""

    image_pull_secrets: str = "imagepullsecret"
    """Pull secret name"""

    filer_image_override: str = "chrislusf/seaweedfs:3.29_full"
    """The filer needs the `_full` build, it has the TiKV store compiled in"""

    buckets_folder: str = "/buckets"
    """Directories under this folder become S3 buckets"""

    dir_list_limit: int = 1000
    """Limit on sub-directory listing size"""

    encrypt_volume_data: bool = False
    """Encrypt data on volume servers"""

    certificate_common_name: str = "SeaweedFS CA"
    """CA common name for the generated certificates"""

    def __post_init__(self):
        for name in ("replication_placement", "default_replication"):
            if not _PLACEMENT_RE.match(getattr(self, name)):
                raise ValueError(f"`{name}` must be three digits (XYZ), got `{getattr(self, name)}`")

        for name in ("master_replicas", "filer_replicas", "volume_replicas", "s3_replicas"):
            value = getattr(self, name)
            if value is not None and value < 0:
                raise ValueError(f"`{name}` must not be negative, got {value}")


@dataclass
class SeaweedfsExports:
    release: str
    """Helm release name"""

    namespace: str
    """Namespace SeaweedFS runs in"""

    chart_version: str
    """Installed chart version"""

    master_address: str
    """In-cluster master address"""

    filer_address: str
    """In-cluster filer address"""

    s3_address: Optional[str]
    """In-cluster S3 endpoint, if any S3 API is enabled"""
