from dataclasses import dataclass
from typing import Optional, Union

from infra_kube.lib.kubernetes.crds.core import (
    Affinity,
    Container,
    LocalObjectReference,
    Metadata,
    PodSecurityContext,
    SecretKeySelector,
    Toleration,
    Volume,
)
from infra_kube.lib.kubernetes.schema import SchemaModel

API_VERSION = "argoproj.io/v1alpha1"

Int64OrString = Union[int, str]
Amount = Union[int, float, str]


@dataclass
class Backoff(SchemaModel):
    duration: Optional[Int64OrString] = None
    """Initial duration, a number of nanoseconds or a duration string like ``10s``"""

    factor: Optional[Amount] = None
    jitter: Optional[Amount] = None
    steps: Optional[int] = None


@dataclass
class TLSConfig(SchemaModel):
    ca_cert_secret: Optional[SecretKeySelector] = None
    client_cert_secret: Optional[SecretKeySelector] = None
    client_key_secret: Optional[SecretKeySelector] = None
    insecure_skip_verify: Optional[bool] = None


@dataclass
class BasicAuth(SchemaModel):
    username: Optional[SecretKeySelector] = None
    password: Optional[SecretKeySelector] = None


@dataclass
class SASLConfig(SchemaModel):
    mechanism: Optional[str] = None
    user: Optional[SecretKeySelector] = None
    password: Optional[SecretKeySelector] = None


@dataclass
class Template(SchemaModel):
    """Pod template of the deployment generated for an EventSource or a Sensor"""

    metadata: Optional[Metadata] = None
    service_account_name: Optional[str] = None
    container: Optional[Container] = None
    volumes: Optional[list[Volume]] = None
    security_context: Optional[PodSecurityContext] = None
    node_selector: Optional[dict[str, str]] = None
    tolerations: Optional[list[Toleration]] = None
    image_pull_secrets: Optional[list[LocalObjectReference]] = None
    priority_class_name: Optional[str] = None
    priority: Optional[int] = None
    affinity: Optional[Affinity] = None
