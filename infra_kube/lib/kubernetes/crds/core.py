"""
Kubernetes core/v1 shapes embedded in custom resources.

Only the fields the Argo Events CRDs reference are mirrored. Every field is optional unless the API server requires
it, matching the upstream OpenAPI definitions.
"""
from dataclasses import dataclass, field
from typing import Optional, Union

from infra_kube.lib.kubernetes.schema import SchemaModel, alias

IntOrString = Union[int, str]


@dataclass
class ObjectMeta(SchemaModel):
    name: Optional[str] = None
    namespace: Optional[str] = None
    labels: Optional[dict[str, str]] = None
    annotations: Optional[dict[str, str]] = None
    generate_name: Optional[str] = None
    finalizers: Optional[list[str]] = None
    resource_version: Optional[str] = None
    uid: Optional[str] = None
    generation: Optional[int] = None
    creation_timestamp: Optional[str] = None


@dataclass
class Metadata(SchemaModel):
    """Labels and annotations applied to generated pods and services"""

    labels: Optional[dict[str, str]] = None
    annotations: Optional[dict[str, str]] = None


@dataclass
class LocalObjectReference(SchemaModel):
    name: Optional[str] = None


@dataclass
class SecretKeySelector(SchemaModel):
    key: str
    name: Optional[str] = None
    optional: Optional[bool] = None


@dataclass
class ConfigMapKeySelector(SchemaModel):
    key: str
    name: Optional[str] = None
    optional: Optional[bool] = None


@dataclass
class ObjectFieldSelector(SchemaModel):
    field_path: str
    api_version: Optional[str] = None


@dataclass
class ResourceFieldSelector(SchemaModel):
    resource: str
    container_name: Optional[str] = None
    divisor: Optional[IntOrString] = None


@dataclass
class EnvVarSource(SchemaModel):
    config_map_key_ref: Optional[ConfigMapKeySelector] = None
    field_ref: Optional[ObjectFieldSelector] = None
    resource_field_ref: Optional[ResourceFieldSelector] = None
    secret_key_ref: Optional[SecretKeySelector] = None


@dataclass
class EnvVar(SchemaModel):
    name: str
    value: Optional[str] = None
    value_from: Optional[EnvVarSource] = None


@dataclass
class EnvFromSource(SchemaModel):
    prefix: Optional[str] = None
    config_map_ref: Optional[LocalObjectReference] = None
    secret_ref: Optional[LocalObjectReference] = None


@dataclass
class ResourceRequirements(SchemaModel):
    limits: Optional[dict[str, IntOrString]] = None
    requests: Optional[dict[str, IntOrString]] = None


@dataclass
class Capabilities(SchemaModel):
    add: Optional[list[str]] = None
    drop: Optional[list[str]] = None


@dataclass
class SELinuxOptions(SchemaModel):
    level: Optional[str] = None
    role: Optional[str] = None
    type: Optional[str] = None
    user: Optional[str] = None


@dataclass
class SeccompProfile(SchemaModel):
    type: str
    localhost_profile: Optional[str] = None


@dataclass
class Sysctl(SchemaModel):
    name: str
    value: str


@dataclass
class SecurityContext(SchemaModel):
    allow_privilege_escalation: Optional[bool] = None
    capabilities: Optional[Capabilities] = None
    privileged: Optional[bool] = None
    proc_mount: Optional[str] = None
    read_only_root_filesystem: Optional[bool] = None
    run_as_group: Optional[int] = None
    run_as_non_root: Optional[bool] = None
    run_as_user: Optional[int] = None
    se_linux_options: Optional[SELinuxOptions] = alias("seLinuxOptions")
    seccomp_profile: Optional[SeccompProfile] = None


@dataclass
class PodSecurityContext(SchemaModel):
    fs_group: Optional[int] = None
    fs_group_change_policy: Optional[str] = None
    run_as_group: Optional[int] = None
    run_as_non_root: Optional[bool] = None
    run_as_user: Optional[int] = None
    se_linux_options: Optional[SELinuxOptions] = alias("seLinuxOptions")
    seccomp_profile: Optional[SeccompProfile] = None
    supplemental_groups: Optional[list[int]] = None
    sysctls: Optional[list[Sysctl]] = None


@dataclass
class Toleration(SchemaModel):
    effect: Optional[str] = None
    key: Optional[str] = None
    operator: Optional[str] = None
    toleration_seconds: Optional[int] = None
    value: Optional[str] = None


@dataclass
class LabelSelectorRequirement(SchemaModel):
    key: str
    operator: str
    values: Optional[list[str]] = None


@dataclass
class LabelSelector(SchemaModel):
    match_expressions: Optional[list[LabelSelectorRequirement]] = None
    match_labels: Optional[dict[str, str]] = None


@dataclass
class NodeSelectorRequirement(SchemaModel):
    key: str
    operator: str
    values: Optional[list[str]] = None


@dataclass
class NodeSelectorTerm(SchemaModel):
    match_expressions: Optional[list[NodeSelectorRequirement]] = None
    match_fields: Optional[list[NodeSelectorRequirement]] = None


@dataclass
class NodeSelector(SchemaModel):
    node_selector_terms: list[NodeSelectorTerm] = field(default_factory=list)


@dataclass
class PreferredSchedulingTerm(SchemaModel):
    preference: NodeSelectorTerm
    weight: int


@dataclass
class NodeAffinity(SchemaModel):
    preferred_during_scheduling_ignored_during_execution: Optional[list[PreferredSchedulingTerm]] = None
    required_during_scheduling_ignored_during_execution: Optional[NodeSelector] = None


@dataclass
class PodAffinityTerm(SchemaModel):
    topology_key: str
    label_selector: Optional[LabelSelector] = None
    namespace_selector: Optional[LabelSelector] = None
    namespaces: Optional[list[str]] = None


@dataclass
class WeightedPodAffinityTerm(SchemaModel):
    pod_affinity_term: PodAffinityTerm
    weight: int


@dataclass
class PodAffinity(SchemaModel):
    preferred_during_scheduling_ignored_during_execution: Optional[list[WeightedPodAffinityTerm]] = None
    required_during_scheduling_ignored_during_execution: Optional[list[PodAffinityTerm]] = None


@dataclass
class Affinity(SchemaModel):
    node_affinity: Optional[NodeAffinity] = None
    pod_affinity: Optional[PodAffinity] = None
    pod_anti_affinity: Optional[PodAffinity] = None


@dataclass
class ExecAction(SchemaModel):
    command: Optional[list[str]] = None


@dataclass
class HTTPHeader(SchemaModel):
    name: str
    value: str


@dataclass
class HTTPGetAction(SchemaModel):
    port: IntOrString
    host: Optional[str] = None
    http_headers: Optional[list[HTTPHeader]] = None
    path: Optional[str] = None
    scheme: Optional[str] = None


@dataclass
class TCPSocketAction(SchemaModel):
    port: IntOrString
    host: Optional[str] = None


@dataclass
class GRPCAction(SchemaModel):
    port: int
    service: Optional[str] = None


@dataclass
class Probe(SchemaModel):
    exec: Optional[ExecAction] = None
    http_get: Optional[HTTPGetAction] = None
    tcp_socket: Optional[TCPSocketAction] = None
    grpc: Optional[GRPCAction] = None
    failure_threshold: Optional[int] = None
    initial_delay_seconds: Optional[int] = None
    period_seconds: Optional[int] = None
    success_threshold: Optional[int] = None
    termination_grace_period_seconds: Optional[int] = None
    timeout_seconds: Optional[int] = None


@dataclass
class VolumeMount(SchemaModel):
    mount_path: str
    name: str
    mount_propagation: Optional[str] = None
    read_only: Optional[bool] = None
    sub_path: Optional[str] = None
    sub_path_expr: Optional[str] = None


@dataclass
class EmptyDirVolumeSource(SchemaModel):
    medium: Optional[str] = None
    size_limit: Optional[IntOrString] = None


@dataclass
class HostPathVolumeSource(SchemaModel):
    path: str
    type: Optional[str] = None


@dataclass
class KeyToPath(SchemaModel):
    key: str
    path: str
    mode: Optional[int] = None


@dataclass
class SecretVolumeSource(SchemaModel):
    default_mode: Optional[int] = None
    items: Optional[list[KeyToPath]] = None
    optional: Optional[bool] = None
    secret_name: Optional[str] = None


@dataclass
class ConfigMapVolumeSource(SchemaModel):
    default_mode: Optional[int] = None
    items: Optional[list[KeyToPath]] = None
    name: Optional[str] = None
    optional: Optional[bool] = None


@dataclass
class PersistentVolumeClaimVolumeSource(SchemaModel):
    claim_name: str
    read_only: Optional[bool] = None


@dataclass
class Volume(SchemaModel):
    name: str
    empty_dir: Optional[EmptyDirVolumeSource] = None
    host_path: Optional[HostPathVolumeSource] = None
    secret: Optional[SecretVolumeSource] = None
    config_map: Optional[ConfigMapVolumeSource] = None
    persistent_volume_claim: Optional[PersistentVolumeClaimVolumeSource] = None


@dataclass
class ContainerPort(SchemaModel):
    container_port: int
    host_ip: Optional[str] = alias("hostIP")
    host_port: Optional[int] = None
    name: Optional[str] = None
    protocol: Optional[str] = None


@dataclass
class Container(SchemaModel):
    name: Optional[str] = None
    image: Optional[str] = None
    image_pull_policy: Optional[str] = None
    command: Optional[list[str]] = None
    args: Optional[list[str]] = None
    working_dir: Optional[str] = None
    env: Optional[list[EnvVar]] = None
    env_from: Optional[list[EnvFromSource]] = None
    ports: Optional[list[ContainerPort]] = None
    resources: Optional[ResourceRequirements] = None
    volume_mounts: Optional[list[VolumeMount]] = None
    liveness_probe: Optional[Probe] = None
    readiness_probe: Optional[Probe] = None
    startup_probe: Optional[Probe] = None
    security_context: Optional[SecurityContext] = None


@dataclass
class ServicePort(SchemaModel):
    port: int
    name: Optional[str] = None
    node_port: Optional[int] = None
    protocol: Optional[str] = None
    target_port: Optional[IntOrString] = None
    app_protocol: Optional[str] = None


@dataclass
class Condition(SchemaModel):
    """Status condition reported by the Argo Events controllers"""

    type: str
    status: str
    last_transition_time: Optional[str] = None
    reason: Optional[str] = None
    message: Optional[str] = None


@dataclass
class Status(SchemaModel):
    conditions: Optional[list[Condition]] = None
