from dataclasses import dataclass, field
from typing import Any, Optional

from infra_kube.lib.kubernetes.crds.base import CrdResource
from infra_kube.lib.kubernetes.crds.core import ConfigMapKeySelector, ObjectMeta, SecretKeySelector, Status
from infra_kube.lib.kubernetes.schema import SchemaModel, alias
from .common import API_VERSION, Backoff, BasicAuth, TLSConfig, Template


@dataclass
class TimeFilter(SchemaModel):
    start: str
    stop: str


@dataclass
class EventContext(SchemaModel):
    id: Optional[str] = None
    source: Optional[str] = None
    specversion: Optional[str] = None
    type: Optional[str] = None
    data_content_type: Optional[str] = alias("datacontenttype")
    subject: Optional[str] = None
    time: Optional[str] = None


@dataclass
class DataFilter(SchemaModel):
    path: str
    type: str
    value: Optional[list[str]] = None
    comparator: Optional[str] = None
    template: Optional[str] = None


@dataclass
class PayloadField(SchemaModel):
    name: str
    path: str


@dataclass
class ExprFilter(SchemaModel):
    expr: str
    fields: list[PayloadField] = field(default_factory=list)


@dataclass
class EventDependencyFilter(SchemaModel):
    time: Optional[TimeFilter] = None
    context: Optional[EventContext] = None
    data: Optional[list[DataFilter]] = None
    exprs: Optional[list[ExprFilter]] = None
    data_logical_operator: Optional[str] = None
    expr_logical_operator: Optional[str] = None
    script: Optional[str] = None


@dataclass
class EventDependencyTransformer(SchemaModel):
    jq: Optional[str] = None
    script: Optional[str] = None


@dataclass
class EventDependency(SchemaModel):
    name: str
    event_source_name: str
    event_name: str
    filters: Optional[EventDependencyFilter] = None
    transform: Optional[EventDependencyTransformer] = None
    filters_logical_operator: Optional[str] = None


@dataclass
class TriggerParameterSource(SchemaModel):
    dependency_name: str
    context_key: Optional[str] = None
    context_template: Optional[str] = None
    data_key: Optional[str] = None
    data_template: Optional[str] = None
    value: Optional[str] = None
    use_raw_data: Optional[bool] = None


@dataclass
class TriggerParameter(SchemaModel):
    src: Optional[TriggerParameterSource] = None
    dest: Optional[str] = None
    operation: Optional[str] = None
    """``overwrite`` (default), ``append`` or ``prepend``"""


@dataclass
class URLArtifact(SchemaModel):
    path: str
    verify_cert: Optional[bool] = None


@dataclass
class FileArtifact(SchemaModel):
    path: Optional[str] = None


@dataclass
class ArtifactLocation(SchemaModel):
    resource: Optional[dict[str, Any]] = None
    """Inline Kubernetes object"""

    configmap: Optional[ConfigMapKeySelector] = None
    url: Optional[URLArtifact] = None
    inline: Optional[str] = None
    file: Optional[FileArtifact] = None


@dataclass
class StandardK8STrigger(SchemaModel):
    source: Optional[ArtifactLocation] = None
    operation: Optional[str] = None
    """``create``, ``update``, ``patch`` or ``delete``"""

    parameters: Optional[list[TriggerParameter]] = None
    patch_strategy: Optional[str] = None
    live_object: Optional[bool] = None


@dataclass
class ArgoWorkflowTrigger(SchemaModel):
    source: Optional[ArtifactLocation] = None
    operation: Optional[str] = None
    """``submit``, ``resubmit``, ``retry``, ``resume``, ``suspend``, ``terminate`` or ``stop``"""

    parameters: Optional[list[TriggerParameter]] = None
    args: Optional[list[str]] = None


@dataclass
class SecureHeader(SchemaModel):
    name: str
    value_from: Optional[dict[str, SecretKeySelector]] = None


@dataclass
class HTTPTrigger(SchemaModel):
    url: str
    payload: Optional[list[TriggerParameter]] = None
    tls: Optional[TLSConfig] = None
    method: Optional[str] = None
    parameters: Optional[list[TriggerParameter]] = None
    timeout: Optional[int] = None
    basic_auth: Optional[BasicAuth] = None
    headers: Optional[dict[str, str]] = None
    secure_headers: Optional[list[SecureHeader]] = None


@dataclass
class LogTrigger(SchemaModel):
    interval_seconds: Optional[int] = None


@dataclass
class ConditionsResetByTime(SchemaModel):
    cron: Optional[str] = None
    timezone: Optional[str] = None


@dataclass
class ConditionsResetCriteria(SchemaModel):
    by_time: Optional[ConditionsResetByTime] = None


@dataclass
class TriggerTemplate(SchemaModel):
    name: str
    conditions: Optional[str] = None
    """Boolean expression over dependency names, e.g. ``dep01 && dep02``"""

    k8s: Optional[StandardK8STrigger] = None
    argo_workflow: Optional[ArgoWorkflowTrigger] = None
    http: Optional[HTTPTrigger] = None
    log: Optional[LogTrigger] = None
    conditions_reset: Optional[list[ConditionsResetCriteria]] = None

    def __post_init__(self):
        kinds = [name for name in ("k8s", "argo_workflow", "http", "log") if getattr(self, name) is not None]
        if len(kinds) > 1:
            raise ValueError(f"trigger `{self.name}` sets more than one trigger type: {', '.join(kinds)}")


@dataclass
class K8SResourcePolicy(SchemaModel):
    backoff: Optional[Backoff] = None
    labels: Optional[dict[str, str]] = None
    error_on_backoff_timeout: Optional[bool] = None


@dataclass
class StatusPolicy(SchemaModel):
    allow: list[int] = field(default_factory=list)


@dataclass
class TriggerPolicy(SchemaModel):
    k8s: Optional[K8SResourcePolicy] = None
    status: Optional[StatusPolicy] = None


@dataclass
class RateLimit(SchemaModel):
    unit: Optional[str] = None
    """``Second``, ``Minute`` or ``Hour``"""

    requests_per_unit: Optional[int] = None


@dataclass
class Trigger(SchemaModel):
    template: Optional[TriggerTemplate] = None
    parameters: Optional[list[TriggerParameter]] = None
    policy: Optional[TriggerPolicy] = None
    retry_strategy: Optional[Backoff] = None
    rate_limit: Optional[RateLimit] = None


@dataclass
class SensorSpec(SchemaModel):
    dependencies: list[EventDependency] = field(default_factory=list)
    triggers: list[Trigger] = field(default_factory=list)
    template: Optional[Template] = None
    error_on_failed_round: Optional[bool] = None
    event_bus_name: Optional[str] = None
    replicas: Optional[int] = None
    revision_history_limit: Optional[int] = None
    logging_fields: Optional[dict[str, str]] = None

    def __post_init__(self):
        names = [dependency.name for dependency in self.dependencies]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"duplicate dependency names: {', '.join(duplicates)}")

        for trigger in self.triggers:
            for parameter in (trigger.parameters or []) + _template_parameters(trigger.template):
                if parameter.src and parameter.src.dependency_name not in names:
                    raise ValueError(
                        f"trigger parameter refers to unknown dependency `{parameter.src.dependency_name}`"
                    )


def _template_parameters(template: Optional[TriggerTemplate]) -> list[TriggerParameter]:
    if template is None:
        return []

    parameters = []
    for kind in (template.k8s, template.argo_workflow, template.http):
        if kind is not None and kind.parameters:
            parameters.extend(kind.parameters)
    if template.http is not None and template.http.payload:
        parameters.extend(template.http.payload)
    return parameters


@dataclass
class Sensor(CrdResource):
    api_version: str = API_VERSION
    kind: str = "Sensor"
    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: SensorSpec = field(default_factory=SensorSpec)
    status: Optional[Status] = None
