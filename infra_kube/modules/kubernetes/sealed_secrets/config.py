import re
from dataclasses import dataclass, field
from typing import Optional

from infra_kube.lib.kubernetes.quantity import CpuQuantity, Quantity

_DURATION_RE = re.compile(r"^(?:\d+h)?(?:\d+m)?(?:\d+s)?$")


@dataclass
class TolerationArgs:
    operator: str = "Exists"
    """`Exists` or `Equal`"""

    effect: Optional[str] = "NoSchedule"
    """Taint effect to tolerate, every effect when unset"""

    key: Optional[str] = None
    """Taint key"""

    value: Optional[str] = None
    """Taint value, only with the `Equal` operator"""


@dataclass
class ResourceArgs:
    cpu: Optional[CpuQuantity] = None
    """CPU request, e.g. `100m`"""

    memory: Optional[Quantity] = None
    """Memory request, e.g. `128Mi`"""

    cpu_limit: Optional[CpuQuantity] = None
    """CPU limit"""

    memory_limit: Optional[Quantity] = None
    """Memory limit"""


@dataclass
class SealedSecretsConfig:
    key_renew_period: str = "720h"
    """How often a new sealing key is generated, `0` turns renewal off"""

    update_status: bool = True
    """Report unsealing errors in the SealedSecret status"""

    additional_namespaces: list[str] = field(default_factory=list)
    """Namespaces watched besides the controller's own, all namespaces when empty"""

    tolerations: list[TolerationArgs] = field(default_factory=lambda: [TolerationArgs()])
    """The controller runs on tainted nodes too, it has to be up before anything can be unsealed"""

    resources: Optional[ResourceArgs] = None
    """Controller resources, chart defaults when unset"""

    metrics_enabled: bool = False
    """Create a Prometheus ServiceMonitor for the controller"""

    controller_name: str = "sealed-secrets"
    """Name of the controller deployment and service, `kubeseal` looks for `sealed-secrets-controller` by default"""

    def __post_init__(self):
        if self.key_renew_period != "0" and not (self.key_renew_period and _DURATION_RE.match(self.key_renew_period)):
            raise ValueError(
                f"`key_renew_period` must be a duration such as `720h` or `0`, got `{self.key_renew_period}`"
            )


@dataclass
class SealedSecretsExports:
    release: str
    """Helm release name"""

    namespace: str
    """Namespace the controller runs in"""

    chart_version: str
    """Installed chart version"""

    controller_name: str
    """Controller deployment and service name, pass to `kubeseal --controller-name`"""
