from dataclasses import dataclass
from enum import Enum
from typing import Optional

from infra_kube.lib.kubernetes.quantity import Quantity


class EventBusType(str, Enum):
    JETSTREAM = "jetstream"
    NATIVE = "native"


@dataclass
class ArgoEventsConfig:
    bus_type: EventBusType = EventBusType.JETSTREAM
    """Technology backing the default EventBus, NATS streaming (`native`) is deprecated upstream"""

    bus_name: str = "default"
    """EventSources and Sensors without an `eventBusName` use the bus called `default`"""

    bus_replicas: int = 3
    """EventBus StatefulSet replicas"""

    jetstream_version: str = "latest"
    """JetStream version, one of the versions configured in the chart"""

    persistence_size: Optional[Quantity] = Quantity("10Gi")
    """EventBus volume size, no persistence when unset"""

    storage_class: Optional[str] = None
    """EventBus volume storage class, cluster default when unset"""

    anti_affinity: bool = True
    """Prefer spreading EventBus pods over nodes"""

    controller_replicas: int = 1
    """Controller manager replicas"""

    webhook_enabled: bool = False
    """Run the validating admission webhook"""

    metrics_enabled: bool = False
    """Create a ServiceMonitor for the controller"""

    def __post_init__(self):
        if self.bus_replicas < 3:
            raise ValueError(f"`bus_replicas` must be at least 3 for a quorum, got {self.bus_replicas}")

        if self.controller_replicas < 0:
            raise ValueError(f"`controller_replicas` must not be negative, got {self.controller_replicas}")


@dataclass
class ArgoEventsExports:
    release: str
    """Helm release name"""

    namespace: str
    """Namespace the controller and the EventBus run in"""

    chart_version: str
    """Installed chart version"""

    event_bus_name: str
    """Name of the default EventBus"""
