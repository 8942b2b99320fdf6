from typing import Optional

from infra_kube.lib.kubernetes.crds.argo_events import (
    EventBus,
    EventBusSpec,
    JetStreamBus,
    NATSBus,
    NativeStrategy,
    PersistenceStrategy,
)
from infra_kube.lib.kubernetes.crds.core import (
    Affinity,
    LabelSelector,
    ObjectMeta,
    PodAffinity,
    PodAffinityTerm,
    WeightedPodAffinityTerm,
)
from infra_kube.lib.kubernetes.labels import get_labels
from infra_kube.lib.kubernetes.namespaces import Namespace
from .config import ArgoEventsConfig, EventBusType


def _anti_affinity(bus_name: str) -> Affinity:
    # labels the EventBus controller puts on the bus pods
    selector = LabelSelector(match_labels={"controller": "eventbus-controller", "eventbus-name": bus_name})

    return Affinity(
        pod_anti_affinity=PodAffinity(
            preferred_during_scheduling_ignored_during_execution=[
                WeightedPodAffinityTerm(
                    weight=100,
                    pod_affinity_term=PodAffinityTerm(
                        topology_key="kubernetes.io/hostname",
                        label_selector=selector,
                    ),
                )
            ]
        )
    )


def _persistence(config: ArgoEventsConfig) -> Optional[PersistenceStrategy]:
    if config.persistence_size is None:
        return None

    return PersistenceStrategy(
        storage_class_name=config.storage_class,
        access_mode="ReadWriteOnce",
        volume_size=config.persistence_size,
    )


def build_event_bus(config: ArgoEventsConfig) -> EventBus:
    """
    The EventBus shared by the cluster's EventSources and Sensors

    :param config: Argo Events config
    :return: EventBus
    """
    affinity = _anti_affinity(config.bus_name) if config.anti_affinity else None

    if config.bus_type is EventBusType.NATIVE:
        spec = EventBusSpec(
            nats=NATSBus(
                native=NativeStrategy(
                    replicas=config.bus_replicas,
                    auth="token",
                    persistence=_persistence(config),
                    affinity=affinity,
                )
            )
        )
    else:
        spec = EventBusSpec(
            jet_stream=JetStreamBus(
                version=config.jetstream_version,
                replicas=config.bus_replicas,
                persistence=_persistence(config),
                affinity=affinity,
            )
        )

    return EventBus(
        metadata=ObjectMeta(
            name=config.bus_name,
            namespace=Namespace.ARGO_EVENT.value,
            labels=get_labels("argo-events", "eventbus"),
        ),
        spec=spec,
    )
