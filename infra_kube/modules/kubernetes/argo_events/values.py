from typing import Any

from .config import ArgoEventsConfig


def build_argo_events_values(config: ArgoEventsConfig) -> dict[str, Any]:
    """
    Values tree for the argo-events chart

    The chart owns the CRDs, the EventBus is created next to it by the module.

    :param config: Argo Events config
    :return: Values tree
    """
    return {
        "crds": {
            "install": True,
            "keep": True,
        },
        "controller": {
            "replicas": config.controller_replicas,
            "metrics": {
                "enabled": config.metrics_enabled,
                "serviceMonitor": {
                    "enabled": config.metrics_enabled,
                },
            },
        },
        "webhook": {
            "enabled": config.webhook_enabled,
        },
    }
