from typing import Any, Optional

from .config import ResourceArgs, SealedSecretsConfig


def _plain(value: Optional[str]) -> Optional[str]:
    return None if value is None else str(value)


def _resources(resources: Optional[ResourceArgs]) -> Optional[dict[str, Any]]:
    if resources is None:
        return None

    return {
        "requests": {"cpu": _plain(resources.cpu), "memory": _plain(resources.memory)},
        "limits": {"cpu": _plain(resources.cpu_limit), "memory": _plain(resources.memory_limit)},
    }


def build_sealed_secrets_values(config: SealedSecretsConfig) -> dict[str, Any]:
    """
    Values tree for the sealed-secrets chart

    :param config: Sealed Secrets config
    :return: Values tree
    """
    return {
        "fullnameOverride": config.controller_name,
        "keyrenewperiod": config.key_renew_period,
        "updateStatus": config.update_status,
        "additionalNamespaces": config.additional_namespaces or None,
        "resources": _resources(config.resources),
        "tolerations": [
            {
                "operator": toleration.operator,
                "effect": toleration.effect,
                "key": toleration.key,
                "value": toleration.value,
            }
            for toleration in config.tolerations
        ],
        "metrics": {
            "serviceMonitor": {
                "enabled": config.metrics_enabled,
            },
        },
    }
