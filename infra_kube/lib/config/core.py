from enum import Enum
from pathlib import Path
from typing import Optional

from pulumi import Config

from .infra_env import infra_env

infrakube_config = Config("infrakube")

label_namespace = infra_env.get("label_namespace", "infra-kube")
"""Labels created using the labelling helpers use this as their prefix, e.g. `infra-kube/environment`"""

DEFAULT_MANIFESTS_DIR = "generated_manifests"


class Environment(str, Enum):
    TEST = "test"
    LOCAL = "local"
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


def get_environment() -> Environment:
    """
    Returns the environment this program deploys to, set with `environment` in your Infra.common.yaml

    :return: Environment
    """
    environment = infra_env.require("environment")

    try:
        return Environment(environment)
    except ValueError:
        raise ValueError(
            f"unknown environment `{environment}`, expected one of {', '.join(e.value for e in Environment)}"
        )


def render_manifests_enabled() -> bool:
    """
    Whether Kubernetes providers should render YAML to the manifests directory instead of applying to a cluster

    :return: bool
    """
    return bool(infra_env.get("render_manifests", False))


def get_manifests_base_dir() -> Path:
    """
    Returns the base directory for rendered manifests

    :return: Path
    """
    return Path(infra_env.get("manifests_dir", DEFAULT_MANIFESTS_DIR))


def get_kube_context() -> Optional[str]:
    """
    Returns the kubeconfig context to deploy with, if one is configured

    :return: Context name
    """
    return infra_env.get("kube_context")


def get_provider_override() -> Optional[str]:
    """
    Retrieve the provider override for the current module (`infrakube:provider: myprovider`)

    :return: Provider name
    """
    return infrakube_config.get("provider")
