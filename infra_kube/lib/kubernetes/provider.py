from pathlib import Path

from pulumi import ResourceOptions, log
from pulumi_kubernetes import Provider

from infra_kube.lib.config import (
    Environment,
    get_environment,
    get_kube_context,
    get_manifests_base_dir,
    render_manifests_enabled,
)
from .namespaces import ResourceType


def get_manifests_dir(resource_type: ResourceType, resource_name: str, environment: Environment) -> Path:
    """
    Directory that rendered manifests of a resource are written to

    e.g. generated_manifests/local/infrastructure/seaweedfs
         generated_manifests/local/infrastructure/sealed-secrets

    :param resource_type: infrastructure or services
    :param resource_name: Name of the resource (chart release, usually)
    :param environment: Environment the manifests are for
    :return: Path
    """
    return get_manifests_base_dir() / environment.value / resource_type.value / resource_name


def create_provider(name: str, resource_type: ResourceType, opts: ResourceOptions = None) -> Provider:
    """
    Create the Kubernetes provider a module deploys with

    When `render_manifests` is set in Infra.common.yaml nothing is applied to a cluster, the provider writes the YAML
    into the manifests directory instead (to be picked up by GitOps tooling).

    :param name: Resource name, also used as the manifests sub-directory
    :param resource_type: infrastructure or services
    :param opts: Resource options for the provider
    :return: A Kubernetes provider
    """
    if render_manifests_enabled():
        manifests_dir = get_manifests_dir(resource_type, name, get_environment())
        log.debug(f"provider `{name}` renders manifests to `{manifests_dir}`")

        return Provider(
            f"{resource_type.value}-{name}",
            render_yaml_to_directory=str(manifests_dir),
            opts=opts,
        )

    return Provider(
        f"{resource_type.value}-{name}",
        context=get_kube_context(),
        opts=opts,
    )
