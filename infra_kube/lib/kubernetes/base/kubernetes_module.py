from abc import ABC

from pulumi import ResourceOptions

from infra_kube.lib.base import BaseModule, ConfigType
from infra_kube.lib.kubernetes.namespaces import ResourceType
from infra_kube.lib.kubernetes.provider import create_provider


class KubernetesModule(BaseModule, ABC):
    """
    Base class for infra-kube modules using the Kubernetes provider
    """

    provider: str = "kubernetes"

    resource_type: ResourceType = ResourceType.INFRASTRUCTURE
    """Manifests sub-directory used when rendering YAML"""

    def __init__(self, name: str, config: ConfigType, opts: ResourceOptions = None):
        super().__init__(name, config, opts)

        self.kubernetes_provider = create_provider(name, self.resource_type, opts=ResourceOptions(parent=self))

    @property
    def child_opts(self) -> ResourceOptions:
        """Resource options for objects created by this module"""
        return ResourceOptions(parent=self, provider=self.kubernetes_provider)
