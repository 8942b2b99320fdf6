from dataclasses import fields
from typing import Any

from pulumi import ResourceOptions
from pulumi_kubernetes.apiextensions import CustomResource

from infra_kube.lib.kubernetes.schema import SchemaModel


class CrdResource(SchemaModel):
    """
    Mixin for top-level custom resources.

    The dataclass must declare ``api_version`` and ``kind`` with their fixed values as defaults, plus ``metadata``
    and ``spec``. Parsing a manifest of another kind fails.
    """

    def __post_init__(self):
        for f in fields(self):
            if f.name in ("api_version", "kind") and getattr(self, f.name) != f.default:
                raise ValueError(f"expected {f.name} `{f.default}`, got `{getattr(self, f.name)}`")

    @property
    def name(self) -> str:
        return self.metadata.name

    def custom_resource(self, resource_name: str, opts: ResourceOptions = None) -> CustomResource:
        """Create this object in the cluster

        :param resource_name: Pulumi resource name
        :param opts: Resource options, usually carrying the provider
        :return: The custom resource
        """
        manifest: dict[str, Any] = self.to_manifest()

        return CustomResource(
            resource_name,
            api_version=manifest["apiVersion"],
            kind=manifest["kind"],
            metadata=manifest.get("metadata"),
            spec=manifest.get("spec"),
            opts=opts,
        )
