from abc import ABC, abstractmethod
from typing import Any, Type

from pulumi import ResourceOptions, log
from pulumi_kubernetes import core, meta

from infra_kube.lib.base import ConfigType
from infra_kube.lib.kubernetes.helm import HelmChart, HelmChartComponent, compact_values
from infra_kube.lib.kubernetes.labels import get_labels
from infra_kube.lib.kubernetes.namespaces import Namespace
from infra_kube.lib.kubernetes.schema import SchemaModel
from infra_kube.lib.kubernetes.values_schema import validate_values
from .kubernetes_module import KubernetesModule


class HelmChartModule(KubernetesModule, ABC):
    """
    Base class for modules whose main job is installing one Helm chart from the chart catalog

    Subclasses declare where the chart comes from and how its values are built; values are validated against
    ``values_schema`` before anything is handed to Helm.
    """

    chart_repo: str
    """Repository name in the chart catalog"""

    chart_key: str
    """Chart key within the repository"""

    namespace: Namespace
    """Namespace the chart is installed into"""

    values_schema: Type[SchemaModel]
    """Deep partial of the chart's values"""

    create_namespace: bool = True
    """Create ``namespace`` before installing, turn off for namespaces that come with the cluster"""

    @classmethod
    @abstractmethod
    def render_values(cls, config: ConfigType) -> dict[str, Any]:
        """Build the chart's values tree from the module config

        :return: Values tree, ``None`` entries are left to the chart defaults
        """

    @classmethod
    def validated_values(cls, config: ConfigType) -> dict[str, Any]:
        """Build and validate the chart's values tree

        :raises ValuesSchemaError: if the values don't match ``values_schema``
        :return: Values tree without ``None`` entries
        """
        values = compact_values(cls.render_values(config))

        validate_values(values, cls.values_schema, chart=cls.chart_key)

        return values

    def install_chart(self, config: ConfigType, **chart_kwargs) -> HelmChartComponent:
        """Install the module's chart into its namespace

        :param config: Module config
        :param chart_kwargs: Extra :class:`HelmChart` fields (``skip_await``, ``transformations``)
        :return: The chart component
        """
        chart = HelmChart.from_catalog(
            self.chart_repo,
            self.chart_key,
            namespace=self.namespace.value,
            values=self.validated_values(config),
            **chart_kwargs,
        )

        depends_on = []
        if self.create_namespace:
            depends_on.append(self._create_namespace(chart.chart))

        log.debug(f"module `{self.name}` installs `{chart.chart}@{chart.version}` into `{chart.namespace}`")

        return HelmChartComponent(
            chart.chart,
            chart=chart,
            opts=ResourceOptions.merge(self.child_opts, ResourceOptions(depends_on=depends_on)),
        )

    def _create_namespace(self, service: str) -> core.v1.Namespace:
        return core.v1.Namespace(
            self.namespace.value,
            metadata=meta.v1.ObjectMetaArgs(
                name=self.namespace.value,
                labels=get_labels(service, "namespace"),
            ),
            opts=self.child_opts,
        )
