from typing import Any

from pulumi import ResourceOptions

from infra_kube.lib.kubernetes.base import HelmChartModule
from infra_kube.lib.kubernetes.namespaces import Namespace
from .config import ArgoEventsConfig, ArgoEventsExports
from .event_bus import build_event_bus
from .values import build_argo_events_values
from .values_schema import ArgoEventsValues


class ArgoEvents(HelmChartModule):
    """
    Argo Events controller plus the default EventBus
    """

    chart_repo = "argo"
    chart_key = "argoEvent"
    namespace = Namespace.ARGO_EVENT
    values_schema = ArgoEventsValues

    @classmethod
    def render_values(cls, config: ArgoEventsConfig) -> dict[str, Any]:
        return build_argo_events_values(config)

    def build(self, config: ArgoEventsConfig) -> ArgoEventsExports:
        chart = self.install_chart(config)

        event_bus = build_event_bus(config)

        # the EventBus CRD ships with the chart
        event_bus.custom_resource(
            f"{self.name}-eventbus-{event_bus.name}",
            opts=ResourceOptions.merge(self.child_opts, ResourceOptions(depends_on=[chart])),
        )

        return ArgoEventsExports(
            release=chart.name,
            namespace=self.namespace.value,
            chart_version=chart.chart.version,
            event_bus_name=event_bus.name,
        )
