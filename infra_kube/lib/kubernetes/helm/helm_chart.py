from pulumi import ResourceOptions, ComponentResource, log
from pulumi_kubernetes import helm, yaml

from .config import HelmChart
from .values import compact_values, deep_update


def _noawait(obj, opts):
    """
    Pulumi attempts to wait for resources to be created, which leads to deadlocking when a helm chart creates
    resources in an order that will never satisfy the wait condition.

    i.e. chart creates 100 resources - one of which is a Service and another is a Deployment. Pulumi may
    attempt to create 50 resourcess at a time in a "task bucket", and that bucket may include the Service but not the
    Deployment for that service. Since Pulumi will wait for all tasks in the bucket to complete before moving to the
    next set of resources to create the Service object will cause an infinite wait since the Deployment object for that
    Service will never be created.
    """
    if obj.get("metadata"):
        deep_update(obj["metadata"], {"annotations": {"pulumi.com/skipAwait": "true"}})


def _nostatus(obj, opts):
    """
    This is a work-around for the issue described in https://github.com/pulumi/pulumi-kubernetes/issues/1481
    """
    if obj.get("kind") == "CustomResourceDefinition" and obj.get("status"):
        del obj["status"]


class HelmChartComponent(ComponentResource):
    """
    Installs a Helm chart, and the external CRDs it depends on, under a single parent.

    You must properly parent objects to ensure no collisions between charts rendering the same resource names.
    The Kubernetes provider is taken from ``opts.provider``.
    """

    def __init__(self, name: str, chart: HelmChart, opts: ResourceOptions):
        super().__init__(f"pkg:infrakube:{self.__class__.__name__.lower()}", name, None, opts)
        self.name = name
        self.opts = opts
        self.chart = chart

        self.configure()

        self.register_outputs({})

    def _chart_transformations(self) -> list:
        transformations = [_nostatus]

        if self.chart.skip_await:
            transformations.append(_noawait)

        return transformations + (self.chart.transformations or [])

    def _install_external_crds(self) -> list:
        crds = []
        for index, url in enumerate(self.chart.external_crds):
            log.debug(f"installing external CRDs `{url}` for chart `{self.chart.chart}`")

            crds.append(
                yaml.ConfigFile(
                    f"{self.name}-external-crds-{index}",
                    file=url,
                    transformations=[_nostatus],
                    opts=ResourceOptions(parent=self, provider=self.opts.provider),
                )
            )
        return crds

    def configure(self):
        crds = self._install_external_crds()

        log.debug(f"installing chart `{self.chart.chart}@{self.chart.version}` as `{self.name}`")

        self.release = helm.v3.Chart(
            self.name,
            config=helm.v3.ChartOpts(
                chart=self.chart.chart,
                namespace=self.chart.namespace,
                fetch_opts=helm.v3.FetchOpts(repo=self.chart.repo, version=self.chart.version),
                values=compact_values(self.chart.values),
                transformations=self._chart_transformations(),
                skip_crd_rendering=self.chart.skip_crd_rendering,
            ),
            opts=ResourceOptions(parent=self, provider=self.opts.provider, depends_on=crds),
        )
