import pulumi
from pulumi import ResourceOptions

from infra_kube.lib.kubernetes.helm import HelmChart, HelmChartComponent
from infra_kube.lib.kubernetes.helm.helm_chart import _noawait, _nostatus


def _chart(**kwargs) -> HelmChart:
    return HelmChart(
        chart="demo",
        namespace="demo",
        repo="https://charts.example.com",
        version="1.0.0",
        values={"replicas": 2, "affinity": None},
        **kwargs,
    )


def test_nostatus_strips_crd_status_only():
    crd = {"kind": "CustomResourceDefinition", "status": {"conditions": []}}
    service = {"kind": "Service", "status": {"loadBalancer": {}}}

    _nostatus(crd, None)
    _nostatus(service, None)

    assert "status" not in crd
    assert service["status"] == {"loadBalancer": {}}


def test_noawait_keeps_existing_annotations():
    obj = {"kind": "Deployment", "metadata": {"name": "demo", "annotations": {"team": "infra"}}}

    _noawait(obj, None)

    assert obj["metadata"]["annotations"] == {"team": "infra", "pulumi.com/skipAwait": "true"}


@pulumi.runtime.test
def test_component_installs_the_chart(helm_mock, yaml_mock):
    component = HelmChartComponent("demo", chart=_chart(), opts=ResourceOptions())

    yaml_mock.ConfigFile.assert_not_called()
    helm_mock.v3.FetchOpts.assert_called_once_with(repo="https://charts.example.com", version="1.0.0")

    chart_opts = helm_mock.v3.ChartOpts.call_args.kwargs
    assert chart_opts["values"] == {"replicas": 2}
    assert chart_opts["transformations"] == [_nostatus]
    assert component.release is helm_mock.v3.Chart.return_value


@pulumi.runtime.test
def test_component_transformations(helm_mock, yaml_mock):
    def rename(obj, opts):
        obj["metadata"]["name"] = "renamed"

    HelmChartComponent("demo-no-await", chart=_chart(skip_await=True, transformations=[rename]), opts=ResourceOptions())

    assert helm_mock.v3.ChartOpts.call_args.kwargs["transformations"] == [_nostatus, _noawait, rename]


@pulumi.runtime.test
def test_component_installs_external_crds_first(helm_mock, yaml_mock):
    chart = _chart(external_crds=["https://example.com/crds.yaml"])

    HelmChartComponent("demo-crds", chart=chart, opts=ResourceOptions())

    args, kwargs = yaml_mock.ConfigFile.call_args
    assert args == ("demo-crds-external-crds-0",)
    assert kwargs["file"] == "https://example.com/crds.yaml"

    chart_resource_opts = helm_mock.v3.Chart.call_args.kwargs["opts"]
    assert chart_resource_opts.depends_on == [yaml_mock.ConfigFile.return_value]
