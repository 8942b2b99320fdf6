from dataclasses import dataclass, field
from typing import Iterator


class ChartNotFoundError(KeyError):
    def __init__(self, repo_name: str, chart_key: str = None):
        if chart_key is None:
            super().__init__(f"chart repository `{repo_name}` is not in the catalog")
        else:
            super().__init__(f"chart `{chart_key}` was not found in repository `{repo_name}`")


@dataclass(frozen=True)
class ChartInfo:
    chart: str
    """Chart name within the repository"""

    version: str
    """Pinned chart version"""

    external_crds: tuple[str, ...] = field(default_factory=tuple)
    """CRD manifests to apply before the chart"""

    skip_crd_render: bool = False
    """Don't render the CRDs bundled with the chart"""


@dataclass(frozen=True)
class ChartRepo:
    repo: str
    """Repository URL"""

    charts: dict[str, ChartInfo]
    """Charts by key"""


CHART_REPOS: dict[str, ChartRepo] = {
    "oyelowo": ChartRepo(
        repo="https://oyelowo.github.io",
        charts={
            "seaweedfs": ChartInfo(chart="seaweedfs", version="3.30"),
        },
    ),
    "nats": ChartRepo(
        repo="https://nats-io.github.io/k8s/helm/charts",
        charts={
            "nats": ChartInfo(chart="nats", version="0.18.1"),
            "nack": ChartInfo(
                chart="nack",
                version="0.17.4",
                external_crds=("https://raw.githubusercontent.com/nats-io/nack/v0.6.0/deploy/crds.yml",),
            ),
            "natsOperator": ChartInfo(chart="nats-operator", version="0.7.4"),
            "natsAccountServer": ChartInfo(chart="nats-account-server", version="0.8.0"),
            "natsKafka": ChartInfo(chart="nats-kafka", version="0.13.1"),
            "surveyor": ChartInfo(chart="surveyor", version="0.14.1"),
        },
    ),
    "pingcap": ChartRepo(
        repo="https://charts.pingcap.org/",
        charts={
            "tikvOperator": ChartInfo(
                chart="tidb-operator",
                version="v1.3.8",
                external_crds=("https://raw.githubusercontent.com/pingcap/tidb-operator/v1.3.8/manifests/crd.yaml",),
            ),
            "tikvCluster": ChartInfo(chart="tidb-cluster", version="v1.3.8"),
        },
    ),
    "longhorn": ChartRepo(
        repo="https://charts.longhorn.io",
        charts={
            "longhorn": ChartInfo(chart="longhorn", version="v1.3.2"),
        },
    ),
    "bitnami": ChartRepo(
        repo="https://charts.bitnami.com/bitnami",
        charts={
            "sealedSecrets": ChartInfo(chart="sealed-secrets", version="1.1.6"),
            "certManager": ChartInfo(chart="cert-manager", version="0.8.4"),
            "nginxIngress": ChartInfo(chart="nginx-ingress-controller", version="9.3.18"),
            "argocd": ChartInfo(chart="argo-cd", version="4.2.3"),
            "metalb": ChartInfo(chart="metallb", version="4.1.5"),
            "redis": ChartInfo(chart="redis", version="17.3.2"),
            "prometheus": ChartInfo(chart="kube-prometheus", version="8.1.11"),
            "thanos": ChartInfo(chart="thanos", version="11.5.5"),
        },
    ),
    "jetstack": ChartRepo(
        repo="https://charts.jetstack.io",
        charts={
            "certManager": ChartInfo(chart="cert-manager", version="v1.9.1"),
            "certManagerTrust": ChartInfo(chart="cert-manager-trust", version="v0.2.0"),
        },
    ),
    "linkerd": ChartRepo(
        repo="https://helm.linkerd.io/stable",
        charts={
            "linkerdCrds": ChartInfo(chart="linkerd-crds", version="1.4.0"),
            # CRDs come from linkerdCrds
            "linkerdControlPlane": ChartInfo(chart="linkerd-control-plane", version="1.9.3", skip_crd_render=True),
            "linkerdViz": ChartInfo(chart="linkerd-viz", version="30.3.3"),
        },
    ),
    "meilisearch": ChartRepo(
        repo="https://meilisearch.github.io/meilisearch-kubernetes",
        charts={
            "meilisearch": ChartInfo(chart="meilisearch", version="0.1.41"),
        },
    ),
    "argo": ChartRepo(
        repo="https://argoproj.github.io/argo-helm",
        charts={
            "argoCD": ChartInfo(chart="argo-cd", version="5.6.0"),
            "argoWorkflows": ChartInfo(chart="argo-workflows", version="0.20.1"),
            "argoEvent": ChartInfo(chart="argo-events", version="2.0.6"),
            "argoRollout": ChartInfo(chart="argo-rollouts", version="2.21.1"),
            "argoImageUpdater": ChartInfo(chart="argocd-image-updater", version="0.8.1"),
        },
    ),
    "cilium": ChartRepo(
        repo="https://helm.cilium.io/",
        charts={
            "cilium": ChartInfo(chart="cilium", version="1.12.3"),
        },
    ),
    "grafana": ChartRepo(
        repo="https://grafana.github.io/helm-charts",
        charts={
            "grafana": ChartInfo(chart="grafana", version="6.42.2"),
            "loki": ChartInfo(chart="loki-distributed", version="0.63.1"),
            "tempo": ChartInfo(chart="tempo-distributed", version="0.26.7"),
            "promtail": ChartInfo(chart="promtail", version="6.5.1"),
        },
    ),
}


def get_chart_info(repo_name: str, chart_key: str) -> tuple[str, ChartInfo]:
    """Look up a chart in the catalog

    :param repo_name: Repository name (``bitnami``, ``argo``,...)
    :param chart_key: Chart key within the repository
    :return: (repository URL, chart info)
    """
    try:
        chart_repo = CHART_REPOS[repo_name]
    except KeyError:
        raise ChartNotFoundError(repo_name)

    try:
        return chart_repo.repo, chart_repo.charts[chart_key]
    except KeyError:
        raise ChartNotFoundError(repo_name, chart_key)


def iter_charts(repo_name: str = None) -> Iterator[tuple[str, str, str, ChartInfo]]:
    """Walk the catalog

    :param repo_name: Only walk this repository
    :return: Iterator of (repository name, repository URL, chart key, chart info)
    """
    if repo_name is not None and repo_name not in CHART_REPOS:
        raise ChartNotFoundError(repo_name)

    for name, chart_repo in CHART_REPOS.items():
        if repo_name is not None and name != repo_name:
            continue

        for chart_key, info in chart_repo.charts.items():
            yield name, chart_repo.repo, chart_key, info
