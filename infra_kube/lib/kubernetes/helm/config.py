from dataclasses import dataclass, field
from typing import Any, Optional, Callable

from .chart_info import get_chart_info


@dataclass
class HelmChart:
    chart: str
    """Chart name within the repository"""

    namespace: str
    """Namespace the release is installed into"""

    repo: str
    """Chart repository URL"""

    version: str
    """Chart version"""

    values: dict[str, Any]
    """Values tree handed to the chart"""

    skip_crd_rendering: bool = False
    """Don't render the CRDs bundled with the chart"""

    skip_await: bool = False
    """Don't wait for rendered resources to become ready"""

    external_crds: list[str] = field(default_factory=list)
    """URLs of CRD manifests the chart needs but doesn't ship"""

    transformations: Optional[list[Callable]] = None
    """Extra transformations applied to every rendered object"""

    @classmethod
    def from_catalog(
        cls, repo_name: str, chart_key: str, namespace: str, values: dict[str, Any], **kwargs
    ) -> "HelmChart":
        """Build a chart from the chart catalog

        :param repo_name: Repository name in the catalog (``bitnami``, ``oyelowo``,...)
        :param chart_key: Chart key within the repository (``sealedSecrets``, ``seaweedfs``,...)
        :param namespace: Namespace to install into
        :param values: Values tree
        :return: HelmChart
        """
        repo, info = get_chart_info(repo_name, chart_key)

        return cls(
            chart=info.chart,
            namespace=namespace,
            repo=repo,
            version=info.version,
            values=values,
            skip_crd_rendering=info.skip_crd_render,
            external_crds=list(info.external_crds),
            **kwargs,
        )
