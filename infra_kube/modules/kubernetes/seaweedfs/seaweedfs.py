from typing import Any

from infra_kube.lib.kubernetes.base import HelmChartModule
from infra_kube.lib.kubernetes.namespaces import Namespace
from .config import SeaweedfsConfig, SeaweedfsExports
from .values import build_seaweedfs_values
from .values_schema import SeaweedfsValues


class Seaweedfs(HelmChartModule):
    """
    SeaweedFS object store, with the filer metadata kept in TiKV
    """

    chart_repo = "oyelowo"
    chart_key = "seaweedfs"
    namespace = Namespace.SEAWEEDFS
    values_schema = SeaweedfsValues

    @classmethod
    def render_values(cls, config: SeaweedfsConfig) -> dict[str, Any]:
        return build_seaweedfs_values(config)

    def build(self, config: SeaweedfsConfig) -> SeaweedfsExports:
        chart = self.install_chart(config)

        namespace = self.namespace.value
        s3_address = None
        if config.standalone_s3_enabled:
            s3_address = f"seaweedfs-s3.{namespace}:8333"
        elif config.filer_s3_enabled:
            s3_address = f"seaweedfs-filer-client.{namespace}:8333"

        return SeaweedfsExports(
            release=chart.name,
            namespace=namespace,
            chart_version=chart.chart.version,
            master_address=f"seaweedfs-master.{namespace}:9333",
            filer_address=f"seaweedfs-filer-client.{namespace}:8888",
            s3_address=s3_address,
        )
