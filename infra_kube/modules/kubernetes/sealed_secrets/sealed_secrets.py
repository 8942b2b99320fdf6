from typing import Any

from infra_kube.lib.kubernetes.base import HelmChartModule
from infra_kube.lib.kubernetes.namespaces import Namespace
from .config import SealedSecretsConfig, SealedSecretsExports
from .values import build_sealed_secrets_values
from .values_schema import SealedSecretsValues


class SealedSecrets(HelmChartModule):
    """
    Bitnami Sealed Secrets controller

    Installed into kube-system, where `kubeseal` expects it.
    """

    chart_repo = "bitnami"
    chart_key = "sealedSecrets"
    namespace = Namespace.KUBE_SYSTEM
    values_schema = SealedSecretsValues
    create_namespace = False

    @classmethod
    def render_values(cls, config: SealedSecretsConfig) -> dict[str, Any]:
        return build_sealed_secrets_values(config)

    def build(self, config: SealedSecretsConfig) -> SealedSecretsExports:
        chart = self.install_chart(config)

        return SealedSecretsExports(
            release=chart.name,
            namespace=self.namespace.value,
            chart_version=chart.chart.version,
            controller_name=config.controller_name,
        )
