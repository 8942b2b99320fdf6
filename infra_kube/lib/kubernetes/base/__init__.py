from .kubernetes_module import KubernetesModule
from .helm_chart_module import HelmChartModule
