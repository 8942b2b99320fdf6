from .chart_info import ChartInfo, ChartNotFoundError, get_chart_info, iter_charts
from .config import HelmChart
from .helm_chart import HelmChartComponent
from .values import compact_values, deep_update
