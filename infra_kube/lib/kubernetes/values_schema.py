from typing import Any, Type

from .helm.values import compact_values
from .schema import ManifestError, SchemaType


class ValuesSchemaError(ManifestError):
    def __init__(self, chart: str, reason: str):
        super().__init__(f"values for chart `{chart}` do not match its schema: {reason}")
        self.chart = chart
        self.reason = reason


def validate_values(values: dict[str, Any], schema_cls: Type[SchemaType], chart: str = None) -> SchemaType:
    """
    Check that a values tree structurally satisfies a chart's values schema.

    Keys set to ``None`` are ignored, they are never handed to the chart.

    :param values: Values tree
    :param schema_cls: Deep partial of the chart's values, as a schema dataclass
    :param chart: Chart name, for error messages
    :return: The values as a typed schema instance
    """
    try:
        return schema_cls.from_manifest(compact_values(values))
    except ManifestError as e:
        raise ValuesSchemaError(chart or schema_cls.__name__, str(e)) from e
