import collections.abc
from typing import Any


def deep_update(source, overrides):
    """
    Update a nested dictionary or similar mapping.
    Modify ``source`` in place. Lists and scalars in ``overrides`` replace what is in ``source``.
    Source: https://stackoverflow.com/a/30655448
    """
    for key, value in overrides.items():
        if isinstance(value, collections.abc.Mapping) and value:
            current = source.get(key)
            if not isinstance(current, collections.abc.MutableMapping):
                current = {}
            source[key] = deep_update(current, value)
        else:
            source[key] = overrides[key]
    return source


def compact_values(values: Any) -> Any:
    """
    Return a copy of a values tree without ``None`` entries, at every depth.

    ``None`` means "keep the chart default", so the key must not reach Helm at all. Mappings left empty by the pruning
    are kept as ``{}``.
    """
    if isinstance(values, collections.abc.Mapping):
        return {key: compact_values(value) for key, value in values.items() if value is not None}
    elif isinstance(values, list):
        return [compact_values(value) for value in values if value is not None]
    else:
        return values
