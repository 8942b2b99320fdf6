from dataclasses import fields, is_dataclass
from enum import Enum
from typing import Any

from pulumi import get_stack


def _map(val: Any) -> Any:
    if isinstance(val, type):
        raise TypeError(f"cannot export the class `{val.__name__}`, export an instance")

    if is_dataclass(val):
        # unset exports (e.g. an S3 address when S3 is off) are left out
        return {f.name: _map(getattr(val, f.name)) for f in fields(val) if getattr(val, f.name) is not None}
    if isinstance(val, (list, tuple)):
        return [_map(item) for item in val]
    if isinstance(val, dict):
        return {key: _map(item) for key, item in val.items()}
    if isinstance(val, Enum):
        return val.value

    # scalars and pulumi Outputs pass through
    return val


def outputs_from_exports(exports: object) -> dict:
    """Turn a module's exports into the component's outputs

    Dataclasses become dicts, the whole tree is keyed by the current stack name.

    :param exports: A module exports dataclass instance, or a list of them
    :return: Outputs to register
    """
    return {get_stack(): _map(exports)}
