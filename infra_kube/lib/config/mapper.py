import json
from enum import Enum
from pathlib import Path
from typing import Type, Any, Union, Optional, get_args, get_origin, get_type_hints

import hiyapyco
from dacite import from_dict, Config
from pulumi import log, runtime

from infra_kube.lib.base import ConfigType
from infra_kube.lib.kubernetes.quantity import Quantity, CpuQuantity

DACITE_CONFIG = Config(
    cast=[Enum, Quantity, CpuQuantity],
    strict=True,
)
"""Shared dacite settings: enums and quantities are cast from their string form, unknown keys are rejected"""


def _is_text(field_type: Any) -> bool:
    """``str`` or a subclass of it (``Quantity``, string enums), optionally wrapped in ``Optional``"""
    if get_origin(field_type) is Union:
        members = [arg for arg in get_args(field_type) if arg is not type(None)]
        return len(members) == 1 and _is_text(members[0])

    return isinstance(field_type, type) and issubclass(field_type, str)


def _decode(value: Any) -> Any:
    # pulumi stores structured config values as JSON strings
    if not isinstance(value, str):
        return value

    try:
        return json.loads(value)
    except json.JSONDecodeError:
        return value


def get_raw_stack_config(stack: str, config_cls: Optional[Type[ConfigType]] = None) -> dict:
    """Collect the ``<stack>:<key>`` entries of the Pulumi config, keyed without the stack prefix

    Values are JSON-decoded, except for the string fields of ``config_cls``: ``"0"`` or ``"100"`` stay strings.
    Reads ``pulumi.runtime.config.CONFIG`` directly, which is not a public API of the ``pulumi`` package.

    :param stack: Name of the stack
    :param config_cls: The dataclass the config is mapped onto
    :return: dict
    """
    hints = get_type_hints(config_cls) if config_cls is not None else {}

    raw = {}
    for key, value in runtime.config.CONFIG.items():
        namespace, _, name = key.partition(":")
        if namespace == stack and name:
            raw[name] = value if _is_text(hints.get(name)) else _decode(value)

    log.debug(f"raw config for stack `{stack}`: {raw}")

    return raw


def config_from_dict(data: dict, config_cls: Type[ConfigType]) -> ConfigType:
    """Map a plain mapping onto a config dataclass

    :param data: Raw configuration
    :param config_cls: The dataclass for the config
    :return: The config expressed in the module's config dataclass
    """
    return from_dict(data_class=config_cls, data=data, config=DACITE_CONFIG)


def get_stack_config(stack: str, config_cls: Type[ConfigType]) -> ConfigType:
    """Get a stack config in dataclass form

    Uses `dacite <https://github.com/konradhalas/dacite>`_ to map dict to dataclass.

    :param stack: Name of the stack
    :param config_cls: The dataclass for the config
    :return: The stack config expressed in the module's config dataclass
    """
    config = config_from_dict(get_raw_stack_config(stack, config_cls), config_cls)

    log.debug(f"config for stack `{stack}` is {config}")

    return config


def load_config_file(paths: list[Union[str, Path]], config_cls: Type[ConfigType]) -> ConfigType:
    """Load one or more YAML files, merged left to right, into a config dataclass

    Used outside of a Pulumi run, e.g. by the CLI.

    :param paths: YAML files, later files override earlier ones
    :param config_cls: The dataclass for the config
    :return: The config expressed in the module's config dataclass
    """
    data = hiyapyco.load([str(path) for path in paths], method=hiyapyco.METHOD_MERGE) or {}
    if not isinstance(data, dict):
        raise ValueError(f"expected a mapping of config keys, got `{type(data).__name__}`")

    return config_from_dict(data, config_cls)
