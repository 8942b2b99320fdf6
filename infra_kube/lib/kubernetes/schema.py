from collections.abc import Mapping
from dataclasses import Field, field, fields, is_dataclass, replace
from enum import Enum
from typing import Any, Iterator, Type, TypeVar

from dacite import from_dict, DaciteError

from infra_kube.lib.config.mapper import DACITE_CONFIG
from infra_kube.lib.utils import camel_from_snake

SchemaType = TypeVar("SchemaType", bound="SchemaModel")

_ALIASES: dict[str, str] = {}
"""Field name to manifest key, for every field declared with :func:`alias`"""


class ManifestError(ValueError):
    pass


def alias(key: str, **kwargs) -> Field:
    """Declare an optional field whose manifest key isn't the camelCase form of its name

    An alias applies to every schema field with that name.

    Example::

        host_ip: Optional[str] = alias("hostIP")
        global_: Optional[Global] = alias("global")
    """
    kwargs.setdefault("default", None)
    return field(metadata={"key": key}, **kwargs)


def manifest_key(f: Field) -> str:
    return f.metadata.get("key") or _field_key(f.name)


def _field_key(name: str) -> str:
    return _ALIASES.get(name) or camel_from_snake(name)


_MANIFEST_CONFIG = replace(DACITE_CONFIG, strict=False, convert_key=_field_key)
"""dacite's strict mode compares raw field names, unknown keys are found by :func:`_unknown_keys` instead"""


def _unknown_keys(data: Any, parsed: Any, path: str) -> Iterator[str]:
    """Paths of the keys of ``data`` that didn't make it into the re-rendered ``parsed``"""
    if isinstance(data, Mapping) and isinstance(parsed, Mapping):
        for key, value in data.items():
            if value is None:
                continue
            if key not in parsed:
                yield f"{path}.{key}"
            else:
                yield from _unknown_keys(value, parsed[key], f"{path}.{key}")
    elif isinstance(data, list) and isinstance(parsed, list):
        for index, (item, parsed_item) in enumerate(zip(data, parsed)):
            yield from _unknown_keys(item, parsed_item, f"{path}[{index}]")


def _dump(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        return {
            manifest_key(f): _dump(getattr(value, f.name))
            for f in fields(value)
            if getattr(value, f.name) is not None
        }
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, list):
        return [_dump(item) for item in value]
    elif isinstance(value, Mapping):
        return {key: _dump(item) for key, item in value.items() if item is not None}
    elif isinstance(value, str):
        # drop str subclasses such as Quantity, YAML and JSON dumpers want plain strings
        return str(value)
    else:
        return value


class SchemaModel:
    """
    Mixin for dataclasses that mirror a Kubernetes JSON shape (CRDs, Helm chart values).

    Field names are snake_case, their keys in the manifest are camelCase unless declared with :func:`alias`.
    Free-form maps (labels, annotations, env maps) keep their keys.
    """

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)

        # runs before @dataclass, the aliased defaults are still plain Field objects
        for name, value in vars(cls).items():
            if isinstance(value, Field) and "key" in value.metadata:
                key = value.metadata["key"]
                if _ALIASES.setdefault(name, key) != key:
                    raise TypeError(f"`{cls.__name__}.{name}` aliases `{key}`, other schemas use `{_ALIASES[name]}`")

    def to_manifest(self) -> dict[str, Any]:
        """Render as a plain mapping, leaving out unset (``None``) fields"""
        return _dump(self)

    @classmethod
    def from_manifest(cls: Type[SchemaType], data: Mapping) -> SchemaType:
        """Parse a plain mapping, rejecting unknown keys and wrongly typed values

        :param data: A manifest, or a values tree
        :return: The typed instance
        """
        if not isinstance(data, Mapping):
            raise ManifestError(f"`{cls.__name__}` expects a mapping, got `{type(data).__name__}`")

        try:
            parsed = from_dict(data_class=cls, data=data, config=_MANIFEST_CONFIG)
        except ManifestError:
            raise
        except (DaciteError, ValueError) as e:
            raise ManifestError(f"`{cls.__name__}`: {e}") from e

        unknown = list(_unknown_keys(data, parsed.to_manifest(), cls.__name__))
        if unknown:
            raise ManifestError(f"unknown key `{unknown[0]}`")

        return parsed
