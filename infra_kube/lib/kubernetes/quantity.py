import re

MEMORY_SUFFIXES = ("Ei", "Pi", "Ti", "Gi", "Mi", "Ki", "E", "P", "T", "G", "M", "k", "m")
"""Binary and decimal suffixes accepted for memory and storage sizes"""

_NUMBER = r"(?:\d+(?:\.\d*)?|\.\d+)"
_MEMORY_RE = re.compile(rf"^{_NUMBER}(?:{'|'.join(MEMORY_SUFFIXES)})$")
_CPU_RE = re.compile(rf"^{_NUMBER}m?$")


def is_memory(value: str) -> bool:
    """Check for a memory or storage size such as ``0.4Ti``, ``24Ti`` or ``512Mi``

    A bare number is not a size, it must carry a suffix.
    """
    return isinstance(value, str) and bool(_MEMORY_RE.match(value))


def is_cpu(value: str) -> bool:
    """Check for a CPU quantity such as ``250m`` or ``2``"""
    return isinstance(value, str) and bool(_CPU_RE.match(value))


class Quantity(str):
    """
    A Kubernetes size string (``10Gi``, ``0.4Ti``) validated on construction.

    Use it as a field type in values schemas and configs, dacite casts raw strings into it.
    """

    def __new__(cls, value: str):
        if not is_memory(value):
            raise ValueError(f"`{value}` is not a valid size, expected a number followed by one of {MEMORY_SUFFIXES}")

        return super().__new__(cls, value)


class CpuQuantity(str):
    """A Kubernetes CPU string (``250m``, ``1``, ``0.5``) validated on construction."""

    def __new__(cls, value: str):
        if not is_cpu(value):
            raise ValueError(f"`{value}` is not a valid CPU quantity, expected a number optionally followed by `m`")

        return super().__new__(cls, value)
