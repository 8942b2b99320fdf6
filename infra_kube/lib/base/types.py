from typing import TypeVar

ConfigType = TypeVar("ConfigType")
"""A module configuration dataclass"""

ExportsType = TypeVar("ExportsType")
"""A module exports dataclass, or a list of them"""
