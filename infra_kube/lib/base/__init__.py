from .types import ConfigType, ExportsType
from .base_module import BaseModule
