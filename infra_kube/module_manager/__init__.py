from .module_manager import module_manager
from .lazy_module import LazyModule
