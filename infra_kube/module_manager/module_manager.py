from typing import Iterator

from pulumi import log

from infra_kube.lib.utils import kebab_from_snake
from .discover_modules import discover_modules
from .lazy_module import LazyModule


class _ModuleManager:
    """Registry of the modules found under ``infra_kube/modules``, keyed by provider then stack name"""

    def __init__(self):
        self.modules: dict[str, dict[str, LazyModule]] = discover_modules()

        log.debug(f"discovered modules `{self.modules}`")

    def get_module(self, provider: str, module_name: str) -> LazyModule:
        """Look up a module without importing it

        :param provider: Provider name
        :param module_name: Stack name of the module, ``sealed_secrets`` is accepted for ``sealed-secrets``
        :return: A LazyModule
        """
        provider_modules = self.get_provider_modules(provider)
        stack_name = kebab_from_snake(module_name)

        if stack_name not in provider_modules:
            raise ModuleNotFoundError(f"module `{module_name}` was not found under provider `{provider}`")

        return provider_modules[stack_name]

    def get_provider_modules(self, provider: str) -> dict[str, LazyModule]:
        """
        :param provider: Provider name
        :return: Modules of a provider, by stack name
        """
        if provider not in self.modules:
            raise ModuleNotFoundError(f"provider `{provider}` has no modules")

        return self.modules[provider]

    def iter_modules(self) -> Iterator[tuple[str, str, LazyModule]]:
        """Walk every module

        :return: Iterator of (provider, stack name, lazy module)
        """
        for provider, provider_modules in self.modules.items():
            for stack_name, lazy_module in provider_modules.items():
                yield provider, stack_name, lazy_module


module_manager = _ModuleManager()
