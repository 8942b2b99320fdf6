from dataclasses import dataclass
from functools import cached_property
from importlib import import_module
from inspect import isabstract
from pathlib import Path
from typing import Type, Optional, Union

from pulumi import log, ResourceOptions

from infra_kube.lib.base import BaseModule, ConfigType, ExportsType
from infra_kube.lib.config import get_stack_config, load_config_file


@dataclass
class LazyModule:
    """
    A module package that has been found on disk but not imported yet.

    The import happens on first access to ``Module``, so discovering every module stays cheap and a broken module
    only fails the stacks that use it.
    """

    provider: str
    """Name of the provider"""

    name: str
    """Name of the python package"""

    @property
    def path(self) -> str:
        """Import path relative to ``infra_kube``"""
        return f".modules.{self.provider}.{self.name}"

    @staticmethod
    def _is_module_class(value) -> bool:
        return isinstance(value, type) and issubclass(value, BaseModule) and not isabstract(value)

    def _find_module_in_dir(self, package) -> Type[BaseModule]:
        candidates = [
            value for key, value in vars(package).items() if not key.startswith("_") and self._is_module_class(value)
        ]

        if not candidates:
            raise ModuleNotFoundError(f"no subclass of `{BaseModule.__name__}` found in `infra_kube{self.path}`")

        log.debug(f"found module class `{candidates[0].__name__}` in `infra_kube{self.path}`")

        return candidates[0]

    @cached_property
    def Module(self) -> Type[BaseModule]:
        return self._find_module_in_dir(import_module(self.path, "infra_kube"))

    def load_config(self, paths: list[Union[str, Path]]) -> ConfigType:
        """Read the module config from YAML files instead of the Pulumi stack

        :param paths: YAML files, later files override earlier ones
        :return: The config dataclass of the module
        """
        return load_config_file(paths, self.Module.get_config_type())

    def run(self, stack_name: str, opts: Optional[ResourceOptions] = None) -> ExportsType:
        """Build the module with the configuration of a stack

        :param stack_name: Stack name, also the name of the module's component resource
        :param opts: Optional set of ``pulumi.ResourceOptions`` to forward to ``pulumi.ComponentResource``.
        :return: The module's exports
        """
        config = get_stack_config(stack=stack_name, config_cls=self.Module.get_config_type())

        log.debug(f"running `{self.Module.__name__}` for stack `{stack_name}`")

        return self.Module(name=stack_name, config=config, opts=opts).run()
