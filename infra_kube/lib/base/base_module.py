from abc import ABC, abstractmethod
from typing import Type, get_type_hints

from pulumi import ComponentResource, ResourceOptions, log

from infra_kube.lib.base.types import ConfigType, ExportsType
from infra_kube.lib.utils import outputs_from_exports


class BaseModule(ComponentResource, ABC):
    """
    A module is the component resource a stack builds.

    Subclasses implement ``build``; the type hint of its ``config`` param tells the launcher which dataclass the
    stack config is mapped onto.
    """

    @property
    @abstractmethod
    def provider(self) -> str:
        """Name of the provider, the ``{provider}`` in ``infra_kube/modules/{provider}/{module}``"""

    def __init__(self, name: str, config: ConfigType, opts: ResourceOptions = None):
        super().__init__(self.resource_type_name(), name, None, opts)

        self.name = name
        self._config = config

    @classmethod
    def resource_type_name(cls) -> str:
        return f"pkg:infrakube:{cls.provider}:{cls.__name__.lower()}"

    @classmethod
    def get_config_type(cls) -> Type[ConfigType]:
        hints = get_type_hints(cls.build)
        if "config" not in hints:
            raise TypeError(f"`{cls.__name__}.build` needs a type hint on its `config` param")

        return hints["config"]

    def run(self) -> ExportsType:
        """Build the module and register its exports as the component's outputs

        :return: The exports object
        """
        log.debug(f"building `{self.__class__.__name__}` as `{self.name}`", resource=self)

        exports = self.build(self._config)

        self.register_outputs(outputs_from_exports(exports))

        return exports

    @abstractmethod
    def build(self, config: ConfigType) -> ExportsType:
        """Create the module's resources

        :param config: The stack config, as the dataclass ``build`` is annotated with
        :return: An exports dataclass
        """
