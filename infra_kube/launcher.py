import logging
import os

from pulumi import get_stack, log, export

from infra_kube.lib.base import ExportsType
from infra_kube.lib.config import get_provider_override
from infra_kube.module_manager import module_manager


def _enable_debug_logging():
    logging.basicConfig(level=logging.DEBUG)
    log.debug("infra-kube debug logging enabled")


def run_stack(provider: str, stack_name: str) -> ExportsType:
    """Build the module a stack is named after and export what it returns

    `infrakube:provider` in the stack config takes precedence over ``provider``.

    :param provider: Provider the module belongs to
    :param stack_name: The stack name, which is also the module's stack name
    :return: The module's exports
    """
    provider = get_provider_override() or provider

    exports = module_manager.get_module(provider, stack_name).run(stack_name)

    export(stack_name, exports)

    return exports


def run_active_stack(provider: str = "kubernetes") -> ExportsType:
    """Entrypoint of the Pulumi projects under ``sysenvs``

    :param provider: Provider the module belongs to
    :return: The module's exports
    """
    stack = get_stack()

    log.debug(f"active stack is `{stack}`")

    return run_stack(provider, stack)


if os.getenv("INFRA_DEBUG"):
    _enable_debug_logging()
