import logging
import sys
from collections import UserDict
from pathlib import Path
from typing import Any, Optional

import hiyapyco

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "Infra.common.yaml"


class InfraConfigException(Exception):
    def __init__(self, key):
        super().__init__(f"Missing required configuration variable '{key}'")
        self.key = key


def _main_entrypoint() -> Path:
    main_module = sys.modules["__main__"]
    if not hasattr(main_module, "__file__"):
        raise Exception("Can't find __file__ for __main__. HINT: Don't use HierarchicalConfig from a REPL if you are.")

    return Path(main_module.__file__)


def discover_config_files(entrypoint: Path, filename: str = CONFIG_FILENAME, limit: int = 5) -> list[Path]:
    """
    Find the config files that apply to an entrypoint, walking up from its directory

    The walk stops after ``limit`` directories, or at the root of the git checkout. A config file in the git root
    itself is still picked up.

    :param entrypoint: The program's entrypoint, usually the Pulumi project's main file
    :param filename: Config file name
    :param limit: Max parent directories to walk
    :return: Config paths, farthest first, so that later files win when merged
    """
    found = []

    for directory in list(entrypoint.absolute().parents)[:limit]:
        candidate = directory / filename
        if candidate.is_file():
            logger.debug("Detected config [%s]", candidate)
            found.append(candidate)

        if (directory / ".git").is_dir():
            logger.debug("Found project root [%s], breaking", directory)
            break

    return list(reversed(found))


class HierarchicalConfig(UserDict):
    """
    Environment settings shared by every stack of a Pulumi project, and usually by every project of a cluster.

    ``Infra.common.yaml`` files found from the entrypoint upwards are merged with HiYaPyCo, files closer to the
    entrypoint win. Use the singleton rather than this class:

    Example usage:
        from infra_kube.lib.config import infra_env

        infra_env.get("kube_context")
        infra_env.require("environment")

    """

    def __init__(self, limit=5, filename=CONFIG_FILENAME, entrypoint: Optional[Path] = None):
        """
        :param limit: Max parent directories to walk
        :param filename: Config file name
        :param entrypoint: Start the search from this file instead of the `__main__` module
        """
        super().__init__()
        self.filename = filename
        self.paths = discover_config_files(entrypoint or _main_entrypoint(), filename, limit)

        logger.debug("Merging configs %s", self.paths)

        if self.paths:
            self.data = hiyapyco.load([str(path) for path in self.paths], method=hiyapyco.METHOD_MERGE) or {}

    def require(self, key: str) -> Any:
        """
        Return a setting that must be present

        :param key: Setting name
        :raises InfraConfigException: if the setting is missing or empty
        :return: The setting's value
        """
        if (v := self.get(key)) is not None:
            return v
        else:
            raise InfraConfigException(key)


# Loaded once on import, every stack of a run shares it
infra_env = HierarchicalConfig()
