from pathlib import Path
from pkgutil import iter_modules

from pulumi import log

from infra_kube.lib.utils import kebab_from_snake
from .lazy_module import LazyModule

MODULES_PATH = Path(__file__).resolve().parent.parent / "modules"
"""Root of the module tree, ``infra_kube/modules``"""


def _public_packages(path: Path) -> list[str]:
    """Names of the packages directly under ``path``, leaving out private ones (``_deprecated``)"""
    return sorted(info.name for info in iter_modules([str(path)]) if info.ispkg and not info.name.startswith("_"))


def _provider_dirs(path: Path) -> list[str]:
    return sorted(p.name for p in path.iterdir() if p.is_dir() and not p.name.startswith("_"))


def discover_modules(modules_path: Path = MODULES_PATH) -> dict[str, dict[str, LazyModule]]:
    """Find all modules

    A module is a package at ``infra_kube/modules/{provider}/{module}``. It is keyed by its stack name, the
    package name in kebab case.

    Example::

        # infra_kube
        # └── modules
        #     └── kubernetes
        #         ├── argo_events
        #         ├── sealed_secrets
        #         └── seaweedfs

        {
            "kubernetes": {
                "argo-events": LazyModule(provider='kubernetes', name='argo_events'),
                "sealed-secrets": LazyModule(provider='kubernetes', name='sealed_secrets'),
                "seaweedfs": LazyModule(provider='kubernetes', name='seaweedfs'),
            },
        }

    :param modules_path: Directory holding one sub-directory per provider
    :return: A mapping of providers to mappings of stack names to lazy modules
    """
    log.debug(f"discovering modules under `{modules_path}`")

    return {
        provider: {
            kebab_from_snake(package): LazyModule(provider, package)
            for package in _public_packages(modules_path / provider)
        }
        for provider in _provider_dirs(modules_path)
    }
