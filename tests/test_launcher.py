from unittest import mock

import pytest

from infra_kube import launcher


@pytest.fixture
def manager():
    with mock.patch("infra_kube.launcher.module_manager") as module_manager, mock.patch(
        "infra_kube.launcher.export"
    ) as export:
        module_manager.export = export
        yield module_manager


def test_run_stack_exports_the_module_outputs(manager):
    with mock.patch("infra_kube.launcher.get_provider_override", return_value=None):
        exports = launcher.run_stack("kubernetes", "seaweedfs")

    manager.get_module.assert_called_once_with("kubernetes", "seaweedfs")
    manager.get_module.return_value.run.assert_called_once_with("seaweedfs")
    assert exports is manager.get_module.return_value.run.return_value
    manager.export.assert_called_once_with("seaweedfs", exports)


def test_provider_override_wins(manager):
    with mock.patch("infra_kube.launcher.get_provider_override", return_value="onprem"):
        launcher.run_stack("kubernetes", "seaweedfs")

    manager.get_module.assert_called_once_with("onprem", "seaweedfs")


def test_run_active_stack_uses_the_current_stack(manager):
    with mock.patch("infra_kube.launcher.get_provider_override", return_value=None), mock.patch(
        "infra_kube.launcher.get_stack", return_value="sealed-secrets"
    ):
        launcher.run_active_stack()

    manager.get_module.assert_called_once_with("kubernetes", "sealed-secrets")
