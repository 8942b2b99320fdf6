import pytest

from infra_kube.lib.kubernetes.quantity import CpuQuantity, Quantity, is_cpu, is_memory


@pytest.mark.parametrize("value", ["0.4Ti", "24Ti", "512Mi", "1G", "100k", ".5Gi"])
def test_memory_sizes(value):
    assert is_memory(value)
    assert Quantity(value) == value


@pytest.mark.parametrize("value", ["", "10", "10GB", "Gi", "-1Gi", "ten", None])
def test_invalid_memory_sizes(value):
    assert not is_memory(value)


def test_quantity_rejects_invalid_size():
    with pytest.raises(ValueError, match="not a valid size"):
        Quantity("lots")


@pytest.mark.parametrize("value", ["250m", "1", "0.5"])
def test_cpu_quantities(value):
    assert is_cpu(value)
    assert CpuQuantity(value) == value


def test_cpu_quantity_rejects_memory_suffix():
    with pytest.raises(ValueError, match="not a valid CPU quantity"):
        CpuQuantity("1Gi")
