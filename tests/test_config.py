import pytest

from polytopekit.config import (
    KernelConfig,
    default_epsilon,
    get_kernel_config,
    set_kernel_config,
)


def test_defaults():
    cfg = KernelConfig()
    assert cfg.epsilon == 1e-7
    assert cfg.max_cycle_length is None


def test_get_returns_copy():
    cfg = get_kernel_config()
    cfg.epsilon = 0.5
    assert default_epsilon() != 0.5


def test_set_kernel_config():
    saved = get_kernel_config()
    try:
        set_kernel_config(KernelConfig(epsilon=1e-3))
        assert default_epsilon() == 1e-3
    finally:
        set_kernel_config(saved)
    assert default_epsilon() == saved.epsilon


def test_validation():
    with pytest.raises(ValueError):
        KernelConfig(epsilon=0.0)
    with pytest.raises(ValueError):
        KernelConfig(max_cycle_length=0)
