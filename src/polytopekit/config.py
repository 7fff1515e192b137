"""Kernel-wide tolerances and guards."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Optional


@dataclass
class KernelConfig:
    """Numeric settings shared by the predicates and the planarizer.

    ``epsilon`` is the single tolerance used for point equality, the
    collinearity test, the near-parallel test and for rejecting
    intersections at (or near) segment endpoints.

    ``max_cycle_length`` bounds every adjacency-cycle traversal.  When it
    is ``None`` the bound is the number of nodes taking part in the
    traversal, which is always enough for a simple cycle.
    """

    epsilon: float = 1e-7
    max_cycle_length: Optional[int] = None

    def __post_init__(self) -> None:
        if not self.epsilon > 0.0:
            raise ValueError(f"epsilon must be positive, got {self.epsilon!r}")
        if self.max_cycle_length is not None and self.max_cycle_length < 1:
            raise ValueError(f"bad max_cycle_length: {self.max_cycle_length!r}")


_KERNEL_CONFIG = KernelConfig()


def get_kernel_config() -> KernelConfig:
    return copy.deepcopy(_KERNEL_CONFIG)


def set_kernel_config(config: KernelConfig) -> None:
    global _KERNEL_CONFIG
    _KERNEL_CONFIG = copy.deepcopy(config)


def default_epsilon() -> float:
    """Return the tolerance currently in effect."""
    return _KERNEL_CONFIG.epsilon


__all__ = [
    'KernelConfig',
    'default_epsilon',
    'get_kernel_config',
    'set_kernel_config',
]
