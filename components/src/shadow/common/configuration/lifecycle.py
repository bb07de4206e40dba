# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""
Liveness tracking for configuration objects.

A configuration object moves through exactly one path:

    UNINITIALIZED --attach()--> LIVE --release()--> DESTROYED

Every field read calls ``assert_live()``. Any other transition, or a read
outside LIVE, is a bug in the calling code and raises ``LifecycleError``.
The checks only run when ``__debug__`` is set, so ``python -O`` turns them
into no-ops.
"""

from enum import Enum


class LifecycleError(AssertionError):
    """A configuration object was used outside of its live state."""


class LifecycleState(Enum):
    UNINITIALIZED = "uninitialized"
    LIVE = "live"
    DESTROYED = "destroyed"


class LifecycleGuard:
    """Per-object liveness tag."""

    __slots__ = ("_state", "_owner")

    def __init__(self, owner: str = "object") -> None:
        self._state = LifecycleState.UNINITIALIZED
        self._owner = owner

    @property
    def state(self) -> LifecycleState:
        return self._state

    @property
    def is_live(self) -> bool:
        return self._state is LifecycleState.LIVE

    def attach(self) -> None:
        if __debug__ and self._state is not LifecycleState.UNINITIALIZED:
            raise LifecycleError(
                f"{self._owner} cannot be attached while {self._state.value}"
            )
        self._state = LifecycleState.LIVE

    def assert_live(self) -> None:
        if __debug__ and self._state is not LifecycleState.LIVE:
            raise LifecycleError(f"{self._owner} accessed while {self._state.value}")

    def release(self) -> None:
        if __debug__ and self._state is not LifecycleState.LIVE:
            raise LifecycleError(
                f"{self._owner} cannot be destroyed while {self._state.value}"
            )
        self._state = LifecycleState.DESTROYED

    def __repr__(self) -> str:
        return f"LifecycleGuard({self._owner}, {self._state.value})"
