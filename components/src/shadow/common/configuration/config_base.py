# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
import argparse
from typing import Any, Dict, Tuple

from .lifecycle import LifecycleGuard, LifecycleState


class ConfigurationError(ValueError):
    """Command-line input that cannot produce a valid configuration."""


class ConfigBase:
    """
    Immutable configuration built once from parsed CLI arguments.

    Fields are the public class annotations (across base classes), with or
    without defaults in arbitrary order. Every field read is checked against
    the object's LifecycleGuard; ``destroy()`` ends the object's life.
    """

    _fields: Tuple[str, ...] = ()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        names = []
        for base in reversed(cls.__mro__):
            for name in getattr(base, "__annotations__", {}):
                if not name.startswith("_") and name not in names:
                    names.append(name)
        cls._fields = tuple(names)

    @classmethod
    def from_cli_args(cls, args: argparse.Namespace):
        obj = cls.__new__(cls)
        values: Dict[str, Any] = {}

        # 1) Take every known field provided by argparse
        for k, v in vars(args).items():
            if k in cls._fields:
                values[k] = v

        # 2) Fill annotated class defaults for anything argparse did not set
        for base in reversed(cls.__mro__):
            for name in getattr(base, "__annotations__", {}):
                if name.startswith("_") or name in values:
                    continue
                if name in getattr(base, "__dict__", {}):
                    values[name] = getattr(base, name)

        missing = [name for name in cls._fields if name not in values]
        if missing:
            raise TypeError(
                f"{cls.__name__} is missing values for: {', '.join(missing)}"
            )

        for k, v in values.items():
            object.__setattr__(obj, k, v)
        guard = LifecycleGuard(cls.__name__)
        object.__setattr__(obj, "_guard", guard)
        guard.attach()
        return obj

    def __getattribute__(self, name: str) -> Any:
        if name in type(self)._fields:
            object.__getattribute__(self, "_guard").assert_live()
        return object.__getattribute__(self, name)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable; cannot set {name!r}")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable; cannot delete {name!r}")

    @property
    def lifecycle_state(self) -> LifecycleState:
        return self._guard.state

    def destroy(self) -> None:
        """End this object's life. Must be called exactly once."""
        self._guard.release()

    def to_dict(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for name in self._fields}

    def __enter__(self):
        self._guard.assert_live()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.destroy()

    def __repr__(self) -> str:
        state = self.__dict__["_guard"].state
        if state is not LifecycleState.LIVE:
            return f"{self.__class__.__name__}(<{state.value}>)"
        items = ", ".join(f"{k}={self.__dict__[k]!r}" for k in sorted(self._fields))
        return f"{self.__class__.__name__}({items})"
