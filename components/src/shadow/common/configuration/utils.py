# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Utility functions for ArgGroup configuration."""

import argparse
import os
import re
from typing import Any, Optional, Sequence, TypeVar

from .config_base import ConfigurationError

T = TypeVar("T")

# Largest value a C `gint` holds; counts and durations are bounded by it.
INT32_MAX = 2**31 - 1

_UNSIGNED_INT_RE = re.compile(r"\+?[0-9]+")


def env_or_default(env_var: str, default: T) -> T:
    """
    Get value from environment variable or return default.

    Performs type conversion based on the default value's type.

    Args:
        env_var: Environment variable name (e.g., "SHADOW_LOG_LEVEL")
        default: Default value if env var not set

    Returns:
        Environment variable value (type-converted) or default

    Examples:
        >>> env_or_default("SHADOW_LOG_LEVEL", "message")
        "message"  # if SHADOW_LOG_LEVEL not set
        >>> env_or_default("SHADOW_WORKERS", 0)
        4  # if SHADOW_WORKERS="4"
    """
    value = os.environ.get(env_var)
    if value is None:
        return default

    if isinstance(default, bool):
        return value.lower() in ("true", "1", "yes", "on")  # type: ignore
    elif isinstance(default, int):
        if not re.fullmatch(r"[+-]?[0-9]+", value):
            raise ConfigurationError(f"{env_var}={value!r} is not a valid integer")
        return int(value)  # type: ignore
    else:
        return value  # type: ignore


def non_negative_int(value: str) -> int:
    """argparse type for counts and durations: plain decimal digits in [0, INT32_MAX]."""
    if not _UNSIGNED_INT_RE.fullmatch(value):
        if re.fullmatch(r"-[0-9]+", value):
            raise argparse.ArgumentTypeError(f"must be >= 0, got {value}")
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}")
    parsed = int(value)
    if parsed > INT32_MAX:
        raise argparse.ArgumentTypeError(f"must be <= {INT32_MAX}, got {parsed}")
    return parsed


def non_empty_str(value: str) -> str:
    """argparse type rejecting empty or whitespace-only strings."""
    if not value.strip():
        raise argparse.ArgumentTypeError("must be a non-empty string")
    return value


def add_argument(
    parser,
    *,
    flag_name: str,
    env_var: str,
    default: Any,
    help: str,
    aliases: Sequence[str] = (),
    arg_type: Optional[type] = str,
    **kwargs: Any,
) -> None:
    """
    Add a CLI argument with env var default, optional aliases and dest, and help message construction.

    Args:
        parser: ArgumentParser or argument group
        flag_name: Primary flag (must start with '--', e.g., "--foo")
        env_var: Environment variable name (e.g., "SHADOW_FOO")
        default: Default value
        help: Help text
        aliases: Extra option strings accepted for the same setting (e.g. "-w")
        dest: Optional destination name (defaults to flag_name with dashes replaced by underscores)
        arg_type: Type for the argument (default: str)
    """
    arg_dest = _get_dest_name(flag_name, kwargs.get("dest"))
    default_with_env = env_or_default(env_var, default)

    names = [flag_name, *aliases]

    add_arg_opts = {
        "dest": arg_dest,
        "default": default_with_env,
        "help": _build_help_message(help, env_var, default),
        "type": arg_type,
    }
    kwargs.update(add_arg_opts)

    parser.add_argument(*names, **kwargs)


def add_negatable_bool_argument(
    parser,
    *,
    flag_name: str,
    env_var: str,
    default: bool,
    help: str,
    dest: Optional[str] = None,
) -> None:
    """
    Add negatable boolean flag (--foo / --no-foo).

    Args:
        parser: ArgumentParser or argument group
        flag_name: Primary flag (must start with '--', e.g. "--run-ping-example")
        env_var: Environment variable name (e.g., "SHADOW_RUN_PING_EXAMPLE")
        default: Default value
        help: Help text
    """
    arg_dest = _get_dest_name(flag_name, dest)
    default_with_env = env_or_default(env_var, default)

    parser.add_argument(
        flag_name,
        dest=arg_dest,
        action=argparse.BooleanOptionalAction,
        default=default_with_env,
        help=_build_help_message(help, env_var, default),
    )


def _build_help_message(help_text: str, env_var: str, default: Any) -> str:
    """
    Build help message with env var and default value.
    """
    return f"{help_text}\nenv var: {env_var} | default: {default}"


def _get_dest_name(flag_name: str, dest: Optional[str] = None) -> str:
    """
    Get the destination name for the flag.
    """
    return dest if dest else flag_name.lstrip("-").replace("-", "_")
