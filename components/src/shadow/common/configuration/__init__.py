# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""
ArgGroup-based configuration system for Shadow.

This module provides a modular, domain-driven configuration architecture where:
- Each ArgGroup owns a specific domain of configuration parameters
- Groups are additive and checked for colliding flags when the parser is built
- The resulting ConfigBase object is immutable and guarded against use after destroy
"""

from .arg_group import ArgGroup, OptionGroupConflictError, check_option_groups
from .config_base import ConfigBase, ConfigurationError
from .lifecycle import LifecycleError, LifecycleGuard, LifecycleState
from .utils import (
    add_argument,
    add_negatable_bool_argument,
    env_or_default,
    non_empty_str,
    non_negative_int,
)

__all__ = [
    # Base classes
    "ArgGroup",
    "ConfigBase",
    "ConfigurationError",
    # Lifecycle
    "LifecycleError",
    "LifecycleGuard",
    "LifecycleState",
    "OptionGroupConflictError",
    "check_option_groups",
    # Utilities
    "add_argument",
    "env_or_default",
    "add_negatable_bool_argument",
    "non_empty_str",
    "non_negative_int",
]
