# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""ArgGroup implementations for different configuration domains."""

from .main_args import MainArgGroup, MainConfig
from .network_args import NetworkArgGroup, NetworkConfig
from .plugin_args import PluginExamplesArgGroup, PluginExamplesConfig

__all__ = [
    "MainArgGroup",
    "MainConfig",
    "NetworkArgGroup",
    "NetworkConfig",
    "PluginExamplesArgGroup",
    "PluginExamplesConfig",
]
