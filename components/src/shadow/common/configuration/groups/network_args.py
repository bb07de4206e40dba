# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Network timing configuration ArgGroup."""

from shadow.common.configuration.arg_group import ArgGroup
from shadow.common.configuration.config_base import ConfigBase, ConfigurationError
from shadow.common.configuration.utils import INT32_MAX, add_argument, non_negative_int
from shadow.constants import SIMTIME_INVALID, SIMTIME_ONE_MILLISECOND, SimulationTime

DEFAULT_RUN_AHEAD_MS = 0


class NetworkConfig(ConfigBase):
    """Configuration owned by the network option group."""

    # milliseconds
    run_ahead: int = DEFAULT_RUN_AHEAD_MS

    def validate(self) -> None:
        if self.run_ahead < 0:
            raise ConfigurationError(f"--run-ahead must be >= 0, got {self.run_ahead}")
        if self.run_ahead > INT32_MAX:
            raise ConfigurationError(
                f"--run-ahead must be <= {INT32_MAX}, got {self.run_ahead}"
            )
        if self.run_ahead * SIMTIME_ONE_MILLISECOND >= SIMTIME_INVALID:
            raise ConfigurationError(
                f"--run-ahead {self.run_ahead} ms does not fit in simulation time"
            )

    def get_run_ahead_time(self) -> SimulationTime:
        """Minimum run-ahead window expressed in simulation time (nanoseconds)."""
        return self.run_ahead * SIMTIME_ONE_MILLISECOND


class NetworkArgGroup(ArgGroup):
    """Network timing parameters."""

    name = "network"

    def add_arguments(self, parser) -> None:
        """Add network arguments to parser."""
        g = parser.add_argument_group("Network Options")

        add_argument(
            g,
            flag_name="--run-ahead",
            env_var="SHADOW_RUN_AHEAD",
            default=DEFAULT_RUN_AHEAD_MS,
            aliases=("--runahead",),
            help="Minimum time in milliseconds that nodes may run ahead of each other between synchronization windows.",
            arg_type=non_negative_int,
            metavar="MS",
        )
