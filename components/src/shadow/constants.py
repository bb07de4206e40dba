# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Process-wide constants for the Shadow launcher.

Simulation time is an unsigned 64-bit count of nanoseconds. The unit
constants below let callers write ``5 * SIMTIME_ONE_SECOND`` instead of raw
literals. Everything here is a plain value with no initialization order.
"""

from typing import Final

SimulationTime = int
"""Simulation time in nanoseconds."""

SIMTIME_MAX: Final[SimulationTime] = 2**64 - 1

# Reserved marker for an unset or unknown time, never a real timestamp.
SIMTIME_INVALID: Final[SimulationTime] = SIMTIME_MAX

SIMTIME_ONE_NANOSECOND: Final[SimulationTime] = 1
SIMTIME_ONE_MICROSECOND: Final[SimulationTime] = 1_000
SIMTIME_ONE_MILLISECOND: Final[SimulationTime] = 1_000_000
SIMTIME_ONE_SECOND: Final[SimulationTime] = 1_000_000_000
SIMTIME_ONE_MINUTE: Final[SimulationTime] = 60_000_000_000
SIMTIME_ONE_HOUR: Final[SimulationTime] = 3_600_000_000_000

# Virtual sockets are handed descriptors at or above this value so they never
# collide with real file descriptors. Keep it above `ulimit -n`.
VNETWORK_MIN_SD: Final[int] = 30000

# TCP autotuning is used unless this is set.
CONFIG_SEND_BUFFER_SIZE_FORCE: Final[bool] = False
# Per-socket buffer sizes when autotuning is off, taken from `man tcp`.
CONFIG_SEND_BUFFER_SIZE: Final[int] = 131072
CONFIG_RECV_BUFFER_SIZE: Final[int] = 174760
CONFIG_DO_DELAYED_ACKS: Final[bool] = False


def is_valid_simtime(value: int) -> bool:
    """Return True if value is a representable time other than SIMTIME_INVALID."""
    return 0 <= value < SIMTIME_INVALID
