# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Main Shadow launcher configuration ArgGroup."""

from typing import Optional

from shadow.common.configuration.arg_group import ArgGroup
from shadow.common.configuration.config_base import ConfigBase, ConfigurationError
from shadow.common.configuration.utils import INT32_MAX, add_argument, non_negative_int
from shadow.runtime.logging import DEFAULT_LOG_LEVEL, LOG_LEVEL_NAMES

DEFAULT_WORKERS = 0


class MainConfig(ConfigBase):
    """Configuration owned by the main option group."""

    log_level: str = DEFAULT_LOG_LEVEL
    workers: int = DEFAULT_WORKERS
    version: bool = False
    dump_config_to: Optional[str] = None

    def validate(self) -> None:
        if self.workers < 0:
            raise ConfigurationError(f"--workers must be >= 0, got {self.workers}")
        if self.workers > INT32_MAX:
            raise ConfigurationError(
                f"--workers must be <= {INT32_MAX}, got {self.workers}"
            )


class MainArgGroup(ArgGroup):
    """Logging, worker threads and version reporting."""

    name = "main"

    def add_arguments(self, parser) -> None:
        """Add main launcher arguments to parser."""
        g = parser.add_argument_group("Main Options")

        # Not restricted to `choices`: unknown names fall back to the default severity.
        add_argument(
            g,
            flag_name="--log-level",
            env_var="SHADOW_LOG_LEVEL",
            default=DEFAULT_LOG_LEVEL,
            help=f"Log level threshold, one of: {', '.join(LOG_LEVEL_NAMES)}.",
            metavar="LEVEL",
        )
        add_argument(
            g,
            flag_name="--workers",
            env_var="SHADOW_WORKERS",
            default=DEFAULT_WORKERS,
            aliases=("-w", "--worker-threads"),
            help="Number of worker threads to run the simulation with (0 runs everything on the main thread).",
            arg_type=non_negative_int,
            metavar="N",
        )
        g.add_argument(
            "--version",
            action="store_true",
            default=False,
            help="Print the software version and exit.",
        )
        add_argument(
            g,
            flag_name="--dump-config-to",
            env_var="SHADOW_DUMP_CONFIG_TO",
            default=None,
            help="Dump the resolved configuration to the given path (.yaml/.yml as YAML, otherwise JSON).",
            metavar="PATH",
        )
