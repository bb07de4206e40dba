# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import logging
import sys
from typing import Optional, Sequence

from shadow import __version__
from shadow.common.config_dump import dump_config
from shadow.launcher.args import parse_args
from shadow.runtime.logging import configure_shadow_logging

logger = logging.getLogger(__name__)

EXIT_FAILURE = 1
EXIT_USAGE = 2


def main(argv: Optional[Sequence[str]] = None) -> int:
    config = parse_args(argv)
    if config is None:
        return EXIT_USAGE

    with config:
        if config.version:
            print(f"shadow {__version__}")
            return 0

        configure_shadow_logging(config.get_log_level())
        logger.info(f"Initializing the launcher with config: {config}")

        if config.dump_config_to:
            try:
                dump_config(config, config.dump_config_to)
            except OSError as e:
                logger.error(f"Could not dump configuration to {config.dump_config_to}: {e}")
                return EXIT_FAILURE

        if not config.input_filenames and not config.has_plugin_examples():
            logger.warning(
                "No input files given and no example plugins enabled; nothing to simulate"
            )

        logger.debug(
            "Run-ahead window %d ns across %d worker thread(s)",
            config.get_run_ahead_time(),
            config.workers,
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
