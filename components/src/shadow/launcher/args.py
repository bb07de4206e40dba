# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import argparse
import logging
import sys
from typing import List, Optional, Sequence, TextIO, Tuple

from shadow.common.configuration.arg_group import ArgGroup, check_option_groups
from shadow.common.configuration.config_base import ConfigurationError
from shadow.common.configuration.groups import (
    MainArgGroup,
    MainConfig,
    NetworkArgGroup,
    NetworkConfig,
    PluginExamplesArgGroup,
    PluginExamplesConfig,
)
from shadow.common.configuration.utils import non_empty_str
from shadow.runtime.logging import Severity, resolve_log_level

logger = logging.getLogger(__name__)


class Config(MainConfig, NetworkConfig, PluginExamplesConfig):
    """Resolved launcher configuration, immutable once parsed."""

    # positional arguments, in command-line order
    input_filenames: Tuple[str, ...] = ()

    def validate(self) -> None:
        MainConfig.validate(self)
        NetworkConfig.validate(self)

    def get_log_level(self) -> Severity:
        """Severity resolved from --log-level; unknown names give the default."""
        return resolve_log_level(self.log_level)


class ShadowArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises ConfigurationError instead of exiting on bad input."""

    def error(self, message: str):
        raise ConfigurationError(message)


def option_groups() -> List[ArgGroup]:
    return [MainArgGroup(), NetworkArgGroup(), PluginExamplesArgGroup()]


def build_parser() -> ShadowArgumentParser:
    """Build the launcher parser from all option groups.

    Raises:
        OptionGroupConflictError: if two groups register the same flag.
    """
    groups = option_groups()
    check_option_groups(groups)

    parser = ShadowArgumentParser(
        prog="shadow",
        allow_abbrev=False,
        description="Shadow network simulator launcher",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    for group in groups:
        group.add_arguments(parser)

    parser.add_argument(
        "input_filenames",
        nargs="*",
        default=(),
        type=non_empty_str,
        metavar="FILE",
        help="Simulation input files, processed in the order given.",
    )
    return parser


def split_end_of_options(argv: Sequence[str]) -> Tuple[List[str], List[str]]:
    """Split argv at the first "--"; everything after it is a filename, even if it starts with "-"."""
    argv = list(argv)
    if "--" not in argv:
        return argv, []
    marker = argv.index("--")
    return argv[:marker], argv[marker + 1 :]


def build_config(
    argv: Optional[Sequence[str]] = None,
    parser: Optional[argparse.ArgumentParser] = None,
) -> Config:
    """Parse and validate argv into a live Config.

    Raises:
        ConfigurationError: on unknown flags, malformed or out-of-range values.
    """
    if parser is None:
        parser = build_parser()

    options, trailing = split_end_of_options(sys.argv[1:] if argv is None else argv)
    args = parser.parse_intermixed_args(options)

    filenames = list(args.input_filenames or ())
    for token in trailing:
        try:
            filenames.append(non_empty_str(token))
        except argparse.ArgumentTypeError as e:
            raise ConfigurationError(f"argument FILE: {e}")
    args.input_filenames = tuple(filenames)

    config = Config.from_cli_args(args)
    try:
        config.validate()
    except ConfigurationError:
        config.destroy()
        raise
    return config


def parse_args(
    argv: Optional[Sequence[str]] = None, stderr: Optional[TextIO] = None
) -> Optional[Config]:
    """Parse command-line arguments for the Shadow launcher.

    Errors are reported on stderr as a usage line plus a message naming the
    offending argument.

    Returns:
        Config: a live configuration, to be released with ``destroy()``,
        or None if the arguments were rejected.
    """
    stream = stderr if stderr is not None else sys.stderr
    try:
        parser = build_parser()
    except ConfigurationError as e:
        # Bad environment defaults: there is no parser to draw a usage line from.
        logger.debug("Rejected environment defaults: %s", e)
        print(f"shadow: error: {e}", file=stream)
        return None

    try:
        return build_config(argv, parser)
    except ConfigurationError as e:
        logger.debug("Rejected command line %r: %s", argv, e)
        parser.print_usage(stream)
        print(f"{parser.prog}: error: {e}", file=stream)
        return None
