# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Built-in plugin example toggles."""

from shadow.common.configuration.arg_group import ArgGroup
from shadow.common.configuration.config_base import ConfigBase
from shadow.common.configuration.utils import add_negatable_bool_argument


class PluginExamplesConfig(ConfigBase):
    """Independent example toggles; any combination may be enabled."""

    run_ping_example: bool = False
    run_echo_example: bool = False
    run_file_example: bool = False

    def has_plugin_examples(self) -> bool:
        return self.run_ping_example or self.run_echo_example or self.run_file_example


class PluginExamplesArgGroup(ArgGroup):
    """Switches for the bundled example plugins."""

    name = "plugin-examples"

    def add_arguments(self, parser) -> None:
        g = parser.add_argument_group("Plugin Example Options")

        add_negatable_bool_argument(
            g,
            flag_name="--run-ping-example",
            env_var="SHADOW_RUN_PING_EXAMPLE",
            default=False,
            help="Run the built-in ping example simulation.",
        )
        add_negatable_bool_argument(
            g,
            flag_name="--run-echo-example",
            env_var="SHADOW_RUN_ECHO_EXAMPLE",
            default=False,
            help="Run the built-in echo example simulation.",
        )
        add_negatable_bool_argument(
            g,
            flag_name="--run-file-example",
            env_var="SHADOW_RUN_FILE_EXAMPLE",
            default=False,
            help="Run the built-in file transfer example simulation.",
        )
