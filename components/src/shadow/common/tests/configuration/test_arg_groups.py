# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Tests for the launcher option groups and the flag collision check."""

import pytest

from shadow.common.configuration.arg_group import (
    ArgGroup,
    OptionGroupConflictError,
    check_option_groups,
)
from shadow.common.configuration.groups import (
    MainArgGroup,
    NetworkArgGroup,
    PluginExamplesArgGroup,
)

pytestmark = [
    pytest.mark.unit,
    pytest.mark.pre_merge,
]


class _DuplicateRunAheadGroup(ArgGroup):
    name = "duplicate"

    def add_arguments(self, parser) -> None:
        parser.add_argument("--run-ahead", type=int)


class TestOptionGroups:
    def test_groups_do_not_collide(self):
        check_option_groups([MainArgGroup(), NetworkArgGroup(), PluginExamplesArgGroup()])

    def test_main_group_flags(self):
        assert set(MainArgGroup().option_strings()) == {
            "--log-level",
            "--workers",
            "-w",
            "--worker-threads",
            "--version",
            "--dump-config-to",
        }

    def test_network_group_flags(self):
        assert set(NetworkArgGroup().option_strings()) == {"--run-ahead", "--runahead"}

    def test_plugin_group_flags(self):
        flags = set(PluginExamplesArgGroup().option_strings())

        for name in ("ping", "echo", "file"):
            assert f"--run-{name}-example" in flags
            assert f"--no-run-{name}-example" in flags

    def test_collision_detected(self):
        with pytest.raises(OptionGroupConflictError, match="--run-ahead") as exc_info:
            check_option_groups([NetworkArgGroup(), _DuplicateRunAheadGroup()])

        assert "network" in str(exc_info.value)
        assert "duplicate" in str(exc_info.value)
        assert isinstance(exc_info.value, AssertionError)
