# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Tests for log level resolution and logging setup."""
import io
import logging

import pytest

from shadow.runtime.logging import (
    DEFAULT_SEVERITY,
    LOG_LEVEL_NAMES,
    MESSAGE,
    Severity,
    ShadowLogHandler,
    configure_shadow_logging,
    resolve_log_level,
)

pytestmark = [
    pytest.mark.unit,
    pytest.mark.pre_merge,
]


class TestResolveLogLevel:
    @pytest.mark.parametrize(
        "tag,expected",
        [
            ("error", Severity.ERROR),
            ("critical", Severity.CRITICAL),
            ("warning", Severity.WARNING),
            ("message", Severity.MESSAGE),
            ("info", Severity.INFO),
            ("debug", Severity.DEBUG),
        ],
    )
    def test_known_names(self, tag, expected):
        assert resolve_log_level(tag) is expected

    def test_case_insensitive(self):
        assert resolve_log_level("DEBUG") is resolve_log_level("debug")
        assert resolve_log_level("Warning") is Severity.WARNING
        assert resolve_log_level("  info ") is Severity.INFO

    @pytest.mark.parametrize("tag", ["bogus", "", None, "warn", "__class__", "5"])
    def test_unknown_falls_back_to_default(self, tag):
        assert resolve_log_level(tag) is DEFAULT_SEVERITY

    def test_default_is_message(self):
        assert DEFAULT_SEVERITY is Severity.MESSAGE

    def test_names_cover_every_severity(self):
        assert LOG_LEVEL_NAMES == ("error", "critical", "warning", "message", "info", "debug")


class TestSeverity:
    def test_ordered_by_verbosity(self):
        assert (
            Severity.ERROR
            < Severity.CRITICAL
            < Severity.WARNING
            < Severity.MESSAGE
            < Severity.INFO
            < Severity.DEBUG
        )

    def test_logging_levels_get_more_verbose(self):
        levels = [severity.logging_level for severity in Severity]

        assert levels == sorted(levels, reverse=True)
        assert Severity.WARNING.logging_level == logging.WARNING
        assert Severity.MESSAGE.logging_level == MESSAGE
        assert logging.getLevelName(MESSAGE) == "MESSAGE"


class TestConfigureShadowLogging:
    def test_filters_below_threshold(self):
        stream = io.StringIO()
        logger = configure_shadow_logging(Severity.WARNING, stream=stream)

        logging.getLogger("shadow.test").info("hidden")
        logging.getLogger("shadow.test").warning("shown")

        output = stream.getvalue()
        assert "shown" in output
        assert "hidden" not in output
        assert logger.level == logging.WARNING

    def test_reconfigure_replaces_handler(self):
        stream = io.StringIO()
        configure_shadow_logging(Severity.DEBUG, stream=io.StringIO())
        logger = configure_shadow_logging(Severity.DEBUG, stream=stream)

        logging.getLogger("shadow.test").debug("once")

        assert stream.getvalue().count("once") == 1
        assert sum(isinstance(h, ShadowLogHandler) for h in logger.handlers) == 1
