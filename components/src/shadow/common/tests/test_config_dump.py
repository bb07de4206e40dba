# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Tests for dumping a resolved configuration to disk."""
import json

import pytest
import yaml

from shadow import __version__
from shadow.common.config_dump import config_to_dict, dump_config
from shadow.launcher.args import build_config

pytestmark = [
    pytest.mark.unit,
    pytest.mark.pre_merge,
]


@pytest.fixture
def config():
    config = build_config(["--workers", "2", "--log-level", "INFO", "b.xml", "a.xml"])
    yield config
    config.destroy()


def test_config_to_dict(config):
    data = config_to_dict(config)

    assert data["shadow_version"] == __version__
    assert data["workers"] == 2
    assert data["log_level"] == "INFO"
    assert data["resolved_log_level"] == "info"
    assert data["input_filenames"] == ["b.xml", "a.xml"]
    assert data["run_ping_example"] is False


def test_dump_json(config, tmp_path):
    target = tmp_path / "nested" / "config.json"

    written = dump_config(config, str(target))

    assert written == str(target)
    data = json.loads(target.read_text())
    assert data["workers"] == 2
    assert data["input_filenames"] == ["b.xml", "a.xml"]


@pytest.mark.parametrize("suffix", [".yaml", ".yml"])
def test_dump_yaml(config, tmp_path, suffix):
    target = tmp_path / f"config{suffix}"

    dump_config(config, str(target))

    data = yaml.safe_load(target.read_text())
    assert data["run_ahead"] == 0
    assert data["resolved_log_level"] == "info"
