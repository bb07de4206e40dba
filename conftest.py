# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import os

import pytest


@pytest.fixture(autouse=True)
def _clear_shadow_env(monkeypatch):
    """Keep SHADOW_* variables from the calling shell out of parser defaults."""
    for name in list(os.environ):
        if name.startswith("SHADOW_"):
            monkeypatch.delenv(name)
