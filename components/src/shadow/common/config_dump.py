# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Write a resolved configuration to disk for inspection or reproduction."""

import json
import logging
import os
from typing import Any, Dict

import yaml

from shadow import __version__
from shadow.common.configuration.config_base import ConfigBase

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")


def config_to_dict(config: ConfigBase) -> Dict[str, Any]:
    """Plain, serializable view of a live configuration."""
    data: Dict[str, Any] = {"shadow_version": __version__}
    for key, value in config.to_dict().items():
        data[key] = list(value) if isinstance(value, tuple) else value
    get_log_level = getattr(config, "get_log_level", None)
    if get_log_level is not None:
        data["resolved_log_level"] = get_log_level().name.lower()
    return data


def dump_config(config: ConfigBase, path: str) -> str:
    """
    Dump the configuration to ``path``.

    ``.yaml``/``.yml`` paths are written as YAML, anything else as JSON.
    Parent directories are created as needed.

    Returns:
        The absolute path written.
    """
    data = config_to_dict(config)
    target = os.path.abspath(os.path.expanduser(os.path.expandvars(path)))
    parent = os.path.dirname(target)
    if parent:
        os.makedirs(parent, exist_ok=True)

    with open(target, "w") as f:
        if target.lower().endswith(YAML_SUFFIXES):
            yaml.safe_dump(data, f, sort_keys=True)
        else:
            json.dump(data, f, indent=2, sort_keys=True)
            f.write("\n")

    logger.info("Dumped configuration to %s", target)
    return target
