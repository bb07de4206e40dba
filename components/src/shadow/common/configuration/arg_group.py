# SPDX-FileCopyrightText: Copyright (c) 2025-2026 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""Base ArgGroup interface and the cross-group flag collision check."""
import argparse
from abc import ABC, abstractmethod
from typing import Dict, List, Sequence


class OptionGroupConflictError(AssertionError):
    """Two ArgGroups register the same option string."""


class ArgGroup(ABC):
    """
    Base interface for configuration groups.

    Each ArgGroup represents a domain of configuration parameters with clear ownership.
    Groups are additive: no option string may be registered by more than one group.
    """

    name: str = ""

    @abstractmethod
    def add_arguments(self, parser) -> None:
        """
        Register CLI arguments owned by this group.

        This method must be side-effect free beyond parser mutation.
        It must not depend on runtime state or other groups.

        Args:
            parser: argparse.ArgumentParser or argument group
        """
        ...

    def option_strings(self) -> List[str]:
        """Option strings this group registers, collected on a scratch parser."""
        scratch = argparse.ArgumentParser(add_help=False)
        self.add_arguments(scratch)
        return [opt for action in scratch._actions for opt in action.option_strings]


def check_option_groups(groups: Sequence[ArgGroup]) -> None:
    """
    Assert that the given groups do not share any option string.

    Raises:
        OptionGroupConflictError: listing each duplicated flag and the groups claiming it.
    """
    owners: Dict[str, List[str]] = {}
    for group in groups:
        label = group.name or type(group).__name__
        for opt in group.option_strings():
            owners.setdefault(opt, []).append(label)

    duplicates = sorted(opt for opt, labels in owners.items() if len(labels) > 1)
    if duplicates:
        details = ", ".join(f"{opt} ({', '.join(owners[opt])})" for opt in duplicates)
        raise OptionGroupConflictError(f"Option groups register duplicate flags: {details}")
