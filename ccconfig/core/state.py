# SPDX-License-Identifier: MIT
"""Resolved SDClang feature state."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ResolvedFeatureState:
    """Final SDClang selection after every override layer.

    Only meaningful once validate_feature_state() has accepted it.

    Attributes:
        enabled: Whether the alternate toolchain is used.
        path: Toolchain location (may be empty or stale when disabled).
        flags: Combined SDClang flags string.
    """

    enabled: bool = False
    path: str = ""
    flags: str = ""

    def as_variables(self) -> dict[str, str]:
        """Published build variables for this state."""
        return {
            "SDClang": "true" if self.enabled else "false",
            "SDClangBin": self.path,
            "SDClangFlags": self.flags,
        }
