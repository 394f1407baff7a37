# SPDX-License-Identifier: MIT
"""Validation of the resolved SDClang feature state."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ccconfig.core.errors import MissingToolchainPathError

if TYPE_CHECKING:
    from ccconfig.core.state import ResolvedFeatureState


def validate_feature_state(state: ResolvedFeatureState) -> ResolvedFeatureState:
    """Check that an enabled SDClang has somewhere to find its toolchain.

    A disabled state is returned as-is; its path and flags are not used.

    Args:
        state: The resolved feature state.

    Returns:
        The same state, if valid.

    Raises:
        MissingToolchainPathError: If enabled with an empty path.
    """
    if state.enabled and not state.path:
        raise MissingToolchainPathError("SDCLANG_PATH")
    return state
