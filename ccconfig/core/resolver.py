# SPDX-License-Identifier: MIT
"""Environment override resolution for the SDClang feature.

Precedence (highest to lowest):
    1. Environment: SDCLANG, SDCLANG_PATH, SDCLANG_COMMON_FLAGS
    2. Per-product block in the vendor config file (plus the AE flag)
    3. Compiled-in default: disabled, no path, no flags

Each environment variable replaces its file-derived value outright; values
are never combined across layers. Resolution never fails. Checking the
result is the validator's job.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ccconfig.core.state import ResolvedFeatureState

if TYPE_CHECKING:
    from ccconfig.configure.environ import BuildEnvironment

_TRUE_STRINGS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_STRINGS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def parse_env_bool(value: str | None) -> bool | None:
    """Parse a boolean environment value.

    Args:
        value: The raw environment value.

    Returns:
        True or False for a recognized spelling, None otherwise.

    Examples:
        >>> parse_env_bool("true")
        True
        >>> parse_env_bool("0")
        False
        >>> parse_env_bool("yes") is None
        True
    """
    if value in _TRUE_STRINGS:
        return True
    if value in _FALSE_STRINGS:
        return False
    return None


def resolve_feature_state(
    file_enabled: bool,
    file_path: str,
    ae_flag: str,
    file_extra_flags: str,
    env: BuildEnvironment,
) -> ResolvedFeatureState:
    """Apply the environment overrides on top of file-derived values.

    Args:
        file_enabled: SDCLANG from the product's override block.
        file_path: SDCLANG_PATH from the product's override block.
        ae_flag: SDCLANG_AE_FLAG from the AE config file.
        file_extra_flags: SDCLANG_FLAGS from the product's override block.
        env: Snapshot of the build environment.

    Returns:
        The resolved (not yet validated) feature state.
    """
    enabled = file_enabled
    override = parse_env_bool(env.sdclang)
    if override is not None:
        enabled = override

    path = env.sdclang_path or file_path

    # The AE flag always leads, even when empty
    flags = env.sdclang_common_flags or f"{ae_flag} {file_extra_flags}"

    return ResolvedFeatureState(enabled=enabled, path=path, flags=flags)
