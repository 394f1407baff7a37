# SPDX-License-Identifier: MIT
"""
ccconfig: native compiler flag configuration for builds.

Resolves whether a build uses the vendor SDClang toolchain, where that
toolchain lives and which flags it gets, by merging compiled-in defaults,
the SDClang JSON configuration files and environment overrides.
"""

from __future__ import annotations

from ccconfig.configure.config import Config, load_config
from ccconfig.core.errors import (
    CcConfigError,
    ConfigReadError,
    ConfigureError,
    MalformedConfigError,
    MissingToolchainPathError,
)
from ccconfig.core.state import ResolvedFeatureState

__version__ = "0.1.0"

# Public API exports
__all__ = [
    # Version
    "__version__",
    # Configuration
    "Config",
    "load_config",
    "ResolvedFeatureState",
    # Errors
    "CcConfigError",
    "ConfigureError",
    "ConfigReadError",
    "MalformedConfigError",
    "MissingToolchainPathError",
]
