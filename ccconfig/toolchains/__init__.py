# SPDX-License-Identifier: MIT
"""Toolchain locations (prebuilt Clang)."""

from ccconfig.toolchains.prebuilts import (
    ClangPrebuilts,
    host_prebuilt_tag,
    resolve_clang_prebuilts,
)

__all__ = [
    "ClangPrebuilts",
    "host_prebuilt_tag",
    "resolve_clang_prebuilts",
]
