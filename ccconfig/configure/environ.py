# SPDX-License-Identifier: MIT
"""Snapshot of the environment variables consumed by ccconfig.

Everything ccconfig reads from the process environment is captured once
into a BuildEnvironment. Downstream code never touches os.environ, so
resolving twice against the same snapshot always gives the same answer.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping


# Field name -> environment variable name
ENV_VARS: dict[str, str] = {
    "product": "TARGET_PRODUCT",
    "build_top": "ANDROID_BUILD_TOP",
    "ae_config_path": "SDCLANG_AE_CONFIG",
    "config_path": "SDCLANG_CONFIG",
    "sdclang": "SDCLANG",
    "sdclang_path": "SDCLANG_PATH",
    "sdclang_common_flags": "SDCLANG_COMMON_FLAGS",
    "llvm_prebuilts_base": "LLVM_PREBUILTS_BASE",
    "llvm_prebuilts_version": "LLVM_PREBUILTS_VERSION",
    "llvm_release_version": "LLVM_RELEASE_VERSION",
    "cc_wrapper": "CC_WRAPPER",
}


@dataclass(frozen=True)
class BuildEnvironment:
    """Immutable view of the build environment.

    Unset variables are stored as the empty string, which every layer
    treats as "not set".

    Attributes:
        product: TARGET_PRODUCT, the key into the vendor configuration.
        build_top: ANDROID_BUILD_TOP, base for the configuration file paths.
        ae_config_path: SDCLANG_AE_CONFIG, AE config path under build_top.
        config_path: SDCLANG_CONFIG, vendor config path under build_top.
        sdclang: SDCLANG, boolean enable override.
        sdclang_path: SDCLANG_PATH, toolchain path override.
        sdclang_common_flags: SDCLANG_COMMON_FLAGS, flags override.
        llvm_prebuilts_base: LLVM_PREBUILTS_BASE, clang prebuilts base override.
        llvm_prebuilts_version: LLVM_PREBUILTS_VERSION, clang version override.
        llvm_release_version: LLVM_RELEASE_VERSION, clang short version override.
        cc_wrapper: CC_WRAPPER, compiler launcher (e.g. ccache).
    """

    product: str = ""
    build_top: str = ""
    ae_config_path: str = ""
    config_path: str = ""
    sdclang: str = ""
    sdclang_path: str = ""
    sdclang_common_flags: str = ""
    llvm_prebuilts_base: str = ""
    llvm_prebuilts_version: str = ""
    llvm_release_version: str = ""
    cc_wrapper: str = ""

    @classmethod
    def from_environ(cls, environ: Mapping[str, str] | None = None) -> BuildEnvironment:
        """Capture the relevant variables from an environment mapping.

        Args:
            environ: Mapping to read from. Defaults to os.environ.

        Returns:
            A new BuildEnvironment.
        """
        if environ is None:
            environ = os.environ
        values = {
            f.name: environ.get(ENV_VARS[f.name], "") for f in fields(cls)
        }
        return cls(**values)

    def config_file(self, relative: str) -> Path | None:
        """Locate a configuration file under the build top.

        With a build_top set, the path is always joined under it, even
        when it starts with a slash. Without one, the path is used as given.

        Args:
            relative: Path relative to ANDROID_BUILD_TOP.

        Returns:
            The joined path, or None if relative is empty.
        """
        if not relative:
            return None
        if not self.build_top:
            return Path(relative)
        return Path(self.build_top) / relative.lstrip("/")

    @property
    def ae_config_file(self) -> Path | None:
        return self.config_file(self.ae_config_path)

    @property
    def vendor_config_file(self) -> Path | None:
        return self.config_file(self.config_path)
