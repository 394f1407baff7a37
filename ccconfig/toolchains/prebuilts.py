# SPDX-License-Identifier: MIT
"""Location of the prebuilt Clang toolchain.

The default Clang comes from the source tree's prebuilts directory. Each
part of its location can be overridden from the environment:

    LLVM_PREBUILTS_BASE     - prebuilts base directory
    LLVM_PREBUILTS_VERSION  - clang-<revision> directory name
    LLVM_RELEASE_VERSION    - short version used in the resource dir

CC_WRAPPER (e.g. ccache) is prepended to every compiler command.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import PurePosixPath
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ccconfig.configure.environ import BuildEnvironment

CLANG_DEFAULT_BASE = "prebuilts/clang/host"
CLANG_DEFAULT_VERSION = "clang-4053586"
CLANG_DEFAULT_SHORT_VERSION = "5.0"


def host_prebuilt_tag(platform: str | None = None) -> str:
    """Get the prebuilts directory tag for the host OS.

    Args:
        platform: A sys.platform value. Defaults to the running host.

    Returns:
        'linux-x86', 'darwin-x86' or 'windows-x86'.
    """
    if platform is None:
        platform = sys.platform
    if platform == "darwin":
        return "darwin-x86"
    if platform.startswith(("win32", "cygwin")):
        return "windows-x86"
    return "linux-x86"


@dataclass(frozen=True)
class ClangPrebuilts:
    """Resolved prebuilt Clang location.

    Attributes:
        base: Prebuilts base directory.
        version: Clang revision directory, e.g. 'clang-4053586'.
        short_version: Clang release version, e.g. '5.0'.
        host_tag: Host prebuilts tag, e.g. 'linux-x86'.
        cc_wrapper: Compiler launcher prefix, with trailing space, or ''.
    """

    base: str
    version: str
    short_version: str
    host_tag: str
    cc_wrapper: str = ""

    @property
    def path(self) -> str:
        return str(PurePosixPath(self.base, self.host_tag, self.version))

    @property
    def bin_dir(self) -> str:
        return f"{self.path}/bin"

    @property
    def asan_lib_dir(self) -> str:
        return f"{self.path}/lib64/clang/{self.short_version}/lib/linux"

    def as_variables(self) -> dict[str, str]:
        """Published build variables for the prebuilt Clang."""
        return {
            "ClangBase": self.base,
            "ClangVersion": self.version,
            "ClangShortVersion": self.short_version,
            "HostPrebuiltTag": self.host_tag,
            "ClangPath": self.path,
            "ClangBin": self.bin_dir,
            "ClangAsanLibDir": self.asan_lib_dir,
            "CcWrapper": self.cc_wrapper,
        }


def resolve_clang_prebuilts(
    env: BuildEnvironment, platform: str | None = None
) -> ClangPrebuilts:
    """Resolve the prebuilt Clang location from the environment.

    Args:
        env: Snapshot of the build environment.
        platform: Optional sys.platform value for the host tag.

    Returns:
        The resolved ClangPrebuilts.
    """
    base = env.llvm_prebuilts_base
    if not base:
        base = str(PurePosixPath(env.build_top or ".", CLANG_DEFAULT_BASE))

    cc_wrapper = f"{env.cc_wrapper} " if env.cc_wrapper else ""

    return ClangPrebuilts(
        base=base,
        version=env.llvm_prebuilts_version or CLANG_DEFAULT_VERSION,
        short_version=env.llvm_release_version or CLANG_DEFAULT_SHORT_VERSION,
        host_tag=host_prebuilt_tag(platform),
        cc_wrapper=cc_wrapper,
    )
