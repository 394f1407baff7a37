# SPDX-License-Identifier: MIT
"""Typed schema for the SDClang JSON configuration files.

Two files are involved:

* The AE config file: ``{"SDCLANG_AE_FLAG": "<string>"}``
* The vendor config file, keyed by product::

    {
        "<product>": {
            "SDCLANG": true,
            "SDCLANG_PATH": "/path/to/sdclang/bin",
            "SDCLANG_FLAGS": "-O3"
        }
    }

Unknown keys are ignored. Known keys are validated strictly: a string
where a boolean is expected is a configuration-authoring bug, not
something to coerce, and so is a JSON ``null`` for a product key. A null
AE flag is treated as unset.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError


class AEConfig(BaseModel):
    """Contents of the AE (auto-enable) config file."""

    model_config = ConfigDict(
        extra="ignore", strict=True, frozen=True, populate_by_name=True
    )

    ae_flag: str | None = Field(default=None, alias="SDCLANG_AE_FLAG")


class OverrideBlock(BaseModel):
    """Per-product override block from the vendor config file.

    The toolchain path and extra flags only count when the block itself
    enables SDClang; a disabled block contributes nothing but ``False``.
    """

    model_config = ConfigDict(
        extra="ignore", strict=True, frozen=True, populate_by_name=True
    )

    enabled: bool = Field(default=False, alias="SDCLANG")
    path: str = Field(default="", alias="SDCLANG_PATH")
    extra_flags: str = Field(default="", alias="SDCLANG_FLAGS")

    @property
    def is_enabled(self) -> bool:
        return self.enabled

    @property
    def toolchain_path(self) -> str:
        if not self.is_enabled:
            return ""
        return self.path

    @property
    def toolchain_flags(self) -> str:
        if not self.is_enabled:
            return ""
        return self.extra_flags


# The vendor file is an open mapping; product blocks are only checked
# when they are looked up.
VENDOR_CONFIG_ADAPTER: TypeAdapter[dict[str, Any]] = TypeAdapter(dict[str, Any])


def describe_validation_error(exc: ValidationError) -> str:
    """Flatten a pydantic ValidationError into a one-line description.

    Examples:
        Invalid JSON: expected value at line 1 column 1
        SDCLANG: Input should be a valid boolean
    """
    parts = []
    for error in exc.errors(include_url=False):
        loc = ".".join(str(item) for item in error["loc"])
        parts.append(f"{loc}: {error['msg']}" if loc else error["msg"])
    return "; ".join(parts)
