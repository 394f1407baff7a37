# SPDX-License-Identifier: MIT
"""Loading of the SDClang JSON configuration files.

Both files are optional. A file that does not exist is the same as an
empty configuration; a file that exists but cannot be read or decoded
is fatal, with no best-effort partial decode.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from ccconfig.configure.schema import (
    VENDOR_CONFIG_ADAPTER,
    AEConfig,
    OverrideBlock,
    describe_validation_error,
)
from ccconfig.core.errors import ConfigReadError, MalformedConfigError

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)


def _read_config(path: Path | str | None) -> bytes | None:
    """Read a configuration file.

    Returns:
        The raw file contents, or None if there is no such file.

    Raises:
        ConfigReadError: If the file exists but cannot be read.
    """
    if path is None:
        return None
    try:
        return Path(path).read_bytes()
    except FileNotFoundError:
        return None
    except OSError as e:
        raise ConfigReadError(path, e.strerror or str(e)) from e


class ProductOverrideStore(Mapping[str, OverrideBlock]):
    """Read-only mapping from product identifier to its OverrideBlock.

    Product keys are matched exactly (case-sensitive). Blocks are decoded
    when accessed, so a badly typed entry for some other product does not
    affect the current one.

    Attributes:
        source: The file the store was loaded from, if any.
    """

    def __init__(
        self,
        products: Mapping[str, Any] | None = None,
        source: Path | None = None,
    ) -> None:
        self._products: dict[str, Any] = dict(products or {})
        self.source = source

    def __getitem__(self, product: str) -> OverrideBlock:
        raw = self._products[product]
        try:
            return OverrideBlock.model_validate(raw)
        except ValidationError as e:
            detail = f"{product}: {describe_validation_error(e)}"
            raise MalformedConfigError(detail, self.source) from e

    def __contains__(self, product: object) -> bool:
        return product in self._products

    def __iter__(self) -> Iterator[str]:
        return iter(self._products)

    def __len__(self) -> int:
        return len(self._products)

    def lookup(self, product: str) -> OverrideBlock:
        """Get the override block for a product.

        Args:
            product: Product identifier.

        Returns:
            The product's block, or an empty (disabled) block if the
            product has no entry.

        Raises:
            MalformedConfigError: If the product's entry is badly typed.
        """
        if product not in self:
            return OverrideBlock()
        return self[product]

    def __repr__(self) -> str:
        return f"ProductOverrideStore(products={sorted(self._products)}, source={self.source})"


def load_ae_flag(path: Path | str | None) -> str:
    """Load the AE flag from the AE config file.

    Args:
        path: Path to the AE config file, or None if not configured.

    Returns:
        The SDCLANG_AE_FLAG value, or "" if the file or key is absent.

    Raises:
        ConfigReadError: If the file exists but cannot be read.
        MalformedConfigError: If the file is not valid JSON or the flag
            is not a string.
    """
    raw = _read_config(path)
    if raw is None:
        logger.debug("No AE config at %s", path)
        return ""

    try:
        config = AEConfig.model_validate_json(raw)
    except ValidationError as e:
        raise MalformedConfigError(describe_validation_error(e), path) from e
    return config.ae_flag or ""


def load_product_overrides(path: Path | str | None) -> ProductOverrideStore:
    """Load the per-product overrides from the vendor config file.

    Args:
        path: Path to the vendor config file, or None if not configured.

    Returns:
        The product override store; empty if the file does not exist.

    Raises:
        ConfigReadError: If the file exists but cannot be read.
        MalformedConfigError: If the file is not a valid JSON object.
    """
    raw = _read_config(path)
    if raw is None:
        logger.info("SDClang config not found: %s", path)
        return ProductOverrideStore()

    source = Path(path) if path is not None else None
    try:
        products = VENDOR_CONFIG_ADAPTER.validate_json(raw)
    except ValidationError as e:
        raise MalformedConfigError(describe_validation_error(e), source) from e

    logger.debug("Loaded SDClang config for %d product(s) from %s", len(products), source)
    return ProductOverrideStore(products, source=source)
