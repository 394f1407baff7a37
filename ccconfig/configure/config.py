# SPDX-License-Identifier: MIT
"""Top-level compiler configuration for ccconfig.

load_config() is the single initialization call: it snapshots the
environment, reads the SDClang configuration files, applies the override
chain and validates the result. The returned Config is immutable and can
be shared freely between readers.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ccconfig.configure.environ import BuildEnvironment
from ccconfig.configure.loader import load_ae_flag, load_product_overrides
from ccconfig.core.resolver import resolve_feature_state
from ccconfig.core.validator import validate_feature_state
from ccconfig.toolchains.prebuilts import ClangPrebuilts, resolve_clang_prebuilts

if TYPE_CHECKING:
    from collections.abc import Mapping

    from ccconfig.core.state import ResolvedFeatureState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Config:
    """Resolved compiler configuration.

    Example:
        config = load_config()
        if config.sdclang.enabled:
            print(f"Using SDClang from {config.sdclang.path}")

        # Values for the build-variable namespace
        variables = config.variables()

    Attributes:
        product: The product the configuration was resolved for.
        sdclang: Validated SDClang feature state.
        clang: Prebuilt Clang location.
    """

    product: str
    sdclang: ResolvedFeatureState
    clang: ClangPrebuilts

    def variables(self) -> dict[str, str]:
        """Get all published build variables.

        Returns:
            Mapping of variable name to string value.
        """
        result = self.clang.as_variables()
        result.update(self.sdclang.as_variables())
        return result

    def __repr__(self) -> str:
        return (
            f"Config(product={self.product!r}, sdclang={self.sdclang.enabled}, "
            f"clang={self.clang.version})"
        )


def load_config(
    environ: Mapping[str, str] | None = None,
    *,
    platform: str | None = None,
) -> Config:
    """Build the compiler configuration.

    Args:
        environ: Environment mapping to read. Defaults to os.environ.
        platform: Optional sys.platform value for the host prebuilts tag.

    Returns:
        The resolved Config.

    Raises:
        ConfigReadError: If a configuration file cannot be read.
        MalformedConfigError: If a configuration file is invalid.
        MissingToolchainPathError: If SDClang is enabled without a path.
    """
    env = BuildEnvironment.from_environ(environ)

    ae_flag = load_ae_flag(env.ae_config_file)
    store = load_product_overrides(env.vendor_config_file)
    block = store.lookup(env.product)

    state = resolve_feature_state(
        block.is_enabled,
        block.toolchain_path,
        ae_flag,
        block.toolchain_flags,
        env,
    )
    validate_feature_state(state)

    if state.enabled:
        logger.info("SDClang enabled for %s: %s", env.product or "(no product)", state.path)
    else:
        logger.debug("SDClang disabled for %s", env.product or "(no product)")

    return Config(
        product=env.product,
        sdclang=state,
        clang=resolve_clang_prebuilts(env, platform),
    )
