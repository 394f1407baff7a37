# SPDX-License-Identifier: MIT
"""Custom exceptions for ccconfig.

All ccconfig exceptions inherit from CcConfigError, which includes
the optional configuration file the error concerns for better messages.

None of these terminate the process. They propagate to whoever called
load_config(), which decides what a fatal configuration error means.
"""

from __future__ import annotations

from pathlib import Path


class CcConfigError(Exception):
    """Base class for all ccconfig exceptions.

    Attributes:
        message: The error message.
        source: Optional configuration file the error concerns.
    """

    def __init__(
        self,
        message: str,
        source: Path | str | None = None,
    ) -> None:
        self.message = message
        self.source = source
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.source:
            return f"{self.source}: {self.message}"
        return self.message


class ConfigureError(CcConfigError):
    """Fatal error while building the configuration.

    No partial configuration is published once one of these is raised.
    """


class ConfigReadError(ConfigureError):
    """Configuration file exists but could not be read.

    Attributes:
        reason: The underlying OS error text.
    """

    def __init__(self, source: Path | str, reason: str) -> None:
        self.reason = reason
        super().__init__(f"cannot read configuration: {reason}", source)


class MalformedConfigError(ConfigureError):
    """Configuration file is not valid JSON or has a wrongly typed key.

    Attributes:
        detail: The decoder or schema validation message.
    """

    def __init__(self, detail: str, source: Path | str | None = None) -> None:
        self.detail = detail
        super().__init__(f"malformed configuration: {detail}", source)


class MissingToolchainPathError(ConfigureError):
    """Alternate toolchain is enabled but no toolchain path was supplied.

    Attributes:
        variable: The name of the variable that must be set.
    """

    def __init__(self, variable: str) -> None:
        self.variable = variable
        super().__init__(f"{variable} can not be empty if SDCLANG is true")
