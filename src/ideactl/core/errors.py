"""Errors raised while talking to the ACPI control file.

Every error inherits from :class:`IdeactlError`, so the command line only
has to catch one type. None of them are retried: firmware writes are not
safe to repeat blindly.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .const import Setting


class IdeactlError(Exception):
    """Base exception for ideactl."""


class ChannelUnavailable(IdeactlError):
    """The control file is missing or could not be opened.

    Usually means the ``acpi_call`` kernel module is not loaded or the
    process lacks the permissions to open the file.
    """

    def __init__(self, path: str, hint: str) -> None:
        self.path = path
        self.hint = hint
        super().__init__(f"Could not open ACPI control file '{path}'. {hint}")


class TransportIo(IdeactlError):
    """Writing to or reading from an open control file failed."""


class DecodeError(IdeactlError):
    """The firmware response could not be turned into a setting value."""


class MalformedResponse(DecodeError):
    """The response is not a ``0x<hex>\\0`` envelope around a valid integer."""

    def __init__(self, raw: str, reason: str) -> None:
        self.raw = raw
        super().__init__(f"Malformed ACPI response {raw!r}: {reason}.")


class UnexpectedValue(DecodeError):
    """The response decoded to an integer the setting does not define.

    Points to a firmware that does not match the method table rather
    than to a transport problem.
    """

    def __init__(self, setting: Setting, value: int) -> None:
        self.setting = setting
        self.value = value
        super().__init__(
            f"Unexpected value 0x{value:02x} for setting '{setting.value}'."
        )


class ConfigError(IdeactlError):
    """The configuration file could not be loaded."""
