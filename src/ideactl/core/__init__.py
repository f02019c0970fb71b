import logging

from .acpi import call, exists, read
from .codec import decode_response, encode_query, encode_write, parse_value
from .const import ACPI_CALL, LABELS, PerformanceMode, Setting, Toggle, Value
from .errors import (
    ChannelUnavailable,
    ConfigError,
    DecodeError,
    IdeactlError,
    MalformedResponse,
    TransportIo,
    UnexpectedValue,
)

logger = logging.getLogger(__name__)


def get_setting(setting: Setting, fn: str = ACPI_CALL) -> Value:
    """Queries the firmware for the current value of `setting`."""
    call(encode_query(setting), fn, risky=False)
    return decode_response(setting, read(fn))


def set_setting(setting: Setting, value: Value, fn: str = ACPI_CALL):
    """Writes `value` to the firmware. The new state is not read back."""
    call(encode_write(setting, value), fn)
    logger.info(f"Set '{setting.value}' to '{value.value}'.")


__all__ = [
    "ACPI_CALL",
    "LABELS",
    "ChannelUnavailable",
    "ConfigError",
    "DecodeError",
    "IdeactlError",
    "MalformedResponse",
    "PerformanceMode",
    "Setting",
    "Toggle",
    "TransportIo",
    "UnexpectedValue",
    "Value",
    "call",
    "decode_response",
    "encode_query",
    "encode_write",
    "exists",
    "get_setting",
    "parse_value",
    "read",
    "set_setting",
]
