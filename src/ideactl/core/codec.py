import logging
import string

from .const import (
    PERFORMANCE_ALIASES,
    QUERY_COMMANDS,
    READ_VALUES,
    VALUE_TYPES,
    WRITE_COMMANDS,
    Setting,
    Value,
)
from .errors import MalformedResponse, UnexpectedValue

logger = logging.getLogger(__name__)

HEX_PREFIX = "0x"
TERMINATOR = "\0"


def encode_write(setting: Setting, value: Value) -> str:
    """Returns the ACPI call that sets `setting` to `value`.

    The command is the method path followed by a single space and the
    hex operand, e.g. `\\_SB.PCI0.LPC0.EC0.VPC0.SBMC 0x03`."""
    if not isinstance(value, VALUE_TYPES[setting]):
        raise TypeError(
            f"Setting '{setting.value}' expects a {VALUE_TYPES[setting].__name__}, got {value!r}."
        )
    method, operand = WRITE_COMMANDS[(setting, value)]
    return f"{method} {operand}"


def encode_query(setting: Setting) -> str:
    return QUERY_COMMANDS[setting]


def decode_response(setting: Setting, raw: str) -> Value:
    """Parses a raw `0x<hex>\\0` response into the value of `setting`.

    The envelope is checked strictly. No whitespace is trimmed and only one
    trailing NUL is removed."""
    if not raw.startswith(HEX_PREFIX):
        raise MalformedResponse(raw, f"missing '{HEX_PREFIX}' prefix")
    if not raw.endswith(TERMINATOR):
        raise MalformedResponse(raw, "missing NUL terminator")

    digits = raw[len(HEX_PREFIX) : -len(TERMINATOR)]
    # int() would also accept signs, underscores and whitespace
    if not digits or any(c not in string.hexdigits for c in digits):
        raise MalformedResponse(raw, f"'{digits}' is not a hex integer")
    num = int(digits, 16)

    values = READ_VALUES[setting]
    if num not in values:
        raise UnexpectedValue(setting, num)

    logger.debug(f"Decoded '{setting.value}' response 0x{num:02x} as '{values[num].value}'.")
    return values[num]


def parse_value(setting: Setting, text: str) -> Value:
    """Resolves a command line value (name or numeric alias) for `setting`."""
    name = text.strip().lower()
    if setting == Setting.PERFORMANCE and name in PERFORMANCE_ALIASES:
        return PERFORMANCE_ALIASES[name]
    return VALUE_TYPES[setting](name)
