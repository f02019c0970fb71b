import logging
import os

from .const import ACPI_CALL
from .errors import ChannelUnavailable, MalformedResponse, TransportIo

logger = logging.getLogger(__name__)

MODULE_HINT = "Is the 'acpi_call' kernel module loaded? Try 'sudo modprobe acpi_call'."
PERMS_HINT = "Writing ACPI calls requires root, try running with sudo."


def exists(fn: str = ACPI_CALL) -> bool:
    return os.path.exists(fn)


def _unavailable(fn: str, e: OSError):
    logger.error(f"Could not open acpi_call file ('{fn}'). Error:\n{e}")
    if isinstance(e, PermissionError):
        return ChannelUnavailable(fn, PERMS_HINT)
    return ChannelUnavailable(fn, MODULE_HINT)


def call(cmd: str, fn: str = ACPI_CALL, risky: bool = True):
    """Writes a single ACPI call to the control file.

    The file is opened for this one write and closed right after,
    `acpi_call` does not support reusing a handle."""
    log = logger.info if risky else logger.debug
    log(f"Executing ACPI call:\n'{cmd}'")

    if not exists(fn):
        raise ChannelUnavailable(fn, MODULE_HINT)

    try:
        f = open(fn, "wb")
    except OSError as e:
        raise _unavailable(fn, e) from e

    with f:
        try:
            f.write(cmd.encode("ascii"))
            f.flush()
        except OSError as e:
            logger.error(f"ACPI Call failed with error:\n{e}")
            raise TransportIo(f"Writing ACPI call '{cmd}' failed: {e}") from e


def read(fn: str = ACPI_CALL) -> str:
    """Reads back the result of the last ACPI call as text."""
    try:
        f = open(fn, "rb")
    except OSError as e:
        raise _unavailable(fn, e) from e

    with f:
        try:
            d = f.read()
        except OSError as e:
            logger.error(f"Reading ACPI call result failed with error:\n{e}")
            raise TransportIo(f"Reading ACPI call result failed: {e}") from e

    try:
        o = d.decode("ascii")
    except UnicodeDecodeError as e:
        raise MalformedResponse(repr(d), "not ASCII text") from e

    logger.debug(f"ACPI call returned:\n{o!r}")
    return o
