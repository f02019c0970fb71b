import logging
import os
from logging.handlers import RotatingFileHandler

from rich.console import Console
from rich.logging import RichHandler

from .utils import expanduser, fix_perms

logger = logging.getLogger(__name__)

LOG_FILE = "ideactl.log"


class NewLineFormatter(logging.Formatter):
    """Aligns newlines during multiline prints."""

    def format(self, record):
        msg = super().format(record)
        if (idx := msg.find("|||")) != -1:
            preamble = msg[:idx]
            msg = msg.replace("|||", "").replace("\n", "\n" + (" " * len(preamble)))
        return msg


class UserRotatingFileHandler(RotatingFileHandler):
    """Keeps the log owned by the user that ran sudo/pkexec, rotations included."""

    def _open(self):
        d = super()._open()
        fix_perms(self.baseFilename)
        return d


def setup_logger(verbose: bool = False):
    from rich.traceback import install

    install(console=Console(stderr=True))

    # Status lines go to stdout, keep logs out of the way
    handler = RichHandler(
        console=Console(stderr=True),
        show_time=verbose,
        show_path=verbose,
        markup=False,
    )
    handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logging.basicConfig(
        level=logging.DEBUG,
        datefmt="[%H:%M:%S]",
        format="%(message)s",
        handlers=[handler],
        force=True,
    )
    logger.debug(f"Logging initialized (verbose: {verbose}).")


def add_file_handler(log_dir: str) -> bool:
    """Also logs everything to a rotating file in `log_dir`.

    A log dir that can not be used is reported and skipped."""
    log_dir = expanduser(log_dir)
    try:
        os.makedirs(log_dir, exist_ok=True)
        fix_perms(log_dir)
        handler = UserRotatingFileHandler(
            os.path.join(log_dir, LOG_FILE),
            maxBytes=1_000_000,
            backupCount=5,
        )
    except OSError as e:
        logger.warning(f"Could not write logs to '{log_dir}', error:\n{e}")
        return False

    handler.setFormatter(
        NewLineFormatter("%(asctime)s %(module)-10s %(levelname)-8s|||%(message)s")
    )
    # The file keeps everything, the console only what was asked for
    handler.setLevel(logging.DEBUG)
    logging.getLogger().addHandler(handler)
    logger.debug(f"Logging to '{log_dir}'.")
    return True
