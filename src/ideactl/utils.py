import logging
import os
import shutil
import subprocess
import sys
from typing import NamedTuple, Sequence

logger = logging.getLogger(__name__)

ELEVATION_TOOLS = ("sudo", "pkexec")


class User(NamedTuple):
    uid: int
    gid: int
    home: str


def get_invoking_user() -> User | None:
    """Returns the user that ran sudo or pkexec, if elevated through them."""
    import pwd

    try:
        if uid := os.environ.get("SUDO_UID", None):
            pw = pwd.getpwuid(int(uid))
        elif uid := os.environ.get("PKEXEC_UID", None):
            pw = pwd.getpwuid(int(uid))
        else:
            return None
    except (KeyError, ValueError) as e:
        logger.warning(f"Could not find the invoking user, error:\n{e}")
        return None

    return User(pw.pw_uid, pw.pw_gid, pw.pw_dir)


def expanduser(path: str):
    """Expand `~` using the invoking user's home when running under sudo
    or pkexec.

    Keeps log files out of `/root` when ideactl re-ran itself elevated."""
    path = os.fspath(path)
    if not path.startswith("~"):
        return path

    if (path == "~" or path.startswith("~/")) and (user := get_invoking_user()):
        return user.home.rstrip("/") + path[1:] or "/"
    return os.path.expanduser(path)


def fix_perms(path: str):
    """Hands files created as root back to the invoking user."""
    if not is_root() or not (user := get_invoking_user()):
        return
    try:
        os.chown(path, user.uid, user.gid)
    except OSError as e:
        logger.warning(f"Could not fix permissions of '{path}', error:\n{e}")


def is_root() -> bool:
    return os.geteuid() == 0


def get_elevation_tool() -> str | None:
    for tool in ELEVATION_TOOLS:
        if exe := shutil.which(tool):
            return exe
    return None


def elevate(args: Sequence[str]) -> int | None:
    """Re-runs ideactl with root permissions.

    Returns the exit code of the elevated process, or None if no elevation
    tool could be found and the caller should continue unprivileged."""
    tool = get_elevation_tool()
    if not tool:
        logger.warning(
            f"Not running as root and none of {', '.join(ELEVATION_TOOLS)} were found."
        )
        return None

    cmd = [tool, sys.executable or "/usr/bin/python3", "-m", "ideactl", *args]
    logger.info(f"Re-running with elevated permissions:\n{' '.join(cmd)}")
    try:
        return subprocess.run(cmd).returncode
    except OSError as e:
        logger.error(f"Failed running '{tool}' with error:\n{e}")
        return None
