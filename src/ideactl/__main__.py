import argparse
import logging
import os
import sys
from typing import Callable, Sequence

from rich.console import Console
from rich.markup import escape

from . import __version__
from .config import get_config_fn, load_config
from .core import (
    LABELS,
    IdeactlError,
    PerformanceMode,
    Setting,
    Toggle,
    Value,
    exists,
    get_setting,
    parse_value,
    set_setting,
)
from .logging import add_file_handler, setup_logger
from .utils import elevate, expanduser, is_root

logger = logging.getLogger(__name__)

# Flag given without a value, must not be a str or argparse converts it
QUERY = object()

# Processing order when several flags are given
FLAGS: dict[Setting, str] = {
    Setting.CONSERVATION: "conservation",
    Setting.RAPID_CHARGE: "rapid",
    Setting.PERFORMANCE: "performance",
}


def value_type(setting: Setting) -> Callable[[str], Value]:
    def _inner(text: str):
        try:
            return parse_value(setting, text)
        except ValueError:
            if setting == Setting.PERFORMANCE:
                choices = "1/2/3 or " + ", ".join(m.value for m in PerformanceMode)
            else:
                choices = ", ".join(t.value for t in Toggle)
            raise argparse.ArgumentTypeError(
                f"invalid value '{text}' (choose from {choices})"
            )

    return _inner


def get_parser():
    parser = argparse.ArgumentParser(
        prog="ideactl",
        description="Query and change the battery conservation, rapid charge and "
        + "performance modes of Lenovo IdeaPad laptops through acpi_call. "
        + "Without arguments, all three settings are reported.",
    )
    parser.add_argument(
        "-c",
        "--conservation",
        nargs="?",
        const=QUERY,
        default=None,
        type=value_type(Setting.CONSERVATION),
        metavar="on/off",
        help="Report battery conservation mode, or set it when a value is given.",
    )
    parser.add_argument(
        "-r",
        "--rapid",
        nargs="?",
        const=QUERY,
        default=None,
        type=value_type(Setting.RAPID_CHARGE),
        metavar="on/off",
        help="Report rapid charge mode, or set it when a value is given.",
    )
    parser.add_argument(
        "-p",
        "--performance",
        nargs="?",
        const=QUERY,
        default=None,
        type=value_type(Setting.PERFORMANCE),
        metavar="1/2/3",
        help="Report the performance mode, or set it when a value is given: "
        + "1 extreme-performance, 2 intelligent-cooling, 3 battery-saving.",
    )
    parser.add_argument(
        "--channel",
        default=None,
        help="The acpi_call control file (default: /proc/acpi/call).",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="The config file to use (default: ~/.config/ideactl/config.yml).",
    )
    parser.add_argument(
        "--log-dir",
        default=None,
        dest="log_dir",
        help="Also write a debug log to this directory.",
    )
    parser.add_argument(
        "--no-elevate",
        action="store_true",
        dest="no_elevate",
        help="Do not re-run with sudo/pkexec when not root.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print debug messages.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def get_requests(args: argparse.Namespace) -> list[tuple[Setting, Value | None]]:
    """Returns the settings to process in order, with the value to set or
    None for a plain report."""
    reqs = []
    for setting, dest in FLAGS.items():
        v = getattr(args, dest)
        if v is None:
            continue
        reqs.append((setting, None if v is QUERY else v))

    if not reqs:
        reqs = [(setting, None) for setting in FLAGS]
    return reqs


def format_value(value: Value):
    match value:
        case Toggle.ON:
            color = "green"
        case Toggle.OFF:
            color = "red"
        case _:
            color = "cyan"
    return f"[bold {color}]{value.value}[/bold {color}]"


def run(reqs: Sequence[tuple[Setting, Value | None]], fn: str, console: Console):
    for setting, value in reqs:
        if value is not None:
            set_setting(setting, value, fn)
        current = get_setting(setting, fn)
        console.print(f"{LABELS[setting]}: {format_value(current)}", highlight=False)


def get_elevated_args(
    args: argparse.Namespace, raw: Sequence[str], fn: str, log_dir: str | None
) -> list[str]:
    """Arguments for the elevated re-run.

    sudo and pkexec reset the environment and home directory, so the resolved
    channel, config file and log dir are passed explicitly. Arguments given by
    the user come after and win."""
    out = ["--channel", fn]
    if args.config:
        out += ["--config", expanduser(args.config)]
    elif os.path.isfile(cfg_fn := get_config_fn()):
        out += ["--config", cfg_fn]
    if log_dir:
        out += ["--log-dir", expanduser(log_dir)]
    return [*out, *raw, "--no-elevate"]


def main(argv: Sequence[str] | None = None) -> int:
    parser = get_parser()
    args = parser.parse_args(argv)
    err = Console(stderr=True)

    try:
        setup_logger(verbose=args.verbose)
        cfg = load_config(args.config)

        log_dir = args.log_dir or cfg.log_dir
        if log_dir:
            add_file_handler(log_dir)

        fn = args.channel or cfg.channel
        reqs = get_requests(args)
        logger.debug(f"Requests:\n{[(s.value, v.value if v else None) for s, v in reqs]}")

        if not is_root() and cfg.elevate and not args.no_elevate and exists(fn):
            raw = list(sys.argv[1:] if argv is None else argv)
            code = elevate(get_elevated_args(args, raw, fn, log_dir))
            if code is not None:
                return code

        run(reqs, fn, Console())
    except IdeactlError as e:
        err.print(f"[bold red]Error:[/bold red] {escape(str(e))}", highlight=False)
        return 1
    except KeyboardInterrupt:
        return 130

    return 0


if __name__ == "__main__":
    sys.exit(main())
