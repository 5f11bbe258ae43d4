import argparse
import logging
import sys

from rich.console import Console

from fshell.config.settings import (
    LOG_LEVELS,
    load_settings,
    validate_log_level,
    validate_start_directory,
)
from fshell.container import DependencyContainer
from fshell.entities.session import Session
from fshell.exceptions import ConfigurationError
from fshell.shell.dispatcher import ShellState

WELCOME = (
    "Welcome to fshell, an interactive filesystem shell. "
    "Type 'help' for available commands."
)


def _configure_logging(level: int, log_file: str | None) -> None:
    handler_kwargs: dict[str, object] = (
        {"filename": log_file} if log_file else {"stream": sys.stderr}
    )
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        force=True,
        **handler_kwargs,  # type: ignore[arg-type]
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="fshell",
        description="Interactive shell for navigating and editing the local filesystem.",
    )
    parser.add_argument(
        "--start-dir",
        default=None,
        help="Initial current directory (default: FSHELL_START_DIR or the process cwd)",
    )
    parser.add_argument(
        "--no-color", action="store_true", help="Disable colored output"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Log level (default: FSHELL_LOG_LEVEL or WARNING)",
    )
    parser.add_argument(
        "-c",
        "--command",
        dest="commands",
        action="append",
        default=[],
        metavar="LINE",
        help="Run LINE instead of reading from the prompt (repeatable)",
    )
    args = parser.parse_args(argv)

    try:
        settings = load_settings()
        if args.start_dir:
            settings.start_directory = validate_start_directory(args.start_dir)
        if args.log_level:
            settings.log_level = validate_log_level(args.log_level)
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2
    if args.no_color:
        settings.color = False

    _configure_logging(settings.log_level_value(), settings.log_file)
    logger = logging.getLogger("fshell")

    console = Console(soft_wrap=True, highlight=False, no_color=not settings.color)
    container = DependencyContainer(settings)
    dispatcher = container.get_dispatcher(console, Session(settings.start_directory))

    if args.commands:
        logger.info(f"Running {len(args.commands)} command(s) non-interactively")
        for line in args.commands:
            if dispatcher.dispatch_line(line) is ShellState.TERMINATED:
                break
        return 0

    console.print(WELCOME)
    return dispatcher.run()


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
