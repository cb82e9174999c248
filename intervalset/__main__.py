"""CLI entry point for the interactive interval manager."""

import argparse

from intervalset.config import ShellConfig
from intervalset.logging_config import setup_logging
from intervalset.shell import Shell


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser.

    Returns:
        Configured argument parser instance.
    """
    parser = argparse.ArgumentParser(
        prog="intervalset",
        description="Store, merge, query and delete integer intervals.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (overrides INTERVALSET_LOG_LEVEL)",
    )
    parser.add_argument(
        "--title", default=None, help="Heading shown above the menu",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Parse CLI args, configure logging and run the shell.

    Args:
        argv: Optional argument vector for testing.

    Returns:
        Process exit status.
    """
    args = build_parser().parse_args(argv)

    overrides = {}
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    if args.title is not None:
        overrides["title"] = args.title
    config = ShellConfig(**overrides)

    setup_logging(config.log_level, force=True)
    return Shell(config=config).run()


if __name__ == "__main__":
    raise SystemExit(main())
