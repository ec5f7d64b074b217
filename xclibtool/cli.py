"""CLI entry point: xclibtool, a drop-in replacement for libtool.

Build systems invoke it with the native libtool flags, e.g.:
    xclibtool -static -o libFoo.a -filelist Foo.LinkFileList -dependency_info Foo_libtool_dependency_info.dat
    xclibtool -static -o libUniversal.a arm64/libFoo.a x86_64/libFoo.a

Every argument is passed through unprocessed; unknown flags are ignored by
the scanner, so the command defines no options (not even --help).
"""

from __future__ import annotations

import sys
from typing import Sequence

import click

from xclibtool.config import Settings, log_options_from_env
from xclibtool.core.logging import setup_logging
from xclibtool.driver import run
from xclibtool.exceptions import XCLibtoolError
from xclibtool.executor.base import BuildExecutor
from xclibtool.executor.registry import create_default_registry


def _build_executor(settings: Settings) -> BuildExecutor:
    return create_default_registry().create(settings.executor, settings)


@click.command(
    context_settings={
        "ignore_unknown_options": True,
        "allow_extra_args": True,
        "help_option_names": [],
    }
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def libtool_command(args: tuple[str, ...]) -> None:
    """xclibtool: libtool wrapper that can reuse cached build artifacts."""
    # Logging first: settings parsing may warn, and stdout belongs to libtool
    setup_logging(*log_options_from_env())
    settings = Settings.from_env()

    argv = list(args)
    try:
        executor = _build_executor(settings)
        run(argv, executor)
    except XCLibtoolError as e:
        click.echo(f"Error: {e}. Args: {argv}", err=True)
        sys.exit(1)


def main(argv: Sequence[str] | None = None) -> None:
    """Console script entry: run ``libtool_command`` on the untouched argument vector.

    click consumes the first ``--`` it sees; a leading one makes every
    later token, including a caller's own ``--``, reach the scanner.
    """
    if argv is None:
        argv = sys.argv[1:]
    libtool_command.main(args=["--", *argv], prog_name="xclibtool")


if __name__ == "__main__":
    main()
