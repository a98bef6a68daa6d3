"""CLI entry point and execution wrapper.

Used by the console script and ``python -m`` so both report errors and exit
codes the same way.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import lib_log_rich.runtime
import rich_click as click

from greeting_server import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import apply_traceback_preferences
from .exit_codes import ExitCode

if TYPE_CHECKING:
    from greeting_server.composition import AppServices


def _report_failure(exc: BaseException) -> int:
    """Print *exc* the way ``lib_cli_exit_tools`` does and return its exit code.

    ``--traceback`` (already applied by the root group) selects the full,
    coloured traceback over the one-line summary.
    """
    verbose = bool(lib_cli_exit_tools.config.traceback)
    lib_cli_exit_tools.print_exception_message(
        trace_back=verbose,
        length_limit=TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT,
    )
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _run_cli(argv: Sequence[str] | None, services_factory: Callable[[], AppServices]) -> int:
    # lib_cli_exit_tools.run_cli cannot hand the services factory to ctx.obj.
    from .root import cli

    try:
        cli.main(
            args=list(sys.argv[1:] if argv is None else argv),
            prog_name=__init__conf__.shell_command,
            obj=services_factory,
            standalone_mode=False,
        )
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.exceptions.Abort:
        # Ctrl+C while serving; Click reports it as Abort outside standalone mode.
        return ExitCode.SIGNAL_INT
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except BaseException as exc:
        return _report_failure(exc)
    return ExitCode.SUCCESS


def _shutdown_logging() -> None:
    # Request threads must not tear down logging for the whole process.
    if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


def main(
    argv: Sequence[str] | None = None,
    *,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run the CLI and return its exit code.

    Traceback flags set by ``--traceback`` are switched off again and the
    logging runtime is shut down before returning.

    Args:
        argv: CLI arguments; None uses ``sys.argv``.
        services_factory: Factory returning AppServices. Callers outside the
            adapters layer pass ``build_production``.

    Raises:
        ValueError: If services_factory is not provided.

    Example:
        >>> from greeting_server.composition import build_production
        >>> main(["--help"], services_factory=build_production)  # doctest: +SKIP
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    try:
        return _run_cli(argv, services_factory)
    finally:
        apply_traceback_preferences(False)
        _shutdown_logging()


__all__ = ["main"]
