"""CLI adapter for ``excuz`` built on ``rich_click`` and ``lib_cli_exit_tools``.

Purpose
-------
Expose the excuse service as the ``excuz`` command: a random excuse by default,
``list``/``l`` and ``count``/``c`` subcommands, and the ``i`` interactive
wizard.

Contents
--------
* :data:`CLICK_CONTEXT_SETTINGS` – shared Click settings ensuring ``-h`` works.
* :class:`ExcuzGroup` / :class:`ExcuzCommand` – Click classes that resolve
  aliases, turn unknown commands into hints, and swallow usage errors.
* :func:`cli` – root command; prints a random excuse when no subcommand runs.
* :func:`cli_list`, :func:`cli_count`, :func:`cli_interactive` – subcommands.
* :func:`main` – entry point used by ``console_scripts`` registration.

System Role
-----------
The CLI is the outermost layer and the only place where user-supplied language
codes are validated. Every command runs inside :func:`_command_boundary`, which
maps failures to one of two fixed messages and leaves the exit code at 0.
``--traceback`` opts out of that mapping for debugging, in which case
``lib_cli_exit_tools`` prints the error and chooses the exit code.
"""

from __future__ import annotations

import re
import sys
from contextlib import contextmanager
from importlib import metadata
from typing import Any, Final, Iterator, Optional, Sequence

import lib_cli_exit_tools
import rich_click as click
from click.exceptions import Abort, Exit, UsageError

from .core import get_all_excuses, get_excuse_count, get_random_excuse
from .domain.errors import InvalidLanguageError
from .domain.excuse import is_valid_language, parse_language
from .interactive import run_session
from .observability import log_debug, log_error
from .presentation import (
    GENERIC_ERROR_MESSAGE,
    GENERIC_HINT,
    LANGUAGE_HINT,
    PROG_NAME,
    echo_excuse,
    echo_warning,
    invalid_language_message,
    render_count,
    render_listing,
)

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
_TRACEBACK_SUMMARY_LIMIT: Final[int] = 500
_TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000

COMMAND_ALIASES: Final[dict[str, str]] = {"l": "list", "c": "count"}
LANG_HELP: Final[str] = "Language code (bn|en)"
_LEADING_INTEGER: Final[re.Pattern[str]] = re.compile(r"\s*([+-]?\d+)")


def _resolve_version() -> str:
    """Return the installed package version, or ``"0.0.0"`` for source checkouts."""

    try:
        return metadata.version(PROG_NAME)
    except metadata.PackageNotFoundError:
        return "0.0.0"


def _echo_hint(ctx: click.Context, argument: str) -> None:
    """Suggest the ``--lang`` flag for a stray *argument* and exit successfully."""

    log_debug("usage_error", command=ctx.info_name, error=f"unexpected argument {argument!r}")
    if is_valid_language(argument):
        echo_warning(LANGUAGE_HINT.format(code=argument))
    else:
        echo_warning(GENERIC_HINT)
    ctx.exit(0)


class _ForgivingParseMixin:
    """Turn option parsing errors into a silent, successful exit."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)  # type: ignore[misc]
        except UsageError as exc:
            log_debug("usage_error", command=ctx.info_name, error=exc.format_message())
            ctx.exit(0)


class ExcuzCommand(_ForgivingParseMixin, click.RichCommand):
    """Subcommand class that hints at ``--lang`` when given stray arguments."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        ctx.allow_extra_args = True
        remaining = super().parse_args(ctx, args)
        if ctx.args:
            _echo_hint(ctx, ctx.args[0])
        return remaining


class ExcuzGroup(_ForgivingParseMixin, click.RichGroup):
    """Root group resolving aliases and hinting at ``--lang`` for stray arguments."""

    command_class = ExcuzCommand

    def get_command(self, ctx: click.Context, cmd_name: str) -> Optional[click.Command]:
        return super().get_command(ctx, COMMAND_ALIASES.get(cmd_name, cmd_name))

    def resolve_command(self, ctx: click.Context, args: list[str]) -> Any:
        name = args[0]
        if not name.startswith("-") and self.get_command(ctx, name) is None:
            _echo_hint(ctx, name)
        return super().resolve_command(ctx, args)


@contextmanager
def _command_boundary(ctx: click.Context) -> Iterator[None]:
    """Map any failure inside a command to a fixed message.

    Click's own control-flow exceptions pass through untouched.
    """

    try:
        yield
    except (Exit, Abort):
        raise
    except InvalidLanguageError as exc:
        log_debug("invalid_language", command=ctx.info_name, code=exc.code)
        echo_warning(invalid_language_message(exc.code))
    except Exception as exc:
        log_error("command_failed", command=ctx.info_name, error=str(exc), error_type=type(exc).__name__)
        if _traceback_requested(ctx):
            raise
        echo_warning(GENERIC_ERROR_MESSAGE)


def _traceback_requested(ctx: click.Context) -> bool:
    root = ctx.find_root()
    return bool(root.obj and root.obj.get("traceback"))


def _effective_language_code(ctx: click.Context, lang: Optional[str]) -> Optional[str]:
    """Prefer the subcommand's ``--lang`` and fall back to the root option."""

    if lang is not None:
        return lang
    root = ctx.find_root()
    return root.obj.get("lang") if root.obj else None


def parse_limit(raw: Optional[str]) -> Optional[int]:
    """Return a positive limit parsed from *raw*, or ``None`` to show everything.

    Only the leading integer counts, so trailing text is ignored.

    Examples
    --------
    >>> parse_limit("3"), parse_limit("3abc"), parse_limit("2.5"), parse_limit(" 4")
    (3, 3, 2, 4)
    >>> parse_limit("0"), parse_limit("-2"), parse_limit("abc"), parse_limit(""), parse_limit(None)
    (None, None, None, None, None)
    """

    if raw is None:
        return None
    match = _LEADING_INTEGER.match(raw)
    if match is None:
        return None
    limit = int(match.group(1))
    return limit if limit > 0 else None


@click.group(
    cls=ExcuzGroup,
    help="Get random humorous developer excuses",
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    _resolve_version(),
    "-v",
    "--version",
    prog_name=PROG_NAME,
    message="%(prog)s version %(version)s",
)
@click.option("-l", "--lang", "lang", default=None, metavar="<language>", help=LANG_HELP)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on unexpected errors",
)
@click.pass_context
def cli(ctx: click.Context, lang: Optional[str], traceback: bool) -> None:
    """Print one random excuse unless a subcommand was requested."""

    ctx.ensure_object(dict)
    ctx.obj["lang"] = lang
    ctx.obj["traceback"] = traceback
    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback
    if ctx.invoked_subcommand is not None:
        return
    with _command_boundary(ctx):
        echo_excuse(get_random_excuse(parse_language(lang)))


@cli.command("list", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("-l", "--lang", "lang", default=None, metavar="<language>", help=LANG_HELP)
@click.option("--limit", "limit", default=None, metavar="<number>", help="Limit the number of excuses to display")
@click.pass_context
def cli_list(ctx: click.Context, lang: Optional[str], limit: Optional[str]) -> None:
    """List all excuses (alias: l)."""

    code = _effective_language_code(ctx, lang)
    with _command_boundary(ctx):
        excuses = get_all_excuses(parse_language(code))
        count = parse_limit(limit)
        if count is not None:
            excuses = excuses[:count]
        click.echo(render_listing(excuses))


@cli.command("count", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("-l", "--lang", "lang", default=None, metavar="<language>", help=LANG_HELP)
@click.pass_context
def cli_count(ctx: click.Context, lang: Optional[str]) -> None:
    """Get the number of excuses (alias: c)."""

    code = _effective_language_code(ctx, lang)
    with _command_boundary(ctx):
        click.echo(render_count(get_excuse_count(parse_language(code))))


@cli.command("i", context_settings=CLICK_CONTEXT_SETTINGS)
@click.pass_context
def cli_interactive(ctx: click.Context) -> None:
    """Interactive mode."""

    run_session(reraise=_traceback_requested(ctx))


def main(argv: Optional[Sequence[str]] = None, *, restore_traceback: bool = True) -> int:
    """Execute the CLI with shared exit handling and return the exit code."""

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        try:
            return lib_cli_exit_tools.run_cli(
                cli,
                argv=list(argv) if argv is not None else None,
                prog_name=PROG_NAME,
            )
        except BaseException as exc:  # noqa: BLE001 - funnel through shared printers
            lib_cli_exit_tools.print_exception_message(
                trace_back=lib_cli_exit_tools.config.traceback,
                length_limit=(
                    _TRACEBACK_VERBOSE_LIMIT if lib_cli_exit_tools.config.traceback else _TRACEBACK_SUMMARY_LIMIT
                ),
            )
            return lib_cli_exit_tools.get_system_exit_code(exc)
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


if __name__ == "__main__":  # pragma: no cover - exercised via console entry point
    raise SystemExit(main(sys.argv[1:]))
