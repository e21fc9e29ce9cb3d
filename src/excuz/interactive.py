"""Guided three-step wizard on top of the excuse service.

Purpose
-------
Offer a prompt-driven alternative to the direct commands: pick an action, pick
a language by name, see the result.

Contents
--------
* :class:`Action` – the operations offered in the first menu.
* :class:`Selected` / :class:`Cancelled` – explicit outcomes of one prompt.
* :func:`select` – numbered-menu prompt returning a :data:`PromptOutcome`.
* :func:`run_session` – the full wizard.
* :data:`INTERACTIVE_LIST_LIMIT` – cap on items shown by the ``list`` action.

System Role
-----------
Invoked by ``excuz i``. Prompts use :func:`click.prompt`, which turns Ctrl-C and
end of input into :class:`click.Abort`; :func:`select` converts that into
:class:`Cancelled` so the wizard can say goodbye instead of failing.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Final, Generic, Optional, Sequence, TypeVar, Union

import rich_click as click
from click.exceptions import Abort

from .application.store import DatasetStore
from .core import get_all_excuses, get_excuse_count, get_random_excuse
from .domain.excuse import Language
from .observability import log_debug, log_error
from .presentation import (
    FAREWELL,
    GENERIC_ERROR_MESSAGE,
    INTRO,
    PROG_NAME,
    echo_excuse,
    echo_warning,
    render_count,
    render_listing,
)

INTERACTIVE_LIST_LIMIT: Final[int] = 50

T = TypeVar("T")


class Action(str, Enum):
    RANDOM = "random"
    LIST = "list"
    COUNT = "count"


ACTION_OPTIONS: Final[tuple[tuple[Action, str], ...]] = (
    (Action.RANDOM, "Get a random excuse"),
    (Action.LIST, "List all excuses"),
    (Action.COUNT, "Get count of excuses"),
)
LANGUAGE_OPTIONS: Final[tuple[tuple[Language, str], ...]] = tuple(
    (language, language.label) for language in (Language.EN, Language.BN)
)


@dataclass(frozen=True)
class Selected(Generic[T]):
    """The user picked *value*."""

    value: T


@dataclass(frozen=True)
class Cancelled:
    """The user aborted the prompt."""


PromptOutcome = Union[Selected[T], Cancelled]


def select(message: str, options: Sequence[tuple[T, str]]) -> PromptOutcome[T]:
    """Show *options* as a numbered menu and wait for a valid choice.

    Out-of-range or non-numeric answers are rejected by click and the prompt
    repeats. Ctrl-C or end of input yields :class:`Cancelled`.
    """

    click.echo(message)
    for index, (_, label) in enumerate(options, start=1):
        click.echo(f"  {index}. {label}")
    try:
        choice = click.prompt("Choice", type=click.IntRange(1, len(options)))
    except Abort:
        click.echo()
        return Cancelled()
    return Selected(options[choice - 1][0])


def run_session(
    *,
    store: Optional[DatasetStore] = None,
    rng: Optional[random.Random] = None,
    reraise: bool = False,
) -> None:
    """Run the wizard to completion or cancellation.

    A random excuse is the last line shown; the other actions end with the
    farewell. Errors while executing the chosen action print the generic error
    message; with *reraise* they propagate instead so callers can show a
    traceback.
    """

    click.echo(INTRO)
    action = select("What would you like to do?", ACTION_OPTIONS)
    if isinstance(action, Cancelled):
        _say_goodbye("action")
        return
    language = select("Select language:", LANGUAGE_OPTIONS)
    if isinstance(language, Cancelled):
        _say_goodbye("language")
        return

    try:
        _perform(action.value, language.value, store=store, rng=rng)
    except Exception as exc:
        log_error("command_failed", command="i", error=str(exc), error_type=type(exc).__name__)
        if reraise:
            raise
        echo_warning(GENERIC_ERROR_MESSAGE)
        return
    if action.value is not Action.RANDOM:
        click.echo(FAREWELL)


def _perform(
    action: Action,
    language: Language,
    *,
    store: Optional[DatasetStore],
    rng: Optional[random.Random],
) -> None:
    if action is Action.RANDOM:
        echo_excuse(get_random_excuse(language, store=store, rng=rng))
    elif action is Action.LIST:
        click.echo(_render_capped_listing(get_all_excuses(language, store=store), language))
    else:
        click.echo(render_count(get_excuse_count(language, store=store)))


def _render_capped_listing(excuses: Sequence[str], language: Language) -> str:
    """Render at most :data:`INTERACTIVE_LIST_LIMIT` items plus a note on the rest.

    Examples
    --------
    >>> text = _render_capped_listing([f"e{n}" for n in range(52)], Language.BN)
    >>> text.splitlines()[-1]
    '... and 2 more (use "excuz list -l bn" to see all)'
    """

    shown = render_listing(excuses[:INTERACTIVE_LIST_LIMIT])
    remaining = len(excuses) - INTERACTIVE_LIST_LIMIT
    if remaining > 0:
        return f'{shown}\n\n... and {remaining} more (use "{PROG_NAME} list -l {language.value}" to see all)'
    return shown


def _say_goodbye(step: str) -> None:
    log_debug("interactive_cancelled", step=step)
    click.echo(FAREWELL)
