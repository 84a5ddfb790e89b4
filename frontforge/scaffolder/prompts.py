"""Interactive question flow built on Rich prompts.

Questions are asked in order.  A question with a ``when`` predicate is only
asked if the predicate, called with the answers gathered so far, is true;
skipped questions are left out of the answers entirely.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Literal, Optional

from rich.console import Console
from rich.prompt import Confirm, Prompt

from .. import utils

Answers = dict[str, Any]


@dataclass
class Question:
    """A single question descriptor."""

    type: Literal["confirm", "input"]
    name: str
    message: str
    default: Any = None
    when: Optional[Callable[[Answers], bool]] = None


def ask(question: Question, console: Console) -> Any:
    """Ask one question on *console* and return the answer."""
    if question.type == "confirm":
        return Confirm.ask(
            question.message, default=bool(question.default), console=console
        )
    if question.type == "input":
        return Prompt.ask(
            question.message, default=question.default or "", console=console
        )
    raise ValueError(f"Unknown question type: {question.type!r}")


def prompt(questions: list[Question], console: Console | None = None) -> Answers:
    """Run *questions* in order and return the answers mapping."""
    if console is None:
        console = utils.console
    answers: Answers = {}
    for question in questions:
        if question.when is not None and not question.when(answers):
            continue
        answers[question.name] = ask(question, console)
    return answers
