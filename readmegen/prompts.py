"""Interactive prompts for readmegen.

Questions are shown with Questionary, asked strictly one after another through
an `Inquiry` flow, and turned into an `AnswerSet` once every question has been
answered.
"""

from __future__ import annotations

import logging
from typing import Any

import questionary
from questionary import Choice, Style

from readmegen.answers import AnswerSet, License
from readmegen.inquiry import Inquiry, Leaf, Prompter, Question

log = logging.getLogger(__name__)

custom_style = Style(
    [
        ("qmark", "fg:cyan bold"),
        ("question", "bold"),
        ("answer", "fg:green bold"),
        ("pointer", "fg:cyan bold"),
        ("highlighted", "fg:cyan bold"),
        ("selected", "fg:green"),
        ("instruction", "fg:white"),
    ]
)


class UserCancelledError(RuntimeError):
    pass


QUESTIONS: dict[str, Question] = {
    "title": Question("What is your project title?"),
    "license": Question("Choose license", kind="select", choices=tuple(License.choices())),
    "description": Question("Project description"),
    "installation": Question("What installations did you use for your project?"),
    "usage": Question("Provide instructions and examples for use?"),
    "contribution": Question("Who contributed to this project?"),
    "tests": Question("What is your project test instructions?"),
    "username": Question("GitHub username?"),
    "email": Question("Email address?"),
}

FLOW = tuple(Leaf(name) for name in QUESTIONS)


def ask_question(name: str, question: Question) -> Any:
    """Show one question and return the operator's answer.

    Raises:
        UserCancelledError: If the prompt is aborted (Ctrl+C or closed input)
    """
    if question.kind == "select":
        prompt = questionary.select(
            question.message,
            choices=[Choice(title=getattr(c, "label", str(c)), value=c) for c in question.choices],
            style=custom_style,
        )
    elif question.kind == "text":
        prompt = questionary.text(question.message, style=custom_style)
    else:
        raise ValueError(f"Unsupported question kind for {name}: {question.kind}")

    try:
        answer = prompt.ask()
    except KeyboardInterrupt:
        raise UserCancelledError("User cancelled with Ctrl+C")

    if answer is None:
        raise UserCancelledError(f"User cancelled at question: {name}")
    return answer


def collect_answers(prompter: Prompter = ask_question) -> AnswerSet:
    """Ask every README question in order and build the answer record."""
    results = Inquiry(QUESTIONS, prompter).ask(FLOW)
    log.debug("Collected answers for: %s", ", ".join(results))
    return AnswerSet.from_mapping(results)
