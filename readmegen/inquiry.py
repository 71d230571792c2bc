"""
inquiry.py

Responsibility: Ask a flow of questions, in series, and collect the answers.

A flow is a sequence of nodes:
- `Leaf(name)`: ask the question `name` from the manifest.
- `Group(name, nodes)`: ask a nested flow and store its answers under `name`.
- `Pivot(name, select)`: ask `name`, then ask whatever flow `select(answer)`
  returns. The branch answers are stored under `name` with the pivot answer in
  `_answer`.

This module does not know how a question is shown to the operator. That is the
prompter's job, which keeps flows testable without a terminal.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Union

log = logging.getLogger(__name__)


class InquiryError(ValueError):
    pass


@dataclass(frozen=True)
class Question:
    message: str
    kind: str = "text"
    choices: tuple[Any, ...] = ()


@dataclass(frozen=True)
class Leaf:
    name: str


@dataclass(frozen=True)
class Group:
    name: str
    nodes: tuple[Node, ...]


@dataclass(frozen=True)
class Pivot:
    name: str
    select: Callable[[Any], Sequence[Node]]


Node = Union[Leaf, Group, Pivot]
Prompter = Callable[[str, Question], Any]


class Inquiry:
    def __init__(self, manifest: Mapping[str, Question], prompter: Prompter) -> None:
        if not isinstance(manifest, Mapping) or not manifest:
            raise InquiryError("An invalid manifest was supplied.")
        self._manifest = manifest
        self._prompter = prompter

    def ask(self, flow: Sequence[Node]) -> dict[str, Any]:
        """
        Ask every question in `flow`, in order, and return the answers keyed by
        question (or group) name.
        """
        if not flow:
            raise InquiryError("No questions were found.")
        return self._ask_all(flow, {})

    def _ask_all(self, nodes: Sequence[Node], results: dict[str, Any]) -> dict[str, Any]:
        for node in nodes:
            self._ask_node(node, results)
        return results

    def _ask_node(self, node: Node, results: dict[str, Any]) -> None:
        if isinstance(node, Leaf):
            results[node.name] = self._prompt(node.name)
        elif isinstance(node, Group):
            results[node.name] = self._ask_all(node.nodes, {})
        elif isinstance(node, Pivot):
            answer = self._prompt(node.name)
            branch = node.select(answer)
            log.debug("Pivot %s answered %r; branching into %d node(s)", node.name, answer, len(branch))
            results[node.name] = self._ask_all(branch, {"_answer": answer})
        else:
            raise InquiryError(f"Unsupported flow node: {node!r}")

    def _prompt(self, name: str) -> Any:
        question = self._manifest.get(name)
        if question is None:
            raise InquiryError(f'Question "{name}" not found in the manifest.')
        log.debug("Asking %s", name)
        return self._prompter(name, question)
