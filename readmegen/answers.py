"""
answers.py

Responsibility: The typed answer record consumed by the renderer.

Answers normally come from the interactive prompts, but they can also be loaded
from a YAML file for non-interactive runs:
- A plain YAML mapping, or
- A markdown file that begins with YAML frontmatter delimited by '---'.

Values are taken verbatim. Nothing is trimmed, defaulted beyond "" for a
missing key, or validated apart from the license choice.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

import yaml

log = logging.getLogger(__name__)


class AnswersError(ValueError):
    pass


class License(str, Enum):
    """License choices offered by the prompt. `NONE` means no license section."""

    MIT_APACHE = "MIT/Apache-2.0"
    MIT = "MIT"
    BSD = "BSD"
    GPL = "GPL"
    APACHE = "Apache-2.0"
    NONE = ""

    def __str__(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return self.value or "None"

    @classmethod
    def choices(cls) -> list[License]:
        return list(cls)


TEXT_FIELDS = (
    "title",
    "description",
    "installation",
    "usage",
    "contribution",
    "tests",
    "username",
    "email",
)

# Older answer files used the README heading name for the contribution field.
_ALIASES = {"credits": "contribution"}


@dataclass(frozen=True)
class AnswerSet:
    """Everything the operator supplied for one README."""

    title: str = ""
    description: str = ""
    installation: str = ""
    usage: str = ""
    contribution: str = ""
    tests: str = ""
    license: License = License.NONE
    username: str = ""
    email: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> AnswerSet:
        values = {str(k): v for k, v in data.items()}
        for alias, name in _ALIASES.items():
            if alias in values:
                values.setdefault(name, values[alias])

        fields: dict[str, Any] = {}
        for name in TEXT_FIELDS:
            raw = values.get(name)
            fields[name] = "" if raw is None else str(raw)

        fields["license"] = _coerce_license(values.get("license"))
        return cls(**fields)


def _coerce_license(raw: Any) -> License:
    if raw is None:
        return License.NONE
    if isinstance(raw, License):
        return raw
    text = str(raw)
    for choice in License:
        if text in (choice.value, choice.label):
            return choice
    allowed = ", ".join(repr(c.label) for c in License)
    raise AnswersError(f"Unknown license {raw!r} (expected one of: {allowed})")


_FRONTMATTER = re.compile(r"\A---\n(.*?)^---[ \t]*$", re.DOTALL | re.MULTILINE)


def _split_frontmatter(text: str) -> str:
    """
    If the text begins with YAML frontmatter delimited by '---', return just the
    frontmatter. Otherwise the whole text is treated as YAML.
    """
    if not text.startswith("---\n"):
        return text

    match = _FRONTMATTER.match(text)
    if match is None:
        raise AnswersError("YAML frontmatter starts with '---' but no closing '---' was found.")
    return match.group(1)


def load_answers(path: str | Path) -> AnswerSet:
    """
    Load an `AnswerSet` from a YAML answers file.

    Recognised keys: title, description, installation, usage, contribution
    (or credits), tests, license, username, email. Unknown keys are ignored.
    Scalars are read as plain strings, so `no` stays "no" and `1.10` stays "1.10".
    """
    p = Path(path)
    if not p.exists():
        raise AnswersError(f"Answers file does not exist: {p}")
    try:
        text = p.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise AnswersError(f"Could not read answers file: {p} ({e})") from e
    text = text.replace("\r\n", "\n")

    try:
        data = yaml.load(_split_frontmatter(text), Loader=yaml.BaseLoader) or {}
    except yaml.YAMLError as e:
        raise AnswersError(f"Answers file is not valid YAML: {p}") from e
    if not isinstance(data, dict):
        raise AnswersError("Answers file must be a mapping/object at the top level.")

    log.debug("Loaded %d answer keys from %s", len(data), p)
    return AnswerSet.from_mapping(data)
