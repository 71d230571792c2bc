"""Shared pytest fixtures for readmegen tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from readmegen.answers import AnswerSet, License


@pytest.fixture
def demo_answers() -> AnswerSet:
    return AnswerSet(
        title="Demo",
        description="A demo.",
        installation="npm install",
        usage="run it",
        contribution="Jane",
        tests="none",
        license=License.MIT,
        username="janedoe",
        email="jane@example.com",
    )


@pytest.fixture
def answers_file(tmp_path: Path) -> Path:
    path = tmp_path / "answers.yml"
    path.write_text(
        """title: Demo
description: A demo.
installation: npm install
usage: run it
contribution: Jane
tests: none
license: MIT
username: janedoe
email: jane@example.com
""",
        encoding="utf-8",
    )
    return path
