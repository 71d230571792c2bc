from __future__ import annotations

import dataclasses
from pathlib import Path

import pytest

from readmegen.answers import AnswerSet, AnswersError, License, load_answers


def test_license_text_is_its_value() -> None:
    assert str(License.APACHE) == "Apache-2.0"
    assert str(License.NONE) == ""
    assert f"{License.MIT_APACHE}" == "MIT/Apache-2.0"
    assert License.NONE.label == "None"


def test_license_choices_order() -> None:
    assert [c.value for c in License.choices()] == ["MIT/Apache-2.0", "MIT", "BSD", "GPL", "Apache-2.0", ""]


def test_answer_set_is_immutable(demo_answers: AnswerSet) -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        demo_answers.title = "Other"  # type: ignore[misc]


def test_from_mapping_defaults_missing_fields_to_empty() -> None:
    answers = AnswerSet.from_mapping({"title": "Demo"})
    assert answers.title == "Demo"
    assert answers.description == ""
    assert answers.license is License.NONE


def test_from_mapping_keeps_values_verbatim() -> None:
    answers = AnswerSet.from_mapping({"title": "  spaced  ", "tests": 42, "license": "BSD"})
    assert answers.title == "  spaced  "
    assert answers.tests == "42"
    assert answers.license is License.BSD


def test_from_mapping_accepts_credits_alias() -> None:
    assert AnswerSet.from_mapping({"credits": "Jane"}).contribution == "Jane"
    assert AnswerSet.from_mapping({"contribution": "Jane", "credits": "Bob"}).contribution == "Jane"


def test_from_mapping_rejects_unknown_license() -> None:
    with pytest.raises(AnswersError, match="Unknown license"):
        AnswerSet.from_mapping({"license": "WTFPL"})


def test_load_answers_plain_yaml(answers_file: Path, demo_answers: AnswerSet) -> None:
    assert load_answers(answers_file) == demo_answers


def test_load_answers_frontmatter(tmp_path: Path) -> None:
    path = tmp_path / "answers.md"
    path.write_text("---\ntitle: Demo\nlicense: Apache-2.0\n---\n\n# Notes\n", encoding="utf-8")

    answers = load_answers(path)

    assert answers.title == "Demo"
    assert answers.license is License.APACHE


def test_load_answers_empty_file(tmp_path: Path) -> None:
    path = tmp_path / "answers.yml"
    path.write_text("", encoding="utf-8")
    assert load_answers(path) == AnswerSet()


def test_load_answers_missing_file(tmp_path: Path) -> None:
    with pytest.raises(AnswersError, match="does not exist"):
        load_answers(tmp_path / "nope.yml")


def test_load_answers_unclosed_frontmatter(tmp_path: Path) -> None:
    path = tmp_path / "answers.md"
    path.write_text("---\ntitle: Demo\n", encoding="utf-8")
    with pytest.raises(AnswersError, match="closing"):
        load_answers(path)


def test_load_answers_requires_mapping(tmp_path: Path) -> None:
    path = tmp_path / "answers.yml"
    path.write_text("- title\n- description\n", encoding="utf-8")
    with pytest.raises(AnswersError, match="mapping"):
        load_answers(path)


def test_load_answers_invalid_yaml(tmp_path: Path) -> None:
    path = tmp_path / "answers.yml"
    path.write_text("title: [unclosed\n", encoding="utf-8")
    with pytest.raises(AnswersError, match="not valid YAML"):
        load_answers(path)


def test_load_answers_keeps_scalars_as_written(tmp_path: Path) -> None:
    path = tmp_path / "answers.yml"
    path.write_text("tests: no\nusage: 1.10\ntitle: ~\ndescription:\n", encoding="utf-8")

    answers = load_answers(path)

    assert (answers.tests, answers.usage) == ("no", "1.10")
    assert answers.title == "~"
    assert answers.description == ""


@pytest.mark.parametrize("raw", ["None", ""])
def test_no_license_accepts_prompt_label(tmp_path: Path, raw: str) -> None:
    path = tmp_path / "answers.yml"
    path.write_text(f"license: '{raw}'\n", encoding="utf-8")
    assert load_answers(path).license is License.NONE


def test_from_mapping_accepts_license_labels() -> None:
    assert AnswerSet.from_mapping({"license": "None"}).license is License.NONE
    assert AnswerSet.from_mapping({"license": "MIT/Apache-2.0"}).license is License.MIT_APACHE


def test_load_answers_directory(tmp_path: Path) -> None:
    with pytest.raises(AnswersError, match="Could not read"):
        load_answers(tmp_path)


def test_load_answers_invalid_utf8(tmp_path: Path) -> None:
    path = tmp_path / "answers.yml"
    path.write_bytes(b"title: \xff\xfe\n")
    with pytest.raises(AnswersError, match="Could not read"):
        load_answers(path)


def test_load_answers_empty_frontmatter(tmp_path: Path) -> None:
    path = tmp_path / "answers.md"
    path.write_text("---\n---\n# Notes\n", encoding="utf-8")
    assert load_answers(path) == AnswerSet()


def test_load_answers_frontmatter_without_trailing_newline(tmp_path: Path) -> None:
    path = tmp_path / "answers.md"
    path.write_text("---\ntitle: Demo\n---", encoding="utf-8")
    assert load_answers(path).title == "Demo"


def test_load_answers_crlf_frontmatter(tmp_path: Path) -> None:
    path = tmp_path / "answers.md"
    path.write_bytes(b"---\r\ntitle: Demo\r\nlicense: GPL\r\n---\r\n\r\n# Notes\r\n")

    answers = load_answers(path)

    assert answers.title == "Demo"
    assert answers.license is License.GPL
