"""
renderer.py

Responsibility: Deterministically render an `AnswerSet` into README markdown,
and write it out.

Rules:
- Answers are interpolated verbatim: no trimming, defaulting or escaping.
- An empty field still gets its heading, with an empty body.
- License content is the exception: with no license chosen, the badge and the
  license text are left out entirely rather than rendered as a placeholder.

This module intentionally does NOT know about prompting or CLI parsing.
"""

from __future__ import annotations

import logging
from pathlib import Path
from urllib.parse import quote

from jinja2 import Environment, StrictUndefined

from readmegen.answers import AnswerSet, License

log = logging.getLogger(__name__)

BADGE_URL = "https://img.shields.io/badge/license-{name}-blue.svg"

README_TEMPLATE = """\
# {{ title }}
{% if license_badge %}

{{ license_badge }}
{% endif %}

## Description
{{ description }}

## Table of Contents
* [Description](#description)
* [Installation](#installation)
* [Usage](#usage)
* [License](#license)
* [Credits](#contributing)
* [Tests](#tests)
* [Questions](#questions)

## Installation
{{ installation }}

## Usage
{{ usage }}

## License
{{ license_section }}

## Contributing
{{ contribution }}

## Tests
{{ tests }}

## Questions

Here is a link to my GitHub profile: [{{ username }}](https://github.com/{{ username }}).
If you have any questions or would like to contribute to this project you can email me at {{ email }}.
"""


class WriteError(RuntimeError):
    pass


def _badge_fragment(name: str) -> str:
    # shields.io uses '-' as a separator and '--' for a literal dash.
    escaped = quote(name.replace("-", "--"), safe="")
    return f"![License: {name}]({BADGE_URL.format(name=escaped)})"


def render_license_badge(license: License | str) -> str:
    """License name followed by its badge image, or "" when there is no license."""
    name = str(license)
    if not name:
        return ""
    return f"{name} {_badge_fragment(name)}"


def render_license_link(license: License | str) -> str:
    """Badge image followed by the license name, or "" when there is no license."""
    name = str(license)
    if not name:
        return ""
    return f"{_badge_fragment(name)} {name}"


def render_license_section(license: License | str) -> str:
    return str(license)


_env = Environment(
    autoescape=False,
    undefined=StrictUndefined,
    keep_trailing_newline=True,
    trim_blocks=True,
)
_template = _env.from_string(README_TEMPLATE)


def generate_readme(answers: AnswerSet) -> str:
    """
    Render the README document for `answers`.

    Section order is fixed: title, description, table of contents, installation,
    usage, license, contributing, tests, questions.
    """
    return _template.render(
        title=answers.title,
        description=answers.description,
        installation=answers.installation,
        usage=answers.usage,
        contribution=answers.contribution,
        tests=answers.tests,
        username=answers.username,
        email=answers.email,
        license_badge=render_license_badge(answers.license),
        license_section=render_license_section(answers.license),
    )


def write_readme(path: str | Path, text: str) -> Path:
    """
    Write `text` to `path`, replacing any existing file.
    """
    dst = Path(path)
    try:
        dst.write_text(text, encoding="utf-8", newline="\n")
    except OSError as e:
        raise WriteError(f"Failed writing {dst}: {e}") from e
    log.debug("Wrote %d characters to %s", len(text), dst)
    return dst
