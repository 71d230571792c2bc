"""
readmegen package

This package implements a CLI-first README scaffolding utility.

Key responsibilities are split across modules:
- `answers.py`: the answer record, the license choices, and YAML answers files
- `inquiry.py`: evaluation of nested and branching question flows
- `prompts.py`: interactive question collection (questionary)
- `renderer.py`: deterministic README rendering and writing
- `cli.py`: CLI entrypoint and orchestration (prompt -> render -> write)
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
