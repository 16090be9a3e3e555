"""Helpers for tidying hand-edited ingredient and step text."""

import re

FORMATTED_INGREDIENT_RE = re.compile(r"^.+\s+-\s+.+$")
DASH_SPLIT_RE = re.compile(r"^(.+?)\s*[-–—]\s*(.+)$")
NUMBERED_STEP_RE = re.compile(r"^\d+[.):\s]")


def format_ingredients(text: str) -> str:
    """Normalize each line to ``Ingredient - quantity`` where a dash separator exists.

    Lines without a separator (section headers such as "Marination") are kept
    as they are; blank lines are dropped.
    """
    lines = []
    for line in text.strip().split("\n"):
        trimmed = line.strip()
        if not trimmed:
            continue
        if FORMATTED_INGREDIENT_RE.match(trimmed):
            lines.append(trimmed)
            continue
        match = DASH_SPLIT_RE.match(trimmed)
        if match:
            lines.append(f"{match.group(1).strip()} - {match.group(2).strip()}")
        else:
            lines.append(trimmed)
    return "\n".join(lines)


def format_steps(text: str) -> str:
    """Number unnumbered step lines; lines already numbered are left alone."""
    lines = []
    step_number = 1
    for line in text.strip().split("\n"):
        trimmed = line.strip()
        if not trimmed:
            continue
        if NUMBERED_STEP_RE.match(trimmed):
            lines.append(trimmed)
            continue
        lines.append(f"{step_number}. {trimmed}")
        step_number += 1
    return "\n".join(lines)
