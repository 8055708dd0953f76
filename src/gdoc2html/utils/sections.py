#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Splitting a rendered exercise document into statement and correction.

Exercise documents are written as an "Exercice" heading followed by the
statement, then a "Correction" heading followed by the worked solution.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_CORRECTION_RE = re.compile(r"Correction", re.IGNORECASE)
_EXERCISE_RE = re.compile(r"Exercice", re.IGNORECASE)
_CLOSING_HEADING_LENGTH = len("</h2>")


@dataclass(frozen=True)
class ExerciseSections:
    """Statement and correction HTML of an exercise document."""

    exercise: str = ""
    correction: str = ""


def _heading_end(html: str, match: re.Match[str]) -> int:
    """Index just past the ``</hN>`` following the match, or the match end when there is none."""
    closing = html.find("</h", match.start())
    if closing == -1:
        return match.end()
    return closing + _CLOSING_HEADING_LENGTH


def split_exercise_html(html: str) -> ExerciseSections:
    """Split rendered HTML on the heading containing "Correction".

    The first case-insensitive occurrence of "Correction" locates the
    heading: its opening ``<h`` is searched backwards, its closing ``</h``
    forwards. Everything after that heading is the correction. The statement
    runs from the end of an "Exercice" heading found before it (or from the
    start) up to the correction heading. Without a correction heading the
    whole document, minus a leading "Exercice" heading, is the statement.

    Both sections are stripped of surrounding whitespace, except that a
    document with neither word is returned unchanged as the statement.

    Examples
    --------
        >>> sections = split_exercise_html("<h2>Exercice 1</h2><p>Q</p><h2>Correction</h2><p>A</p>")
        >>> sections.exercise, sections.correction
        ('<p>Q</p>', '<p>A</p>')

    """
    correction_match = _CORRECTION_RE.search(html)
    exercise_match = _EXERCISE_RE.search(html)

    if correction_match is None:
        if exercise_match is None:
            return ExerciseSections(exercise=html)
        return ExerciseSections(exercise=html[_heading_end(html, exercise_match) :].strip())

    correction_index = correction_match.start()
    heading_start = html.rfind("<h", 0, correction_index)
    if heading_start == -1:
        heading_start = correction_index
    heading_end = _heading_end(html, correction_match)

    exercise_start = 0
    if exercise_match is not None and exercise_match.start() < heading_start:
        exercise_start = _heading_end(html, exercise_match)

    return ExerciseSections(
        exercise=html[exercise_start:heading_start].strip(),
        correction=html[heading_end:].strip(),
    )


__all__ = ["ExerciseSections", "split_exercise_html"]
