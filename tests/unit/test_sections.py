#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_sections.py
"""Unit tests for splitting exercise documents."""

import pytest

from gdoc2html.utils.sections import ExerciseSections, split_exercise_html


@pytest.mark.unit
class TestSplitExerciseHtml:
    """Tests for split_exercise_html."""

    def test_exercise_and_correction(self):
        html = "<h2>Exercice 1</h2><p>Question</p>\n<h2>Correction</h2><p>Answer</p>"
        assert split_exercise_html(html) == ExerciseSections(exercise="<p>Question</p>", correction="<p>Answer</p>")

    def test_case_insensitive(self):
        html = '<h1 class="x">EXERCICE</h1><p>Q</p><h3 class="y">correction détaillée</h3><p>A</p>'
        sections = split_exercise_html(html)
        assert sections.exercise == "<p>Q</p>"
        assert sections.correction == "<p>A</p>"

    def test_correction_without_exercise_heading(self):
        sections = split_exercise_html("<p>Intro</p><h2>Correction</h2><p>A</p>")
        assert sections.exercise == "<p>Intro</p>"
        assert sections.correction == "<p>A</p>"

    def test_exercise_without_correction(self):
        sections = split_exercise_html("<h2>Exercice 2</h2> <p>Only the statement</p> ")
        assert sections.exercise == "<p>Only the statement</p>"
        assert sections.correction == ""

    def test_neither_heading_returns_input_unchanged(self):
        html = " <p>Plain</p> "
        assert split_exercise_html(html) == ExerciseSections(exercise=html, correction="")

    def test_correction_outside_heading(self):
        sections = split_exercise_html("Correction follows")
        assert sections.exercise == ""
        assert sections.correction == "follows"
