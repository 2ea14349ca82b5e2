from __future__ import annotations

from typing import Iterable, Optional

import pytest

from doc_catalog.cli.menu import parse_number, run_menu, show_all, show_one
from doc_catalog.exceptions import InputFormatError


class _Script:
    """Feeds canned answers to the menu; None once exhausted."""

    def __init__(self, answers: Iterable[str]):
        self._answers = list(answers)
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> Optional[str]:
        self.prompts.append(prompt)
        return self._answers.pop(0) if self._answers else None


def _run(registry, answers):
    out: list[str] = []
    script = _Script(answers)
    run_menu(registry, read=script, echo=out.append)
    return "\n".join(out), script


class TestParseNumber:
    @pytest.mark.parametrize("raw,expected", [("1", 1), (" 42 ", 42), ("-3", -3), ("+7", 7)])
    def test_valid(self, raw, expected):
        assert parse_number(raw) == expected

    @pytest.mark.parametrize("raw", ["", "abc", "1.5", "1_000", "2 3"])
    def test_invalid(self, raw):
        with pytest.raises(InputFormatError) as ei:
            parse_number(raw)
        assert ei.value.raw == raw


def test_show_all_empty(registry):
    out: list[str] = []
    show_all(registry, echo=out.append)
    assert out == ["No documents."]


def test_show_one_reports_bad_number(sample_registry):
    out: list[str] = []
    assert show_one(sample_registry, 9, echo=out.append) is False
    assert out == ["Invalid document number! Try again."]


def test_show_one_prints_entry(sample_registry):
    out: list[str] = []
    assert show_one(sample_registry, 1, echo=out.append) is True
    assert out[0].startswith("Document info #1\nName: Report.docx")


class TestRunMenu:
    def test_exit_choice(self, sample_registry):
        text, script = _run(sample_registry, ["3"])
        assert "3. Exit" in text
        assert script.prompts == ["Choose an action: "]

    def test_show_all(self, sample_registry):
        text, _ = _run(sample_registry, ["1", "3"])
        for entry in sample_registry.list_all():
            assert entry.description in text

    def test_show_specific(self, sample_registry):
        text, script = _run(sample_registry, ["2", "3", "3"])
        assert "Document info #3" in text
        assert "Type: MS Excel" in text
        assert script.prompts[1] == "Document number: "

    def test_non_numeric_number(self, sample_registry):
        text, _ = _run(sample_registry, ["2", "three", "3"])
        assert "Input error! Enter a valid number." in text
        assert "Document info #" not in text

    def test_out_of_range_number_keeps_looping(self, sample_registry):
        text, script = _run(sample_registry, ["2", "0", "2", "6", "3"])
        assert text.count("Invalid document number! Try again.") == 2
        assert len(script.prompts) == 5

    def test_unknown_choice(self, registry):
        text, _ = _run(registry, ["9", "3"])
        assert "Invalid choice! Try again." in text

    def test_end_of_input_exits(self, registry):
        text, script = _run(registry, [])
        assert script.prompts == ["Choose an action: "]

    def test_end_of_input_while_reading_number(self, sample_registry):
        text, script = _run(sample_registry, ["2"])
        assert script.prompts == ["Choose an action: ", "Document number: "]
