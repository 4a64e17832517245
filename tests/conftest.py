"""Shared fixtures for the document extraction tests."""

from __future__ import annotations

import re
from typing import Dict, List, Optional, Sequence, Tuple
from unittest.mock import MagicMock, Mock

import pytest
from docx import Document

from doc_extraction.interfaces.scorer import ILabelScorer, LabelScore


class FakeLabelScorer(ILabelScorer):
    """
    Keyword-driven scorer standing in for the embedding model.

    The first keyword found in the text picks the top label and score;
    the remaining probability mass is spread over the other labels.
    """

    def __init__(
        self,
        rules: Optional[Dict[str, Tuple[str, float]]] = None,
        default: Tuple[str, float] = ("text", 0.9),
        fail_when: Optional[str] = None,
    ):
        self.rules = rules or {}
        self.default = default
        self.fail_when = fail_when
        self.calls: List[Tuple[str, List[str]]] = []
        self.ready = False

    @property
    def is_ready(self) -> bool:
        return self.ready

    def ensure_ready(self) -> None:
        self.ready = True

    def score(self, text: str, labels: Sequence[str]) -> List[LabelScore]:
        labels = list(labels)
        self.calls.append((text, labels))
        if self.fail_when and self.fail_when in text:
            raise RuntimeError("inference failed")

        top_label, top_score = self.default
        for keyword, (label, score) in self.rules.items():
            if keyword in text:
                top_label, top_score = label, score
                break

        others = [label for label in labels if label != top_label]
        rest = (1.0 - top_score) / len(others) if others else 0.0
        scores = [LabelScore(label=label, score=rest) for label in others]
        if top_label in labels:
            scores.append(LabelScore(label=top_label, score=top_score))
        return sorted(scores, key=lambda s: s.score, reverse=True)


@pytest.fixture
def fake_scorer_cls():
    return FakeLabelScorer


@pytest.fixture
def fake_scorer():
    return FakeLabelScorer(
        rules={
            "must": ("business_rule", 0.9),
            "=": ("formula", 0.85),
            "If ": ("condition", 0.8),
            "means": ("definition", 0.75),
        },
        default=("text", 0.7),
    )


@pytest.fixture
def sample_docx(tmp_path):
    """A Word document with prose, a key-value line and one native table."""
    doc = Document()
    doc.add_paragraph("Refund Policy")
    doc.add_paragraph("The manager must approve every refund above 500 dollars.")
    doc.add_paragraph("")
    doc.add_paragraph("Total price = unit price * quantity + shipping fee")
    doc.add_paragraph("Country: India, US, China")
    doc.add_paragraph("Short")

    table = doc.add_table(rows=3, cols=2)
    for row_index, values in enumerate([("Name", "Value"), ("Fee", "10"), ("Tax", "5")]):
        for col_index, value in enumerate(values):
            table.cell(row_index, col_index).text = value

    path = tmp_path / "policy.docx"
    doc.save(str(path))
    return path


CHAR_WIDTH = 5.0
LINE_HEIGHT = 12.0
FONT_SIZE = 10.0


def layout_words(text):
    """
    Lay out text the way pdfplumber reports words.

    Every character occupies one CHAR_WIDTH column, so a run of spaces
    becomes a proportional gap; each line of ``text`` is one text line.
    """
    words = []
    if not text:
        return words
    for line_number, line in enumerate(text.split("\n")):
        top = line_number * LINE_HEIGHT
        for match in re.finditer(r"\S+", line):
            words.append({
                "text": match.group(),
                "x0": match.start() * CHAR_WIDTH,
                "x1": match.end() * CHAR_WIDTH,
                "top": top,
                "bottom": top + FONT_SIZE,
            })
    return words


@pytest.fixture
def stub_pdf(monkeypatch):
    """Replace PyPDF2 and pdfplumber so PDF bytes decode to the given page texts."""
    from doc_extraction.parsers import pdf_parser

    def stub(page_texts):
        reader = Mock()
        reader.pages = [object() for _ in page_texts]
        monkeypatch.setattr(pdf_parser, "PdfReader", Mock(return_value=reader))

        pages = [
            Mock(extract_words=Mock(return_value=layout_words(text)))
            for text in page_texts
        ]
        pdf = MagicMock()
        pdf.__enter__.return_value = Mock(pages=pages)
        monkeypatch.setattr(pdf_parser.pdfplumber, "open", Mock(return_value=pdf))
        return pages

    return stub
