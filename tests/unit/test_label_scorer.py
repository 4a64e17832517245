"""Unit tests for the embedding-based label scorer.

A small fake model maps known sentences to fixed vectors, so the scoring
math can be checked without downloading a sentence-transformers model.
"""

import sys
import threading
import time
import types

import pytest

from doc_extraction.nlp import label_scorer
from doc_extraction.nlp.label_scorer import (
    EmbeddingLabelScorer,
    LabelScorerError,
    get_label_scorer,
)


class FakeEmbeddingModel:
    """Returns fixed vectors keyed by sentence."""

    VECTORS = {
        "This text is about business rule.": [1.0, 0.0, 0.0],
        "This text is about formula.": [0.0, 1.0, 0.0],
        "This text is about text.": [0.0, 0.0, 1.0],
        "Managers must approve refunds.": [0.9, 0.1, 0.2],
    }

    def __init__(self):
        self.encoded = []

    def encode(self, texts):
        self.encoded.extend(texts)
        return [self.VECTORS.get(text, [0.0, 0.0, 0.0]) for text in texts]


@pytest.fixture
def model():
    return FakeEmbeddingModel()


class TestEmbeddingLabelScorer:
    """Tests for EmbeddingLabelScorer."""

    LABELS = ["formula", "business_rule", "text"]

    def test_scores_sorted_and_normalized(self, model):
        scorer = EmbeddingLabelScorer(embedding_model=model)

        scores = scorer.score("Managers must approve refunds.", self.LABELS)

        assert [s.label for s in scores][0] == "business_rule"
        assert sorted(s.label for s in scores) == sorted(self.LABELS)
        assert all(0.0 <= s.score <= 1.0 for s in scores)
        assert sum(s.score for s in scores) == pytest.approx(1.0)
        assert scores == sorted(scores, key=lambda s: s.score, reverse=True)

    def test_blank_text_scores_zero_without_model(self):
        scorer = EmbeddingLabelScorer()

        scores = scorer.score("   ", self.LABELS)

        assert [s.score for s in scores] == [0.0, 0.0, 0.0]
        assert not scorer.is_ready

    def test_no_labels(self, model):
        assert EmbeddingLabelScorer(embedding_model=model).score("Some text here", []) == []

    def test_label_embeddings_are_cached(self, model):
        scorer = EmbeddingLabelScorer(embedding_model=model)

        scorer.score("Managers must approve refunds.", self.LABELS)
        scorer.score("Managers must approve refunds.", self.LABELS)

        hypotheses = [t for t in model.encoded if t.startswith("This text is about")]
        assert len(hypotheses) == 3

    def test_zero_vector_text_gives_uniform_scores(self, model):
        scorer = EmbeddingLabelScorer(embedding_model=model)

        scores = scorer.score("unknown sentence", self.LABELS)

        assert all(s.score == pytest.approx(1 / 3) for s in scores)

    def test_score_batch(self, model):
        scorer = EmbeddingLabelScorer(embedding_model=model)

        batch = scorer.score_batch(["Managers must approve refunds.", ""], self.LABELS)

        assert len(batch) == 2
        assert batch[0][0].label == "business_rule"
        assert all(s.score == 0.0 for s in batch[1])

    def test_injected_model_is_ready(self, model):
        assert EmbeddingLabelScorer(embedding_model=model).is_ready

    def test_invalid_temperature(self):
        with pytest.raises(ValueError):
            EmbeddingLabelScorer(temperature=0)

    def test_model_load_failure(self, monkeypatch):
        def failing_model(name):
            raise OSError(f"cannot download {name}")

        monkeypatch.setitem(
            sys.modules,
            "sentence_transformers",
            types.SimpleNamespace(SentenceTransformer=failing_model),
        )
        scorer = EmbeddingLabelScorer(model_name="missing/model")

        with pytest.raises(LabelScorerError, match="missing/model"):
            scorer.ensure_ready()
        assert not scorer.is_ready

    def test_lazy_load_on_ensure_ready(self, monkeypatch, model):
        monkeypatch.setitem(
            sys.modules,
            "sentence_transformers",
            types.SimpleNamespace(SentenceTransformer=lambda name: model),
        )
        scorer = EmbeddingLabelScorer(model_name="fake/model")

        assert not scorer.is_ready
        scorer.ensure_ready()
        assert scorer.is_ready

    def test_concurrent_first_use_loads_model_once(self, monkeypatch, model):
        loads = []

        def slow_model(name):
            loads.append(name)
            time.sleep(0.05)
            return model

        monkeypatch.setitem(
            sys.modules,
            "sentence_transformers",
            types.SimpleNamespace(SentenceTransformer=slow_model),
        )
        scorer = EmbeddingLabelScorer(model_name="fake/model")
        threads = [threading.Thread(target=scorer.ensure_ready) for _ in range(4)]

        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert loads == ["fake/model"]
        assert scorer.is_ready


class TestGetLabelScorer:
    """Tests for the process-wide scorer handle."""

    @pytest.fixture(autouse=True)
    def fresh_registry(self, monkeypatch):
        monkeypatch.setattr(label_scorer, "_scorers", {})

    def test_same_instance_per_model(self):
        assert get_label_scorer("model/a") is get_label_scorer("model/a")
        assert get_label_scorer("model/a") is not get_label_scorer("model/b")

    def test_scorer_uses_requested_model(self):
        assert get_label_scorer("model/a").model_name == "model/a"
