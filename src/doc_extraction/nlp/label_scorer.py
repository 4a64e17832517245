"""Zero-shot label scoring with sentence embeddings.

Each candidate label is turned into a short hypothesis sentence
("This text is about business rule.") and embedded together with the
text. Cosine similarities between the text and every hypothesis are
converted into a probability distribution with a temperature-scaled
softmax, so scores lie in [0, 1] and sum to one.
"""

import logging
import math
import threading
from typing import Any, Dict, List, Optional, Sequence

from ..config.models import DEFAULT_MODEL_NAME
from ..interfaces.scorer import ILabelScorer, LabelScore


logger = logging.getLogger(__name__)

DEFAULT_HYPOTHESIS_TEMPLATE = "This text is about {}."


class LabelScorerError(RuntimeError):
    """Raised when the scoring model cannot be loaded."""


class EmbeddingLabelScorer(ILabelScorer):
    """
    Label scorer backed by a sentence-transformers model.

    The model is loaded lazily on first use and kept for the lifetime of
    the scorer. Hypothesis embeddings are cached per label since label
    sets are reused across every paragraph of a document. Both are
    guarded by a lock, so one scorer can serve several request threads.
    """

    def __init__(
        self,
        model_name: str = DEFAULT_MODEL_NAME,
        hypothesis_template: str = DEFAULT_HYPOTHESIS_TEMPLATE,
        temperature: float = 0.05,
        embedding_model: Optional[Any] = None,
    ):
        """
        Initialize the scorer.

        Args:
            model_name: sentence-transformers model to load on first use.
            hypothesis_template: Format string turning a label into a sentence.
            temperature: Softmax temperature; lower values sharpen the ranking.
            embedding_model: Pre-loaded model exposing ``encode``. Skips lazy loading.
        """
        if temperature <= 0:
            raise ValueError("Temperature must be positive")
        self._model_name = model_name
        self._hypothesis_template = hypothesis_template
        self._temperature = temperature
        self._embedding_model = embedding_model
        self._label_embeddings: Dict[str, List[float]] = {}
        self._lock = threading.Lock()

    @property
    def model_name(self) -> str:
        return self._model_name

    @property
    def is_ready(self) -> bool:
        """Check if the embedding model is loaded."""
        return self._embedding_model is not None

    def ensure_ready(self) -> None:
        """Load the embedding model now instead of on the first score call."""
        if self._embedding_model is None:
            with self._lock:
                if self._embedding_model is None:
                    self._embedding_model = self._load_embedding_model()

    def _load_embedding_model(self) -> Any:
        """Load the sentence-transformers embedding model."""
        try:
            from sentence_transformers import SentenceTransformer
        except ImportError as e:
            raise LabelScorerError(
                "sentence-transformers is not installed; cannot score labels"
            ) from e

        try:
            logger.info(f"Loading embedding model: {self._model_name}")
            model = SentenceTransformer(self._model_name)
            logger.info("Embedding model loaded successfully")
            return model
        except Exception as e:
            raise LabelScorerError(
                f"Failed to load embedding model {self._model_name}: {e}"
            ) from e

    def score(self, text: str, labels: Sequence[str]) -> List[LabelScore]:
        """
        Score text against candidate labels.

        Args:
            text: The text to classify.
            labels: Candidate labels, in any order.

        Returns:
            One LabelScore per label sorted by score, highest first.
        """
        labels = list(labels)
        if not labels:
            return []

        if not text.strip():
            return [LabelScore(label=label, score=0.0) for label in labels]

        self.ensure_ready()

        text_embedding = self._encode([text])[0]
        similarities = [
            self._cosine_similarity(text_embedding, self._label_embedding(label))
            for label in labels
        ]
        probabilities = self._softmax(similarities)

        scores = [
            LabelScore(label=label, score=probability)
            for label, probability in zip(labels, probabilities)
        ]
        scores.sort(key=lambda s: s.score, reverse=True)
        return scores

    def score_batch(
        self,
        texts: Sequence[str],
        labels: Sequence[str],
    ) -> List[List[LabelScore]]:
        """Score several texts one after another."""
        return [self.score(text, labels) for text in texts]

    def _label_embedding(self, label: str) -> List[float]:
        with self._lock:
            if label not in self._label_embeddings:
                hypothesis = self._hypothesis_template.format(label.replace("_", " "))
                self._label_embeddings[label] = self._encode([hypothesis])[0]
            return self._label_embeddings[label]

    def _encode(self, texts: List[str]) -> List[List[float]]:
        embeddings = self._embedding_model.encode(texts)
        if hasattr(embeddings, "tolist"):
            embeddings = embeddings.tolist()
        return [[float(x) for x in vector] for vector in embeddings]

    def _softmax(self, similarities: List[float]) -> List[float]:
        peak = max(similarities)
        weights = [math.exp((s - peak) / self._temperature) for s in similarities]
        total = sum(weights)
        return [w / total for w in weights]

    def _cosine_similarity(
        self,
        vec1: List[float],
        vec2: List[float]
    ) -> float:
        """
        Compute cosine similarity between two vectors.

        Returns 0.0 for mismatched or zero-length vectors.
        """
        if len(vec1) != len(vec2):
            return 0.0

        dot_product = sum(a * b for a, b in zip(vec1, vec2))
        norm1 = sum(a * a for a in vec1) ** 0.5
        norm2 = sum(b * b for b in vec2) ** 0.5

        if norm1 == 0 or norm2 == 0:
            return 0.0

        return dot_product / (norm1 * norm2)


_scorers: Dict[str, EmbeddingLabelScorer] = {}
_scorers_lock = threading.Lock()


def get_label_scorer(model_name: str = DEFAULT_MODEL_NAME) -> EmbeddingLabelScorer:
    """Return the process-wide scorer for ``model_name``, creating it on first use."""
    with _scorers_lock:
        if model_name not in _scorers:
            _scorers[model_name] = EmbeddingLabelScorer(model_name=model_name)
        return _scorers[model_name]
