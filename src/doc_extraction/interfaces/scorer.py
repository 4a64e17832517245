"""Label scorer interface for the document extraction system."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Sequence


@dataclass(frozen=True)
class LabelScore:
    """One candidate label with its score in [0, 1]."""
    label: str
    score: float


class ILabelScorer(ABC):
    """
    Abstract interface for zero-shot label scoring.

    Implementations score a text against an arbitrary set of candidate
    labels. A scorer is a shared, reusable service: it holds no state
    tied to a particular extraction.
    """

    @abstractmethod
    def score(self, text: str, labels: Sequence[str]) -> List[LabelScore]:
        """
        Score a text against candidate labels.

        Args:
            text: Raw text; no pre-tokenization required.
            labels: Ordered candidate labels.

        Returns:
            One LabelScore per requested label, highest score first.
        """
        pass

    @property
    @abstractmethod
    def is_ready(self) -> bool:
        """Whether the scorer can answer without further initialization."""
        pass

    def ensure_ready(self) -> None:
        """Perform any one-time initialization up front."""
        return None
