"""
Data models and configuration for the Bayesian classifier, dood!
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Set

from .tokenizer import DEFAULT_STOP_WORDS

DEFAULT_CUTOFF = 0.9


@dataclass
class ClassifierConfig:
    """Configuration for Bayesian classifier"""

    # Minimum score for isMatch() to report a match
    cutoff: float = DEFAULT_CUTOFF

    # Words never used as classification signal (case-insensitive)
    stopWords: Optional[Set[str]] = None

    # Enable debug logging, raises the shared module logger for the whole process
    debugLogging: bool = False

    def __post_init__(self):
        """Validate configuration parameters"""
        if not (0.0 <= self.cutoff <= 1.0):
            raise ValueError("Cutoff must be between 0 and 1.")

        if self.stopWords is None:
            self.stopWords = set(DEFAULT_STOP_WORDS)

    @classmethod
    def fromDict(cls, data: Dict[str, Any]) -> "ClassifierConfig":
        """
        Build config from a [classifier] config section

        Args:
            data: Dict with optional 'cutoff', 'stop-words' and 'debug-logging' keys

        Returns:
            ClassifierConfig instance

        Raises:
            ValueError: If stop-words isn't a list or cutoff is out of range
        """
        stopWords = data.get("stop-words", None)
        if stopWords is not None and not isinstance(stopWords, (list, tuple)):
            raise ValueError("Stop words must be a list of strings.")
        return cls(
            cutoff=float(data.get("cutoff", DEFAULT_CUTOFF)),
            stopWords=set(stopWords) if stopWords is not None else None,
            debugLogging=bool(data.get("debug-logging", False)),
        )


@dataclass
class TrainingExample:
    """Training example for the classifier"""

    text: str
    isMatch: bool

    def __post_init__(self):
        """Validate training example"""
        if not self.text or not self.text.strip():
            raise ValueError("Training text cannot be empty, dood!")


@dataclass
class ClassifierStats:
    """Overall statistics for a trained classifier"""

    vocabularySize: int
    matchObservations: int
    nonMatchObservations: int

    @property
    def totalObservations(self) -> int:
        """Total number of token observations"""
        return self.matchObservations + self.nonMatchObservations

    @property
    def matchRatio(self) -> float:
        """Ratio of matching observations to all observations"""
        if self.totalObservations == 0:
            return 0.0
        return self.matchObservations / self.totalObservations
