"""
Per-token statistics for the Bayesian classifier, dood!

Every token seen during teaching gets its own TokenStatistics entry holding
how many matching and non-matching inputs contained it. The probability is
derived from those counts on every call.
"""

from dataclasses import dataclass
from typing import Any

# Value used when there is no information about a token or an input
NEUTRAL_PROBABILITY = 0.5

# Bounds for any single token probability or overall score
LOWER_BOUND = 0.01
UPPER_BOUND = 0.99


def normalizeSignificance(significance: float) -> float:
    """Clamp significance into [LOWER_BOUND, UPPER_BOUND]."""
    if UPPER_BOUND < significance:
        return UPPER_BOUND

    if LOWER_BOUND > significance:
        return LOWER_BOUND

    return significance


@dataclass
class TokenStatistics:
    """Matching/non-matching observation counts for a single token"""

    token: str
    matchCount: int = 0
    nonMatchCount: int = 0

    def __post_init__(self):
        """Validate counts"""
        if self.matchCount < 0 or self.nonMatchCount < 0:
            raise ValueError(f"Counts for token '{self.token}' must be non-negative.")

    def incrementMatch(self) -> None:
        self.matchCount += 1

    def incrementNonMatch(self) -> None:
        self.nonMatchCount += 1

    @property
    def totalCount(self) -> int:
        return self.matchCount + self.nonMatchCount

    @property
    def probability(self) -> float:
        return self.calculateProbability()

    def calculateProbability(self) -> float:
        """
        Calculate probability that an input containing this token is a match

        Returns:
            NEUTRAL_PROBABILITY if the token was never observed, LOWER_BOUND if it
            was only seen in non-matching inputs, otherwise the matching ratio
            clamped into [LOWER_BOUND, UPPER_BOUND]
        """
        if self.matchCount == 0:
            return NEUTRAL_PROBABILITY if self.nonMatchCount == 0 else LOWER_BOUND

        return normalizeSignificance(self.matchCount / (self.matchCount + self.nonMatchCount))

    def compareTo(self, other: Any) -> int:
        """
        Compare with another TokenStatistics by token text only

        Args:
            other: TokenStatistics to compare with

        Returns:
            Negative if this token sorts first, positive if it sorts after,
            0 if the token texts are equal (counts are ignored)

        Raises:
            TypeError: If other is not a TokenStatistics
        """
        if not isinstance(other, TokenStatistics):
            raise TypeError(f"{type(other).__name__} is not a {type(self).__name__}")

        if self.token < other.token:
            return -1
        if self.token > other.token:
            return 1
        return 0

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, TokenStatistics):
            return NotImplemented
        return self.compareTo(other) < 0

    def copy(self) -> "TokenStatistics":
        return TokenStatistics(token=self.token, matchCount=self.matchCount, nonMatchCount=self.nonMatchCount)
