"""
Naive Bayes text classifier implementation, dood!

This module contains the binary classification logic: teaching matching and
non-matching inputs, and combining per-token probabilities into one score
under the naive Bayes independence assumption.
"""

import logging
import math
from typing import Callable, Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple, Union

from .models import ClassifierConfig, ClassifierStats, TrainingExample
from .token_statistics import NEUTRAL_PROBABILITY, TokenStatistics, normalizeSignificance
from .tokenizer import WordTokenizer

logger = logging.getLogger(__name__)

ClassifierInput = Union[str, Iterable[str]]

# Products below 2**-500 get scaled up by 2**500, far from the float underflow limit
_RESCALE_EXPONENT = 500
_RESCALE_THRESHOLD = math.ldexp(1.0, -_RESCALE_EXPONENT)


class BayesianClassifier:
    """
    Binary text classifier based on Bayes' rule

    Keeps a case-insensitive token table with match/non-match counts per token.
    Inputs can be raw strings (tokenized internally) or already tokenized
    sequences of strings. The instance is not thread-safe: teaching from several
    threads at once must be synchronized by the caller.
    """

    def __init__(self, config: Optional[ClassifierConfig] = None):
        """
        Initialize classifier

        Args:
            config: Classifier configuration, uses defaults if None
        """
        self.config = config or ClassifierConfig()
        self.tokenizer = WordTokenizer()
        self._stopWords = frozenset(word.casefold() for word in (self.config.stopWords or ()))
        self._tokens: Dict[str, TokenStatistics] = {}

        if self.config.debugLogging:
            logger.setLevel(logging.DEBUG)

        logger.info(
            f"Initialized BayesianClassifier with cutoff={self.config.cutoff}, {len(self._stopWords)} stop words"
        )

    def __len__(self) -> int:
        return len(self._tokens)

    def isMatch(self, input: ClassifierInput) -> bool:
        """
        Check if input belongs to the matching class

        Args:
            input: Text or sequence of tokens

        Returns:
            True if classify(input) reaches the cutoff

        Raises:
            ValueError: If input is None
        """
        return self.classify(input) >= self.config.cutoff

    def classify(self, input: ClassifierInput) -> float:
        """
        Calculate probability that input belongs to the matching class

        Args:
            input: Text or sequence of tokens

        Returns:
            Probability in [LOWER_BOUND, UPPER_BOUND]

        Raises:
            ValueError: If input is None
        """
        tokens = self._resolveTokens(input)
        wordProbabilities = self.calculateWordsProbability(tokens)
        score = normalizeSignificance(self.calculateOverallProbability(wordProbabilities))
        logger.debug(f"Classified input with {len(wordProbabilities)} known tokens: score={score:.4f}")
        return score

    def teachMatch(self, input: ClassifierInput) -> None:
        """
        Teach a matching input

        Args:
            input: Text or sequence of tokens

        Raises:
            ValueError: If input is None
            TypeError: If a token in the sequence is not a string
        """
        self._teach(self._resolveTokens(input), isMatch=True)

    def teachNonMatch(self, input: ClassifierInput) -> None:
        """
        Teach a non-matching input

        Args:
            input: Text or sequence of tokens

        Raises:
            ValueError: If input is None
            TypeError: If a token in the sequence is not a string
        """
        self._teach(self._resolveTokens(input), isMatch=False)

    def _teach(self, tokens: Iterable[str], isMatch: bool) -> None:
        """Update token table with every classifiable token"""
        tokens = list(tokens)
        for token in tokens:
            if token is not None and not isinstance(token, str):
                raise TypeError(f"Tokens must be strings, got {type(token).__name__}")

        learned = 0
        for token in tokens:
            if not self.isClassifiableWord(token):
                continue

            key = token.casefold()
            tokenStats = self._tokens.get(key)
            if tokenStats is None:
                self._tokens[key] = TokenStatistics(
                    token=token, matchCount=int(isMatch), nonMatchCount=int(not isMatch)
                )
            elif isMatch:
                tokenStats.incrementMatch()
            else:
                tokenStats.incrementNonMatch()
            learned += 1

        className = "match" if isMatch else "non-match"
        if learned:
            logger.debug(f"Learned {className} input with {learned} tokens.")
        else:
            logger.debug(f"No classifiable tokens in {className} input, nothing learned.")

    def batchTeach(
        self,
        examples: Sequence[Union[TrainingExample, Tuple[str, bool]]],
        progressCallback: Optional[Callable[[int, int], None]] = None,
    ) -> Dict[str, int]:
        """
        Teach multiple examples in batch

        Args:
            examples: TrainingExample objects or (text, isMatch) tuples
            progressCallback: Optional callback called with (done, total) after each example

        Returns:
            Dictionary with learning statistics
        """
        stats = {"total": len(examples), "matchLearned": 0, "nonMatchLearned": 0}

        for i, example in enumerate(examples):
            if not isinstance(example, TrainingExample):
                example = TrainingExample(*example)

            if example.isMatch:
                self.teachMatch(example.text)
                stats["matchLearned"] += 1
            else:
                self.teachNonMatch(example.text)
                stats["nonMatchLearned"] += 1

            if progressCallback:
                progressCallback(i + 1, len(examples))

        logger.info(f"Batch teaching completed: {stats}.")
        return stats

    def calculateWordsProbability(self, tokens: Optional[ClassifierInput]) -> List[TokenStatistics]:
        """
        Look up statistics for every known classifiable token

        Args:
            tokens: Text or sequence of tokens, None is treated as no tokens

        Returns:
            Copies of known TokenStatistics in input order, once per occurrence.
            Tokens never seen during teaching are dropped.
        """
        if tokens is None:
            return []
        if isinstance(tokens, str):
            tokens = self.tokenizer.tokenize(tokens)

        wordProbabilities = []
        for token in tokens:
            if not self.isClassifiableWord(token):
                continue
            tokenStats = self._tokens.get(token.casefold())
            if tokenStats is not None:
                wordProbabilities.append(tokenStats.copy())

        return wordProbabilities

    def calculateOverallProbability(self, wordProbabilities: Optional[Sequence[TokenStatistics]]) -> float:
        """
        Combine token probabilities into one probability

        Calculates xy / (xy + z) where xy is the product of all probabilities
        and z is the product of all complements. Both products are scaled by the
        same power of two when they get small, which keeps the ratio exact and
        long inputs from underflowing to 0/0.

        Args:
            wordProbabilities: Token statistics to combine

        Returns:
            Combined probability, NEUTRAL_PROBABILITY for empty input
        """
        if not wordProbabilities:
            return NEUTRAL_PROBABILITY

        xy = 1.0
        z = 1.0
        for tokenStats in wordProbabilities:
            probability = tokenStats.calculateProbability()
            xy *= probability
            z *= 1 - probability
            if max(xy, z) < _RESCALE_THRESHOLD:
                xy = math.ldexp(xy, _RESCALE_EXPONENT)
                z = math.ldexp(z, _RESCALE_EXPONENT)

        return xy / (xy + z)

    @staticmethod
    def normalizeSignificance(significance: float) -> float:
        """Clamp significance into [LOWER_BOUND, UPPER_BOUND]"""
        return normalizeSignificance(significance)

    def isStopWord(self, word: Optional[str]) -> bool:
        return bool(word) and word.casefold() in self._stopWords

    def isClassifiableWord(self, word: Optional[str]) -> bool:
        return bool(word) and not self.isStopWord(word)

    def getTokenStatistics(self, token: str) -> Optional[TokenStatistics]:
        """Get a copy of statistics for token (case-insensitive), None if unknown"""
        tokenStats = self._tokens.get(token.casefold())
        return tokenStats.copy() if tokenStats is not None else None

    def iterTokenStatistics(self) -> Iterator[TokenStatistics]:
        """Iterate over copies of all token statistics ordered by token"""
        for tokenStats in sorted(self._tokens.values()):
            yield tokenStats.copy()

    def getModelStats(self) -> ClassifierStats:
        """Get overall statistics of the token table"""
        return ClassifierStats(
            vocabularySize=len(self._tokens),
            matchObservations=sum(s.matchCount for s in self._tokens.values()),
            nonMatchObservations=sum(s.nonMatchCount for s in self._tokens.values()),
        )

    def exportCounts(self) -> Dict[str, Tuple[int, int]]:
        """
        Export token table for external persistence

        Returns:
            Dict: token => (matchCount, nonMatchCount)
        """
        return {s.token: (s.matchCount, s.nonMatchCount) for s in self._tokens.values()}

    def loadCounts(self, counts: Mapping[str, Tuple[int, int]]) -> int:
        """
        Populate token table directly from exported counts

        Counts are added to already known tokens. Stop words and entries with
        both counts zero are skipped.

        Args:
            counts: Dict token => (matchCount, nonMatchCount)

        Returns:
            Number of tokens loaded

        Raises:
            ValueError: If counts is None or any count is negative
            TypeError: If any token is not a string
        """
        if counts is None:
            raise ValueError("counts must not be None")
        for token, (matchCount, nonMatchCount) in counts.items():
            if not isinstance(token, str):
                raise TypeError(f"Tokens must be strings, got {type(token).__name__}")
            if matchCount < 0 or nonMatchCount < 0:
                raise ValueError(f"Counts for token '{token}' must be non-negative.")

        loaded = 0
        for token, (matchCount, nonMatchCount) in counts.items():
            if not self.isClassifiableWord(token) or matchCount + nonMatchCount == 0:
                continue

            key = token.casefold()
            tokenStats = self._tokens.get(key)
            if tokenStats is None:
                self._tokens[key] = TokenStatistics(token=token, matchCount=matchCount, nonMatchCount=nonMatchCount)
            else:
                tokenStats.matchCount += matchCount
                tokenStats.nonMatchCount += nonMatchCount
            loaded += 1

        logger.info(f"Loaded counts for {loaded} tokens, vocabulary size is {len(self._tokens)}.")
        return loaded

    def _resolveTokens(self, input: Optional[ClassifierInput]) -> Iterable[str]:
        """Turn text or token sequence into tokens, rejecting None"""
        if input is None:
            raise ValueError("input must not be None")
        if isinstance(input, str):
            return self.tokenizer.tokenize(input)
        return input
