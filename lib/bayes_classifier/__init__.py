"""
Bayesian Text Classifier Library

This library provides a naive Bayes binary classifier: teach it matching and
non-matching examples, then score new text with the probability that it
belongs to the matching class, dood!

Main Components:
- BayesianClassifier: Teaching and classification engine
- TokenStatistics: Per-token match/non-match counts
- WordTokenizer: Splits text into word tokens
- ClassifierConfig: Cutoff and stop words configuration

Usage:
    from lib.bayes_classifier import BayesianClassifier

    classifier = BayesianClassifier()
    classifier.teachMatch("buy cheap pills now")
    classifier.teachNonMatch("meeting agenda for today")

    print(classifier.classify("cheap pills"))  # 0.99
    print(classifier.isMatch("meeting agenda"))  # False
"""

from .classifier import BayesianClassifier
from .models import ClassifierConfig, ClassifierStats, TrainingExample
from .token_statistics import LOWER_BOUND, NEUTRAL_PROBABILITY, UPPER_BOUND, TokenStatistics, normalizeSignificance
from .tokenizer import DEFAULT_STOP_WORDS, WordTokenizer

__all__ = [
    # Main classes
    "BayesianClassifier",
    "ClassifierConfig",
    # Tokenizer
    "WordTokenizer",
    "DEFAULT_STOP_WORDS",
    # Data models
    "TokenStatistics",
    "TrainingExample",
    "ClassifierStats",
    # Probability helpers
    "normalizeSignificance",
    "NEUTRAL_PROBABILITY",
    "LOWER_BOUND",
    "UPPER_BOUND",
]
