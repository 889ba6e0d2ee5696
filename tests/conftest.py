"""
Pytest configuration and common fixtures for classifier tests.

All fixtures follow camelCase naming convention.
"""

from pathlib import Path
from typing import List

import pytest

from lib.bayes_classifier import BayesianClassifier

MATCH_EXAMPLES: List[str] = [
    "Buy cheap pills now",
    "Cheap watches, limited offer!",
    "Win a FREE prize now",
    "Limited offer: free pills",
]

NON_MATCH_EXAMPLES: List[str] = [
    "Meeting agenda for today",
    "Lunch tomorrow with the team?",
    "Agenda: quarterly review meeting",
    "Please review the attached report",
]


@pytest.fixture
def matchExamples() -> List[str]:
    return list(MATCH_EXAMPLES)


@pytest.fixture
def nonMatchExamples() -> List[str]:
    return list(NON_MATCH_EXAMPLES)


@pytest.fixture
def trainedClassifier(matchExamples, nonMatchExamples) -> BayesianClassifier:
    """Classifier taught with the sample corpus."""
    classifier = BayesianClassifier()
    for text in matchExamples:
        classifier.teachMatch(text)
    for text in nonMatchExamples:
        classifier.teachNonMatch(text)
    return classifier


@pytest.fixture
def corpusDir(tmp_path, matchExamples, nonMatchExamples) -> Path:
    """Directory with match.txt and non-match.txt corpus files (blank lines included)."""
    (tmp_path / "match.txt").write_text("\n".join(matchExamples) + "\n\n", encoding="utf-8")
    (tmp_path / "non-match.txt").write_text("\n\n".join(nonMatchExamples) + "\n", encoding="utf-8")
    return tmp_path
