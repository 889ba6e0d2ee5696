"""
Command line front end for the Bayesian classifier.

Teaches the classifier from corpus files (one example per line) and prints
scores for the given texts.
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import List, Optional

from internal.config.manager import ConfigManager
from lib.bayes_classifier import BayesianClassifier, TrainingExample
from lib.logging_utils import initLogging

# Configure basic logging first
logging.basicConfig(format="%(asctime)s - %(name)s - %(levelname)s - %(message)s", level=logging.WARNING)
logger = logging.getLogger(__name__)


def readCorpusFile(path: str, isMatch: bool) -> List[TrainingExample]:
    """Read training examples from file, one example per non-empty line."""
    examples = []
    with open(path, "rt", encoding="utf-8") as f:
        for line in f:
            if line.strip():
                examples.append(TrainingExample(text=line.rstrip("\n"), isMatch=isMatch))
    logger.info(f"Read {len(examples)} examples from {path}")
    return examples


class ClassifierApp:
    """Wires configuration, logging and the classifier together."""

    def __init__(self, configPath: str = "config.toml", configDirs: Optional[List[str]] = None):
        self.configManager = ConfigManager(configPath, configDirs)
        initLogging(self.configManager.getLoggingConfig())
        self.classifier = BayesianClassifier(self.configManager.getClassifierConfig())

    def train(self, matchFiles: Optional[List[str]] = None, nonMatchFiles: Optional[List[str]] = None) -> int:
        """
        Teach classifier from configured and extra corpus files

        Args:
            matchFiles: Extra files with matching examples
            nonMatchFiles: Extra files with non-matching examples

        Returns:
            Number of examples taught
        """
        trainingConfig = self.configManager.getTrainingConfig()
        examples: List[TrainingExample] = []
        for path in list(trainingConfig.get("match-files", [])) + list(matchFiles or []):
            examples.extend(readCorpusFile(path, isMatch=True))
        for path in list(trainingConfig.get("non-match-files", [])) + list(nonMatchFiles or []):
            examples.extend(readCorpusFile(path, isMatch=False))

        stats = self.classifier.batchTeach(examples)
        return stats["total"]

    def classifyTexts(self, texts: List[str]) -> None:
        """Print score and match flag for every text."""
        for text in texts:
            score = self.classifier.classify(text)
            verdict = "match" if score >= self.classifier.config.cutoff else "no match"
            print(f"{score:.4f}\t{verdict}\t{text}")

    def printStats(self) -> None:
        stats = self.classifier.getModelStats()
        print(f"Vocabulary size: {stats.vocabularySize}")
        print(f"Match observations: {stats.matchObservations}")
        print(f"Non-match observations: {stats.nonMatchObservations}")


def parse_arguments(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Naive Bayes text classifier, dood!")
    parser.add_argument(
        "-c",
        "--config",
        default="config.toml",
        help="Path to configuration file (default: config.toml)",
    )
    parser.add_argument(
        "--config-dir",
        action="append",
        help="Directory to search for .toml config files recursively (can be specified multiple times), dood!",
    )
    parser.add_argument(
        "--match",
        action="append",
        metavar="FILE",
        help="File with matching examples, one per line (can be specified multiple times)",
    )
    parser.add_argument(
        "--non-match",
        action="append",
        metavar="FILE",
        help="File with non-matching examples, one per line (can be specified multiple times)",
    )
    parser.add_argument(
        "--print-config",
        action="store_true",
        help="Pretty-print loaded configuration and exit, dood!",
    )
    parser.add_argument(
        "--show-stats",
        action="store_true",
        help="Print token table statistics after training",
    )
    parser.add_argument("texts", nargs="*", metavar="TEXT", help="Texts to classify")
    args = parser.parse_args(argv)

    args.config = os.path.abspath(args.config)
    if args.config_dir:
        args.config_dir = [os.path.abspath(dirPath) for dirPath in args.config_dir]

    return args


def prettyPrintConfig(configManager: ConfigManager):
    """Pretty-print the loaded configuration, dood!"""
    print("=== Classifier Configuration ===")
    print()
    print(json.dumps(configManager.config, indent=2, ensure_ascii=False, sort_keys=True, default=str))
    print()
    print("=== Configuration loaded successfully, dood! ===")


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    args = parse_arguments(argv)

    try:
        if args.print_config:
            prettyPrintConfig(ConfigManager(args.config, args.config_dir))
            sys.exit(0)

        app = ClassifierApp(configPath=args.config, configDirs=args.config_dir)
        app.train(matchFiles=args.match, nonMatchFiles=args.non_match)
        if args.show_stats:
            app.printStats()
        app.classifyTexts(args.texts)
    except KeyboardInterrupt:
        logger.info("Stopped by user")
    except Exception as e:
        logger.error(f"Classifier failed: {e}")
        logger.exception(e)
        sys.exit(1)


if __name__ == "__main__":
    main()
