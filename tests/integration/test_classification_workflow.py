"""
End-to-end tests: configuration, corpus files, teaching and classification.
"""

import pytest

import main
from lib.bayes_classifier import LOWER_BOUND, NEUTRAL_PROBABILITY, UPPER_BOUND, BayesianClassifier


class TestTrainedClassifier:
    """Classification on the sample corpus."""

    def testMatchingTextsMatch(self, trainedClassifier):
        assert trainedClassifier.isMatch("cheap pills")
        assert trainedClassifier.isMatch("FREE prize!!!")
        assert trainedClassifier.classify("cheap pills") == UPPER_BOUND

    def testNonMatchingTextsDontMatch(self, trainedClassifier):
        assert not trainedClassifier.isMatch("agenda for the meeting")
        assert trainedClassifier.classify("review meeting") == LOWER_BOUND

    def testUnknownTextIsNeutral(self, trainedClassifier):
        assert trainedClassifier.classify("zebra xylophone") == NEUTRAL_PROBABILITY
        assert trainedClassifier.classify("the a an") == NEUTRAL_PROBABILITY

    def testScoresAlwaysBounded(self, trainedClassifier, matchExamples, nonMatchExamples):
        for text in matchExamples + nonMatchExamples + ["", "!!!", "offer review"]:
            score = trainedClassifier.classify(text)
            assert LOWER_BOUND <= score <= UPPER_BOUND

    def testExportRestoreRoundTrip(self, trainedClassifier, matchExamples, nonMatchExamples):
        restored = BayesianClassifier()
        restored.loadCounts(trainedClassifier.exportCounts())

        for text in matchExamples + nonMatchExamples:
            assert restored.classify(text) == trainedClassifier.classify(text)


class TestClassifierApp:
    """ClassifierApp and the command line entry point."""

    def writeConfig(self, corpusDir, extra: str = "") -> str:
        configPath = corpusDir / "config.toml"
        configPath.write_text(
            "[classifier]\n"
            "cutoff = 0.9\n"
            "\n"
            "[training]\n"
            f'match-files = ["{(corpusDir / "match.txt").as_posix()}"]\n' + extra,
            encoding="utf-8",
        )
        return str(configPath)

    def testReadCorpusFileSkipsBlankLines(self, corpusDir, matchExamples):
        examples = main.readCorpusFile(str(corpusDir / "match.txt"), isMatch=True)

        assert [e.text for e in examples] == matchExamples
        assert all(e.isMatch for e in examples)

    def testTrainFromConfigAndExtraFiles(self, corpusDir, matchExamples, nonMatchExamples):
        app = main.ClassifierApp(configPath=self.writeConfig(corpusDir))

        taught = app.train(nonMatchFiles=[str(corpusDir / "non-match.txt")])

        assert taught == len(matchExamples) + len(nonMatchExamples)
        assert app.classifier.isMatch("cheap pills")
        assert not app.classifier.isMatch("meeting agenda")

    def testMainPrintsScores(self, corpusDir, capsys):
        configPath = self.writeConfig(corpusDir)

        main.main(
            [
                "-c",
                configPath,
                "--non-match",
                str(corpusDir / "non-match.txt"),
                "--show-stats",
                "cheap pills",
                "review meeting",
            ]
        )

        lines = capsys.readouterr().out.splitlines()
        assert lines[0].startswith("Vocabulary size: ")
        assert "0.9900\tmatch\tcheap pills" in lines
        assert "0.0100\tno match\treview meeting" in lines

    def testMainPrintConfig(self, corpusDir, capsys):
        configPath = self.writeConfig(corpusDir)

        with pytest.raises(SystemExit) as excInfo:
            main.main(["-c", configPath, "--print-config"])

        assert excInfo.value.code == 0
        assert '"cutoff": 0.9' in capsys.readouterr().out

    def testMainFailsOnMissingCorpus(self, corpusDir):
        configPath = self.writeConfig(corpusDir)

        with pytest.raises(SystemExit) as excInfo:
            main.main(["-c", configPath, "--match", str(corpusDir / "missing.txt")])

        assert excInfo.value.code == 1
