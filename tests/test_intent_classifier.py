"""
Tests for the Bayesian intent classifier.
"""
import logging

import pytest

from recordkeeper.analytics import EXAMPLE_COMMANDS, TRAINING_EXAMPLES
from recordkeeper.analytics.intent_classifier import (
    Intent,
    IntentClassifier,
    get_intent_classifier,
    tokenize,
)


@pytest.fixture(scope="module")
def classifier():
    return IntentClassifier()


class TestTokenize:
    def test_lowercases_and_drops_punctuation(self):
        assert tokenize("Show ALL records!") == ["show", "all", "record"]

    def test_single_characters_are_dropped(self):
        assert tokenize("a b cd") == ["cd"]

    def test_plural_folding_keeps_short_and_double_s_words(self):
        assert tokenize("sectors class has") == ["sector", "class", "has"]


class TestIntentClassifier:
    @pytest.mark.parametrize("phrase,label", TRAINING_EXAMPLES)
    def test_training_phrases_classify_to_their_label(self, classifier, phrase, label):
        assert classifier.classify(phrase) == Intent(label)

    @pytest.mark.parametrize(
        "category,intent",
        [("list", Intent.LIST), ("search", Intent.SEARCH), ("analyze", Intent.ANALYZE)],
    )
    def test_example_commands_match_their_category(self, classifier, category, intent):
        for command in EXAMPLE_COMMANDS[category]:
            assert classifier.classify(command) == intent, command

    def test_help(self, classifier):
        assert classifier.classify("help") == Intent.HELP
        assert classifier.classify("HELP") == Intent.HELP

    def test_out_of_vocabulary_is_unknown(self, classifier):
        assert classifier.classify("hello there") == Intent.UNKNOWN
        assert classifier.classify("tell me a joke") == Intent.UNKNOWN

    def test_empty_message_is_unknown(self, classifier):
        assert classifier.classify("") == Intent.UNKNOWN
        assert classifier.classify("   ") == Intent.UNKNOWN

    def test_scores_cover_all_trained_intents(self, classifier):
        scores = classifier.scores("show all records")
        assert set(scores) == {"help", "list", "search", "analyze"}
        assert sum(scores.values()) == pytest.approx(1.0)
        assert max(scores, key=scores.get) == "list"

    def test_classify_logs_posteriors_at_debug(self, classifier, caplog):
        caplog.set_level(logging.DEBUG, logger="recordkeeper.analytics.intent_classifier")

        assert classifier.classify("compare sectors") == Intent.ANALYZE

        messages = [r.getMessage() for r in caplog.records if r.levelno == logging.DEBUG]
        assert any("Intent posteriors for 'compare sectors'" in m and "'analyze'" in m for m in messages)

    def test_custom_corpus(self):
        custom = IntentClassifier(examples=[("hi", "help"), ("list stuff", "list")])
        assert custom.classify("please list") == Intent.LIST

    def test_singleton_is_trained_once(self):
        assert get_intent_classifier() is get_intent_classifier()
