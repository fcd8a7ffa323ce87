"""
Intent Classifier - Detect what a chat message is asking for.

Messages are classified into one of:
- help:    show the command catalog
- list:    show every record
- search:  filter records by keywords
- analyze: sector distribution
- unknown: nothing in the message resembles the training phrases

A multinomial naive Bayes model is trained on the fixed phrase corpus in
``training_data``. Messages sharing no token with the training vocabulary
are reported as ``unknown`` instead of being forced into a class.
"""
import re
from enum import Enum
from functools import lru_cache
from typing import Dict, List, Optional, Sequence, Tuple

from sklearn.feature_extraction.text import CountVectorizer
from sklearn.naive_bayes import MultinomialNB

from recordkeeper.analytics.training_data import TRAINING_EXAMPLES
from recordkeeper.core.logging_config import get_logger

logger = get_logger(__name__)

_TOKEN_PATTERN = re.compile(r"\b\w\w+\b")


class Intent(str, Enum):
    """Chat intents."""
    HELP = "help"
    LIST = "list"
    SEARCH = "search"
    ANALYZE = "analyze"
    UNKNOWN = "unknown"


def tokenize(text: str) -> List[str]:
    """
    Split text into lowercase word tokens with plural folding.

    Example:
        >>> tokenize("Show all Records!")
        ['show', 'all', 'record']
    """
    tokens = []
    for token in _TOKEN_PATTERN.findall(text.lower()):
        if len(token) > 3 and token.endswith("s") and not token.endswith("ss"):
            token = token[:-1]
        tokens.append(token)
    return tokens


class IntentClassifier:
    """
    Bayesian text classifier over the intent training corpus.

    Example:
        >>> classifier = IntentClassifier()
        >>> classifier.classify("show all records")
        <Intent.LIST: 'list'>
    """

    def __init__(
        self,
        examples: Optional[Sequence[Tuple[str, str]]] = None,
        alpha: float = 0.5,
    ):
        """
        Train the classifier.

        Args:
            examples: (phrase, intent) pairs. Defaults to the built-in corpus.
            alpha: Additive smoothing for the naive Bayes model
        """
        examples = list(examples or TRAINING_EXAMPLES)
        phrases = [phrase for phrase, _ in examples]
        labels = [label for _, label in examples]

        self.vectorizer = CountVectorizer(
            tokenizer=tokenize,
            lowercase=False,
            token_pattern=None,
        )
        features = self.vectorizer.fit_transform(phrases)

        self.model = MultinomialNB(alpha=alpha)
        self.model.fit(features, labels)

        logger.info(
            f"IntentClassifier trained: {len(examples)} examples, "
            f"{len(self.vectorizer.vocabulary_)} terms, "
            f"classes={list(self.model.classes_)}"
        )

    def classify(self, message: str) -> Intent:
        """
        Classify a message.

        Args:
            message: Free-text user message

        Returns:
            Intent enum value
        """
        if not message or not message.strip():
            return Intent.UNKNOWN

        features = self.vectorizer.transform([message])
        if features.nnz == 0:
            logger.debug(f"No known terms in message: {message[:50]}")
            return Intent.UNKNOWN

        posteriors = self._posteriors(features)
        label = max(posteriors, key=posteriors.get)
        logger.debug(f"Intent posteriors for '{message[:50]}': {posteriors}")
        return Intent(label)

    def scores(self, message: str) -> Dict[str, float]:
        """Posterior probability for each trained intent."""
        return self._posteriors(self.vectorizer.transform([message]))

    def _posteriors(self, features) -> Dict[str, float]:
        probabilities = self.model.predict_proba(features)[0]
        return {
            label: float(probability)
            for label, probability in zip(self.model.classes_, probabilities)
        }


@lru_cache(maxsize=1)
def get_intent_classifier() -> IntentClassifier:
    """Return the process-wide classifier, training it on first use."""
    return IntentClassifier()
