"""
Analytics Package - Intent classification and chart building.

This package provides:
- IntentClassifier: Classify chat messages into help/list/search/analyze
- Visualizer: Plotly charts and tables for the front-end
- EXAMPLE_COMMANDS / TRAINING_EXAMPLES: the fixed phrase corpora

Example:
    >>> from recordkeeper.analytics import get_intent_classifier, Intent
    >>> get_intent_classifier().classify("help") is Intent.HELP
    True
"""
from recordkeeper.analytics.intent_classifier import (
    Intent,
    IntentClassifier,
    get_intent_classifier,
    tokenize,
)
from recordkeeper.analytics.training_data import EXAMPLE_COMMANDS, TRAINING_EXAMPLES
from recordkeeper.analytics.visualizer import Visualizer

__all__ = [
    "Intent",
    "IntentClassifier",
    "get_intent_classifier",
    "tokenize",
    "EXAMPLE_COMMANDS",
    "TRAINING_EXAMPLES",
    "Visualizer",
]
