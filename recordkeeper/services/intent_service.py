"""
Intent Service - Answer chat messages directly from the records.

Flow:
1. Classify the message (help / list / search / analyze / unknown)
2. Build a structured reply: message text, data payload, display hint

Replies with no data and no display hint tell the caller to hand the
message to the language model instead.
"""
from collections import Counter
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from recordkeeper.analytics.intent_classifier import Intent, IntentClassifier, get_intent_classifier
from recordkeeper.analytics.training_data import EXAMPLE_COMMANDS
from recordkeeper.core.logging_config import get_logger

logger = get_logger(__name__)

# Words ignored when turning a search message into search terms
SEARCH_STOPWORDS = frozenset({"show", "find", "get", "the", "and", "records", "in"})
MIN_SEARCH_TERM_LENGTH = 4

SECTOR_SEPARATOR = " - "
UNKNOWN_SECTOR = "Unknown"

# Search results above this count are shown as a table instead of a list
TABLE_THRESHOLD = 10

UNKNOWN_INTENT_MESSAGE = (
    "I'm not sure how to help with that. Try asking 'help' to see available commands."
)


@dataclass
class IntentResponse:
    """
    Structured reply produced from the records.

    Attributes:
        intent: Detected intent
        message: Text shown to the user
        data: Catalog, record list or sector counts (None for free-text answers)
        visualization: Display hint (commands, table, list, chart)
        chart_type: Chart kind when visualization is 'chart'
    """
    intent: Intent
    message: str
    data: Optional[Any] = None
    visualization: Optional[str] = None
    chart_type: Optional[str] = None
    success: bool = True

    @property
    def needs_fallback(self) -> bool:
        """True when nothing structured was produced."""
        return self.data is None and self.visualization is None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "message": self.message,
            "intent": self.intent.value,
            "data": self.data,
            "visualization": self.visualization,
            "chart_type": self.chart_type,
        }


def determine_visualization(intent: Intent, results: Sequence[Any]) -> Optional[str]:
    """Pick how a result set should be displayed."""
    if len(results) == 0:
        return None

    if intent == Intent.ANALYZE:
        return "chart"
    if intent == Intent.SEARCH:
        return "table" if len(results) > TABLE_THRESHOLD else "list"
    return "table"


def extract_search_terms(message: str) -> List[str]:
    """
    Split a message into search terms.

    Example:
        >>> extract_search_terms("find records in Technology")
        ['technology']
    """
    return [
        term for term in message.lower().split()
        if len(term) >= MIN_SEARCH_TERM_LENGTH and term not in SEARCH_STOPWORDS
    ]


def filter_records(records: Sequence[Dict[str, Any]], terms: Sequence[str]) -> List[Dict[str, Any]]:
    """Records whose name or value contains any of ``terms``."""
    matches = []
    for record in records:
        record_text = f"{record['name']} {record['value']}".lower()
        if any(term in record_text for term in terms):
            matches.append(record)
    return matches


def sector_of(name: str) -> str:
    """
    Sector suffix of a record name.

    Example:
        >>> sector_of("Client 1 - Technology")
        'Technology'
    """
    parts = name.split(SECTOR_SEPARATOR)
    if len(parts) < 2 or not parts[1].strip():
        return UNKNOWN_SECTOR
    return parts[1].strip()


def analyze_sector_distribution(records: Sequence[Dict[str, Any]]) -> Dict[str, int]:
    """Count records per sector, in first-seen order."""
    return dict(Counter(sector_of(record["name"]) for record in records))


def format_help_message(commands: Dict[str, List[str]]) -> str:
    """Render the command catalog as chat text."""
    def bullets(category: str) -> str:
        return "\n".join(f'• "{cmd}"' for cmd in commands.get(category, []))

    return (
        "Here are some example commands you can try:\n\n"
        "📋 Listing Records:\n" + bullets("list") + "\n\n"
        "🔍 Searching Records:\n" + bullets("search") + "\n\n"
        "📊 Analyzing Records:\n" + bullets("analyze")
    )


class IntentService:
    """
    Dispatches classified chat messages to record operations.

    Example:
        >>> service = IntentService()
        >>> reply = service.process_query("analyze records", records)
        >>> reply.data
        {'Technology': 20, 'Healthcare': 20, ...}
    """

    def __init__(self, classifier: Optional[IntentClassifier] = None):
        self.classifier = classifier or get_intent_classifier()

    def process_query(self, message: str, records: Sequence[Dict[str, Any]]) -> IntentResponse:
        """
        Answer ``message`` using ``records``.

        Args:
            message: Sanitized user message
            records: Every stored record

        Returns:
            IntentResponse for the detected intent
        """
        intent = self.classifier.classify(message)
        logger.info(f"Classified message as '{intent.value}': {message[:50]}")

        if intent == Intent.HELP:
            return IntentResponse(
                intent=intent,
                message=format_help_message(EXAMPLE_COMMANDS),
                data=EXAMPLE_COMMANDS,
                visualization="commands",
            )

        if intent == Intent.LIST:
            data = list(records)
            return IntentResponse(
                intent=intent,
                message="Here are all the records:",
                data=data,
                visualization=determine_visualization(intent, data),
            )

        if intent == Intent.SEARCH:
            terms = extract_search_terms(message)
            results = filter_records(records, terms)
            logger.debug(f"Search terms {terms} matched {len(results)} records")
            return IntentResponse(
                intent=intent,
                message=f"Found {len(results)} matching records:",
                data=results,
                visualization=determine_visualization(intent, results),
            )

        if intent == Intent.ANALYZE:
            return IntentResponse(
                intent=intent,
                message="Here is the distribution of records by sector:",
                data=analyze_sector_distribution(records),
                visualization="chart",
                chart_type="pie",
            )

        return IntentResponse(intent=Intent.UNKNOWN, message=UNKNOWN_INTENT_MESSAGE)
