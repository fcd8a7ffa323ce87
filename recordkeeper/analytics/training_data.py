"""
Intent training corpus and example command catalog.

Both are fixed at import time; the classifier is trained on
``TRAINING_EXAMPLES`` exactly once.
"""
from typing import Dict, List, Tuple

# (phrase, intent) pairs
TRAINING_EXAMPLES: List[Tuple[str, str]] = [
    # Help
    ("help", "help"),
    ("what can you do", "help"),
    ("show commands", "help"),
    ("show examples", "help"),
    ("available commands", "help"),
    ("how to use", "help"),

    # List
    ("what records do you have", "list"),
    ("show all records", "list"),
    ("display records", "list"),
    ("get all records", "list"),
    ("list everything", "list"),

    # Search
    ("find record", "search"),
    ("search for", "search"),
    ("look up", "search"),
    ("find records in", "search"),
    ("show records in", "search"),
    ("get records from", "search"),
    ("search in sector", "search"),

    # Analyze
    ("show statistics", "analyze"),
    ("analyze records", "analyze"),
    ("show distribution", "analyze"),
    ("compare sectors", "analyze"),
]

EXAMPLE_COMMANDS: Dict[str, List[str]] = {
    "list": [
        "show all records",
        "what records do you have",
        "list everything",
    ],
    "search": [
        "find records in Technology",
        "search for Healthcare records",
        "show records in Finance",
    ],
    "analyze": [
        "show distribution of records by sector",
        "analyze records",
        "compare sectors",
    ],
}
