"""
Prompt templates and canned texts for the language-model fallback.
"""
from typing import List

CAPABILITIES: List[str] = [
    "Searching and querying database records",
    "Analyzing record distributions",
    "Finding records by sector or category",
    "Showing data visualizations",
    "Helping with database operations",
]

# Words that make a message worth sending to the model
DATABASE_KEYWORDS = frozenset({
    "record", "database", "data", "search", "find", "show", "list",
    "analyze", "sector", "category", "chart", "distribution",
    "technology", "healthcare", "finance", "education", "retail",
})

ASSISTANT_PROMPT_TEMPLATE = """You are a database records management assistant. The user asks: {query}
Context: You can help with searching records, analyzing data distributions, and visualizing data.
Keep responses focused on database operations and data analysis.
Current capabilities: {capabilities}
Response format: Keep it brief and professional."""

LLM_UNAVAILABLE_MESSAGE = (
    "Sorry, I'm having trouble processing your request right now. Please try again."
)


def get_assistant_prompt(query: str) -> str:
    """Build the generate prompt for a user query."""
    return ASSISTANT_PROMPT_TEMPLATE.format(
        query=query,
        capabilities=", ".join(CAPABILITIES),
    )


def get_capabilities_message() -> str:
    """Reply sent when a message has nothing to do with the records."""
    bullets = "\n".join(f"• {capability}" for capability in CAPABILITIES)
    return (
        "I'm a specialized assistant that can help you with:\n\n"
        f"{bullets}"
        "\n\nPlease ask me questions related to these topics."
    )
