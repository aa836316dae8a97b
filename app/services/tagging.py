"""
Tag extraction from free-text LLM summaries.

The summary prompt asks the model to finish with a ``Tags:`` line, but the
output is prose and nothing guarantees the line is there or well formed.
Parsing is therefore best effort: the first ``tag:``/``tags:`` match wins and
anything unusable falls back to the default tag set.
"""
import re
from typing import Iterable, List

from app.core.constants import SummarizationConfig

DEFAULT_TAGS: tuple[str, ...] = SummarizationConfig.DEFAULT_TAGS

TAGS_LINE_PATTERN = re.compile(r"tags?:\s*(.+?)(?:\n|$)", re.IGNORECASE)
SURROUNDING_QUOTES_PATTERN = re.compile(r"^[\"']|[\"']$")


def clean_tag(raw: str) -> str:
    """Trim whitespace and strip one leading and one trailing quote character."""
    return SURROUNDING_QUOTES_PATTERN.sub("", raw.strip())


def extract_tags(text: str, default: Iterable[str] = DEFAULT_TAGS) -> List[str]:
    """
    Extract tags from a generated summary.

    Empty fragments are dropped rather than kept as empty strings, so
    ``Tags: a,,b`` yields ``["a", "b"]``.

    Args:
        text: The summary text returned by the LLM.
        default: Tags to return when no usable tags line is found.

    Returns:
        Tags in the order they appear on the line, or a fresh list of the
        default tags.
    """
    match = TAGS_LINE_PATTERN.search(text or "")
    if match:
        tags = [clean_tag(part) for part in match.group(1).split(",")]
        tags = [tag for tag in tags if tag]
        if tags:
            return tags
    return list(default)
