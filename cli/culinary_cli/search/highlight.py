"""Mark the parts of a suggestion that match the typed query."""

import re

from rich.text import Text

MATCH_STYLE = "bold black on #99f6e4"


def split_matches(text: str, term: str) -> list[tuple[str, bool]]:
    """
    Split ``text`` around case-insensitive occurrences of ``term``.

    Returns ``(part, matched)`` pairs that concatenate back to ``text``.
    ``term`` is used as a regular expression; when it does not compile the
    whole text comes back as a single unmatched part.
    """
    if not term:
        return [(text, False)]

    try:
        pattern = re.compile(f"({term})", re.IGNORECASE)
    except re.error:
        return [(text, False)]

    lowered = term.lower()
    # re.split yields None for capture groups that did not participate
    return [(part, part.lower() == lowered) for part in pattern.split(text) if part]


def highlight_match(text: str, term: str, style: str = MATCH_STYLE) -> Text:
    """Rich ``Text`` of ``text`` with the parts matching ``term`` styled."""
    highlighted = Text()
    for part, matched in split_matches(text, term):
        highlighted.append(part, style=style if matched else None)
    return highlighted
