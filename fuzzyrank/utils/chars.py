"""
Character helpers: simple upper/lower classification used by the scorer.

Characters are single code points and map to single code points. Where
str.lower()/str.upper() expand a character (the full Unicode mapping, e.g.
"İ" -> "i̇", "ß" -> "SS"), the one-to-one simple mapping is used instead:
"İ" lowercases to "i", and "ß" has no uppercase, so it counts as caseless.
"""

SEPARATORS = ("_", " ")


def is_separator(ch: str) -> bool:
    """True for the characters that earn a separator bonus on the next letter."""
    return ch in SEPARATORS


def to_lower(ch: str) -> str:
    lower = ch.lower()
    # Only U+0130 expands; its simple lowercase is the leading "i"
    return lower if len(lower) == 1 else lower[0]


def to_upper(ch: str) -> str:
    upper = ch.upper()
    if len(upper) == 1:
        return upper
    # Greek letters with iota subscript map to a single titlecase letter
    title = ch.title()
    return title if len(title) == 1 else ch


def has_case(ch: str) -> bool:
    """True if upper- and lowercasing ch give different results."""
    return to_lower(ch) != to_upper(ch)


def is_lower(ch: str) -> bool:
    return ch == to_lower(ch) and has_case(ch)


def is_upper(ch: str) -> bool:
    return ch == to_upper(ch) and has_case(ch)
