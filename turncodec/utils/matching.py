"""Abbreviation-tolerant keyword matching."""


def string_match(pattern: str, candidate: str) -> bool:
    """Check whether a typed word is an acceptable abbreviation of a keyword.

    The pattern spells the keyword with its mandatory part in upper case and
    the optional remainder in lower case, e.g. "ENglish". The candidate
    matches if it is a prefix of the whole keyword, compared without regard
    to case, and covers at least the mandatory part.

    Args:
        pattern: Keyword with mandatory prefix in upper case
        candidate: Word typed by the user

    Returns:
        True if candidate abbreviates pattern

    Examples:
        >>> string_match("ENglish", "eng")
        True
        >>> string_match("ENglish", "e")
        False
    """
    mandatory = 0
    while mandatory < len(pattern) and not pattern[mandatory].islower():
        mandatory += 1

    if not mandatory <= len(candidate) <= len(pattern):
        return False
    return pattern[: len(candidate)].lower() == candidate.lower()
