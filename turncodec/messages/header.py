"""Repair of misplaced message header lines."""

from typing import List, Tuple

from ..utils.constants import HEADER_MIN_LENGTH, HEADER_TWEAK_PREFIXES


def _next_line(text: str, pos: int) -> Tuple[str, int]:
    """Return the line starting at pos (including its newline) and the next position."""
    end = text.find("\n", pos)
    if end < 0:
        return text[pos:], len(text)
    return text[pos : end + 1], end + 1


def _is_tweak_line(line: str) -> bool:
    return line.startswith(HEADER_TWEAK_PREFIXES)


def _tweak_line(line: str) -> str:
    if line.startswith("<CC: "):
        return line[1:]
    return line


def normalize_header(text: str) -> str:
    """Move a carbon-copy or universal-message line into the message header.

    Player messages start with a three-line header (title, FROM, TO). Hosts
    write the recipient list ("<CC: ...") or the universal message banner
    after the blank line that separates header and body; this puts it back
    into the header. Other messages are returned unchanged.

    Args:
        text: Decoded message text

    Returns:
        Message text with header lines in order
    """
    if len(text) <= HEADER_MIN_LENGTH or text[0] != "(" or text[2] != "r":
        return text

    result: List[str] = []
    pos = 0
    for _ in range(3):
        line, pos = _next_line(text, pos)
        result.append(line)

    line, pos = _next_line(text, pos)
    if line == "\n":
        following, pos = _next_line(text, pos)
        if _is_tweak_line(following):
            result += [_tweak_line(following), line]
        else:
            result += [line, following]
    else:
        result.append(_tweak_line(line) if _is_tweak_line(line) else line)

    result.append(text[pos:])
    return "".join(result)
