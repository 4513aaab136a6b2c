"""Decoder for message text stored in the legacy offset encoding.

Message bodies in result and inbox files store every character with an offset
of 13. After removing the offset, CR ends a line, LF is an extra line break
that some clients insert when they re-wrap long lines, and NUL marks garbage
that extends up to the next line break.
"""

import logging
from enum import Enum

from ..utils.constants import (
    MESSAGE_ALT_LINE_BREAK,
    MESSAGE_CHAR_OFFSET,
    MESSAGE_LINE_BREAK,
    MESSAGE_RESYNC,
    MESSAGE_TRAILING_TRIM,
)
from .charset import Charset

logger = logging.getLogger(__name__)

_RAW_ALT_LINE_BREAK = MESSAGE_ALT_LINE_BREAK + MESSAGE_CHAR_OFFSET


class RewrapMode(Enum):
    """Line break handling while decoding a message.

    NONE: CR breaks lines, LF is ignored.
    BEFORE: as NONE, until the blank line ending the message header.
    INSIDE: message body of a re-wrapped message; LF breaks lines, CR is
        ignored because it only marks the original fixed-width wrap points.
    """

    NONE = "none"
    BEFORE = "before"
    INSIDE = "inside"


def decode_message(data: bytes, charset: Charset, rewrap: bool) -> str:
    """Decode a message body.

    Args:
        data: Raw message bytes
        charset: Charset of the message text
        rewrap: True to repair messages whose line breaks were re-wrapped
            by a legacy client (only applies if the message contains LF)

    Returns:
        Decoded message text with "\\n" line breaks and no trailing blanks
    """
    if rewrap and _RAW_ALT_LINE_BREAK in data:
        mode = RewrapMode.BEFORE
        logger.debug("Message contains re-wrapped line breaks")
    else:
        mode = RewrapMode.NONE

    end = len(data)
    while end > 0 and data[end - 1] in MESSAGE_TRAILING_TRIM:
        end -= 1

    text = bytearray()
    skipping = False
    for raw in data[:end]:
        char = (raw - MESSAGE_CHAR_OFFSET) & 0xFF
        if char == MESSAGE_LINE_BREAK:
            if mode is not RewrapMode.INSIDE:
                text += b"\n"
                if mode is RewrapMode.BEFORE and text.endswith(b"\n\n"):
                    mode = RewrapMode.INSIDE
            skipping = False
        elif char == MESSAGE_ALT_LINE_BREAK:
            if mode is RewrapMode.INSIDE:
                text += b"\n"
            skipping = False
        elif char == MESSAGE_RESYNC:
            skipping = True
        elif not skipping:
            text.append(char)

    return charset.decode(bytes(text))
