"""Reader for message inbox files.

An inbox file holds the messages a player received with a turn result:

    int16   number of messages
    per message:
      int32   file position of message body (1-based)
      int16   size of message body
    message bodies, offset-encoded (see decoder)

All integers are little-endian.
"""

import logging
import struct
from dataclasses import dataclass
from enum import Enum
from typing import BinaryIO, List, Optional

from ..config import CodecSettings
from .charset import Charset, CodepageCharset
from .decoder import decode_message
from .header import normalize_header

logger = logging.getLogger(__name__)

_COUNT = struct.Struct("<h")
_ENTRY = struct.Struct("<ih")


class InboxErrorType(Enum):
    """Classification of inbox file errors."""

    BAD_HEADER = "bad_header"
    TRUNCATED = "truncated"


class InboxFileError(Exception):
    """Raised when an inbox file is malformed."""

    def __init__(self, error_type: InboxErrorType, message: str):
        """Initialize inbox error.

        Args:
            error_type: Classification of the error
            message: Human-readable error message
        """
        self.error_type = error_type
        self.message = message
        super().__init__(message)


@dataclass(frozen=True)
class MessageEntry:
    """Directory entry of one message."""

    position: int  # 1-based file position
    size: int


class InboxFile:
    """Message inbox file.

    The directory is read on construction; message bodies are read from the
    stream on demand, so the stream must stay open while messages are loaded.
    """

    def __init__(
        self,
        stream: BinaryIO,
        charset: Optional[Charset] = None,
        settings: Optional[CodecSettings] = None,
    ):
        """Initialize inbox by reading the message directory.

        Args:
            stream: Seekable binary stream positioned at the file start
            charset: Charset of message text (default: from settings)
            settings: Decoding settings (default: CodecSettings())

        Raises:
            InboxFileError: If the directory is malformed
        """
        self.stream = stream
        self.settings = settings or CodecSettings()
        self.charset = charset or CodepageCharset(self.settings.charset)
        self.entries = self._read_directory()

    @property
    def num_messages(self) -> int:
        """Number of messages in the file."""
        return len(self.entries)

    def load_message(self, index: int) -> str:
        """Load and decode a message.

        Args:
            index: 0-based message index

        Returns:
            Message text, or "" if index is out of range

        Raises:
            InboxFileError: If the message body is truncated
        """
        if not 0 <= index < len(self.entries):
            return ""

        entry = self.entries[index]
        self.stream.seek(entry.position - 1)
        data = self.stream.read(entry.size)
        if len(data) != entry.size:
            self._fail(
                InboxErrorType.TRUNCATED,
                f"Message {index + 1} truncated: expected {entry.size} bytes, got {len(data)}",
            )

        text = decode_message(data, self.charset, self.settings.rewrap)
        if self.settings.normalize_headers:
            text = normalize_header(text)
        return text

    def load_all(self) -> List[str]:
        """Load all messages in file order."""
        return [self.load_message(i) for i in range(self.num_messages)]

    def _read_directory(self) -> List[MessageEntry]:
        header = self.stream.read(_COUNT.size)
        if len(header) != _COUNT.size:
            self._fail(InboxErrorType.BAD_HEADER, "Inbox file is missing its header")
        (count,) = _COUNT.unpack(header)
        if count < 0:
            self._fail(InboxErrorType.BAD_HEADER, f"Invalid message count: {count}")

        entries = []
        for i in range(count):
            raw = self.stream.read(_ENTRY.size)
            if len(raw) != _ENTRY.size:
                self._fail(
                    InboxErrorType.BAD_HEADER,
                    f"Message directory truncated at entry {i + 1} of {count}",
                )
            position, size = _ENTRY.unpack(raw)
            if position < 1 or size < 0:
                self._fail(
                    InboxErrorType.BAD_HEADER,
                    f"Invalid directory entry {i + 1}: position {position}, size {size}",
                )
            entries.append(MessageEntry(position=position, size=size))

        logger.debug(f"Inbox directory lists {count} messages")
        return entries

    def _fail(self, error_type: InboxErrorType, message: str):
        logger.warning(message)
        raise InboxFileError(error_type, message)
