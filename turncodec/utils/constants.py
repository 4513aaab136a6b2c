"""Legacy wire and file format constants."""

# Command text
MAX_COMMAND_LENGTH = 40  # Older hosts reject longer command lines

# Message encoding (values after removing the character offset)
MESSAGE_CHAR_OFFSET = 13  # Added to every character on disk
MESSAGE_LINE_BREAK = 13  # CR, primary line break
MESSAGE_ALT_LINE_BREAK = 10  # LF, inserted by some legacy clients
MESSAGE_RESYNC = 0  # NUL, garbage follows until the next line break

# Raw bytes stripped from the end of a message body (space, CR, LF)
MESSAGE_TRAILING_TRIM = frozenset(
    {
        32 + MESSAGE_CHAR_OFFSET,
        MESSAGE_LINE_BREAK + MESSAGE_CHAR_OFFSET,
        MESSAGE_ALT_LINE_BREAK + MESSAGE_CHAR_OFFSET,
    }
)

# Message headers
HEADER_MIN_LENGTH = 10
HEADER_TWEAK_PREFIXES = ("<CC: ", "CC: ", "  <<< Universal Message >>>")

# Charset
DEFAULT_CHARSET = "cp437"
