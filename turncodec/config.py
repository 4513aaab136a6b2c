"""Runtime settings for message decoding."""

import codecs
import os

from pydantic import BaseModel, Field, field_validator

from .utils.constants import DEFAULT_CHARSET

_ENV_PREFIX = "TURNCODEC_"


class CodecSettings(BaseModel):
    """Settings used when loading messages from game files."""

    charset: str = Field(
        default=DEFAULT_CHARSET, description="Codec of message text, e.g. 'cp437'"
    )
    rewrap: bool = Field(
        default=True, description="Repair messages re-wrapped by legacy clients"
    )
    normalize_headers: bool = Field(
        default=True, description="Move CC and universal message lines into the header"
    )

    @field_validator("charset")
    @classmethod
    def known_charset(cls, v: str) -> str:
        """Reject codec names Python does not know."""
        try:
            codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"Unknown charset: {v!r}") from e
        return v

    @classmethod
    def from_env(cls) -> "CodecSettings":
        """Create settings from TURNCODEC_* environment variables.

        Unset variables keep their defaults.
        """
        values = {}
        for name in cls.model_fields:
            value = os.getenv(_ENV_PREFIX + name.upper())
            if value is not None:
                values[name] = value
        return cls(**values)
