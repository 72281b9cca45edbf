"""Whitespace and comma separated tokenizer for VRML-like text formats."""

from __future__ import annotations

import io
import math
import re
import struct
from typing import IO, Iterator, Optional, Union

__all__ = ["TokenError", "Tokenizer"]

_DELIMITERS = frozenset(" \t\n,\r")

_TRUE_WORDS = frozenset({"t", "true", "T", "TRUE"})
_FALSE_WORDS = frozenset({"f", "false", "F", "FALSE"})

_INT_RE = re.compile(r"\s*([+-]?\d+)")
_HEX_FLOAT_RE = re.compile(
    r"\s*([+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?\d+)?)"
)
_FLOAT_RE = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)

_UINT_MODULUS = 1 << 32


class TokenError(ValueError):
    """Raised when the input does not hold the token that was required."""


def _to_float32(value: float) -> float:
    """Round a Python float to single precision, as a C float would hold it."""
    if math.isnan(value) or math.isinf(value):
        return value
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _parse_int(text: str) -> Optional[int]:
    match = _INT_RE.match(text)
    return int(match.group(1)) if match else None


def _parse_float(text: str) -> Optional[float]:
    match = _HEX_FLOAT_RE.match(text)
    if match:
        literal = match.group(1)
        if "p" not in literal.lower():
            literal += "p0"
        return _to_float32(float.fromhex(literal))
    match = _FLOAT_RE.match(text)
    if match:
        return _to_float32(float(match.group(1)))
    return None


class Tokenizer:
    """Reads tokens one at a time from a string or a text stream.

    Tokens are separated by spaces, tabs, newlines, carriage returns and
    commas.  A token starting with ``#`` extends to the end of its line and
    is a comment; comments are skipped unless ``skip_comments`` is false.
    The most recently read token is available as :attr:`token`.
    """

    def __init__(self, source: Union[str, IO[str]], skip_comments: bool = True):
        if isinstance(source, str):
            source = io.StringIO(source)
        self._stream = source
        self.skip_comments = skip_comments
        self.token = ""

    def _getc(self) -> str:
        return self._stream.read(1)

    def __iter__(self) -> Iterator[str]:
        while (token := self.get()) is not None:
            yield token

    def _read_token(self) -> str:
        chars = []
        c = self._getc()
        while c and c in _DELIMITERS:
            c = self._getc()
        if c:
            chars.append(c)
        c = self._getc()
        while c and c not in _DELIMITERS:
            chars.append(c)
            c = self._getc()
        if chars and chars[0] == "#":
            if c and c != "\n":
                chars.append(c)
            c = self._getc()
            while c and c != "\n":
                chars.append(c)
                c = self._getc()
        return "".join(chars)

    def get(self) -> Optional[str]:
        """Read the next token; return it, or None at the end of the input."""
        while True:
            self.token = self._read_token()
            if not (self.skip_comments and self.token.startswith("#")):
                break
        return self.token or None

    def require(self, message: str) -> str:
        """Read the next token, raising TokenError with ``message`` at the end."""
        token = self.get()
        if token is None:
            raise TokenError(message)
        return token

    def getline(self) -> Optional[str]:
        """Read the rest of the current line; return it, or None if empty."""
        chars = []
        c = self._getc()
        while c and c != "\n":
            chars.append(c)
            c = self._getc()
        self.token = "".join(chars)
        return self.token or None

    def nextline(self) -> None:
        """Discard everything up to and including the next newline."""
        c = self._getc()
        while c and c != "\n":
            c = self._getc()

    def get_bool(self) -> bool:
        """Read a boolean token: t, true, T, TRUE, f, false, F or FALSE."""
        token = self.get()
        if token in _TRUE_WORDS:
            return True
        if token in _FALSE_WORDS:
            return False
        raise TokenError("expecting boolean value")

    def get_int(self) -> int:
        """Read a token and parse the signed integer it starts with."""
        token = self.get()
        value = _parse_int(token) if token is not None else None
        if value is None:
            raise TokenError("expecting int value")
        return value

    def get_uint(self) -> int:
        """Read a token and parse it as a 32-bit unsigned integer."""
        token = self.get()
        value = _parse_int(token) if token is not None else None
        if value is None:
            raise TokenError("expecting unsigned int value")
        return value % _UINT_MODULUS

    def get_float(self) -> float:
        """Read a token and parse the single precision float it starts with."""
        token = self.get()
        value = _parse_float(token) if token is not None else None
        if value is None:
            raise TokenError("expecting float value")
        return value

    def _get_floats(self, count: int, what: str) -> tuple:
        try:
            return tuple(self.get_float() for _ in range(count))
        except TokenError:
            raise TokenError(f"expecting {what}") from None

    def get_color(self) -> tuple:
        """Read three floats as an (r, g, b) color."""
        return self._get_floats(3, "Color")

    def get_vec2f(self) -> tuple:
        """Read two floats."""
        return self._get_floats(2, "Vec2f")

    def get_vec3f(self) -> tuple:
        """Read three floats."""
        return self._get_floats(3, "Vec3f")

    def get_vec4f(self) -> tuple:
        """Read four floats."""
        return self._get_floats(4, "Vec4f")

    def equals(self, text: str) -> bool:
        """Tell whether the current token is exactly ``text``."""
        return self.token == text

    def expecting(self, text: str) -> bool:
        """Read the next token and tell whether it is exactly ``text``."""
        return self.get() is not None and self.equals(text)