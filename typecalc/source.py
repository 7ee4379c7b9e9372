"""Source reader.

Exposes the program text one character at a time with room for a single
character of pushback, which the lexer uses to find where an identifier or
number ends.


File: source.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from typecalc.exceptions import SourceUnavailableException


class SourceReader:
    """
    Character stream over source text.
    """
    def __init__(self, text: str, name: str = "<string>"):
        self.text = text
        self.name = name
        self.position = 0
        self._pushed: str | None = None

    @classmethod
    def from_path(cls, path) -> "SourceReader":
        """
        Open a source file and return a reader over its contents.

        Raises:
            SourceUnavailableException: If the file cannot be opened or decoded.
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise SourceUnavailableException(str(path), e) from e
        return cls(text, str(path))

    def read(self) -> str:
        """
        Return the next character, or an empty string once input is exhausted.
        """
        if self._pushed is not None:
            ch, self._pushed = self._pushed, None
            return ch
        if self.position >= len(self.text):
            return ""
        ch = self.text[self.position]
        self.position += 1
        return ch

    def unread(self, ch: str) -> None:
        """
        Push back one character so the next read returns it again.

        Raises:
            RuntimeError: If a character is already pushed back.
        """
        if not ch:
            return
        if self._pushed is not None:
            raise RuntimeError("Only one character of pushback is supported")
        self._pushed = ch
