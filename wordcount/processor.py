import re
from dataclasses import dataclass
from typing import Optional

# Space, tab, newline, carriage return, form feed, vertical tab.
_WORD_RE = re.compile(r"[^ \t\n\r\f\v]+")


@dataclass(frozen=True)
class CountSet:
    lines: int = 0
    words: int = 0
    chars: int = 0
    bytes: int = 0

    def __add__(self, other: "CountSet") -> "CountSet":
        return CountSet(
            lines=self.lines + other.lines,
            words=self.words + other.words,
            chars=self.chars + other.chars,
            bytes=self.bytes + other.bytes,
        )

    def values(self) -> tuple[int, int, int, int]:
        return (self.lines, self.words, self.chars, self.bytes)


def count_words(text: str) -> int:
    """
    Count the number of words in the given text.
    Words are runs of characters that are not ASCII whitespace.
    """
    return len(_WORD_RE.findall(text))


def count_lines(text: str) -> int:
    """
    Count the number of lines in the given text.
    A line ends with "\\n" or "\\r\\n"; the final line ending is optional,
    so "a\\nb\\n" and "a\\nb" both have two lines.
    """
    if not text:
        return 0
    return text.count("\n") + (0 if text.endswith("\n") else 1)


def count_characters(text: str) -> int:
    """
    Count the number of characters (Unicode code points) in the given text.
    This mirrors the behavior of the Unix `wc -m` option.
    """
    return len(text)


def count_bytes(text: str, encoding: str = "utf-8") -> int:
    """
    Count the bytes backing the text once encoded, like `wc -c`.
    """
    return len(text.encode(encoding))


def summarize_text(text: str, size: Optional[int] = None) -> CountSet:
    """
    Count `text`. `size` is the raw byte length the text was decoded from;
    without it the UTF-8 length of the text is used.
    """
    return CountSet(
        lines=count_lines(text),
        words=count_words(text),
        chars=count_characters(text),
        bytes=count_bytes(text) if size is None else size,
    )


__all__ = [
    "CountSet",
    "count_words",
    "count_lines",
    "count_characters",
    "count_bytes",
    "summarize_text",
]
