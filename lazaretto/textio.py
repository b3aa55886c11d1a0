"""Reading scene files and the small text helpers the parser relies on."""

from __future__ import annotations

import os

from .config import MapError

_CUB_EXTENSION = "cub"


def read_text(path: str | os.PathLike[str]) -> str:
    """Return the whole content of ``path``.

    Raises MapError when the file cannot be opened or holds nothing.
    """
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            text = handle.read()
    except OSError as exc:
        raise MapError("invalid file") from exc
    if not text:
        raise MapError("Empty file :)")
    return text


def split_words(text: str, sep: str) -> list[str]:
    """Split on ``sep``, dropping empty pieces."""
    return [word for word in text.split(sep) if word]


def count_words(text: str | None, sep: str) -> int:
    """Count the non-empty pieces of ``text`` separated by ``sep``."""
    if not text:
        return 0
    return len(split_words(text, sep))


def is_space(ch: str) -> bool:
    """True for a space or one of the control whitespace characters \\t to \\r."""
    return ch == " " or "\t" <= ch <= "\r"


def has_cub_extension(path: str) -> bool:
    """True when the text after the last dot of ``path`` is exactly 'cub'."""
    dot = path.rfind(".")
    if dot < 0:
        return False
    return path[dot + 1:] == _CUB_EXTENSION