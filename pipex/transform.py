"""Whole-string transformations: trimming, splitting and per-character mapping."""

from __future__ import annotations

from typing import Callable, List, Optional


def _separator(sep: str) -> str:
    if not isinstance(sep, str):
        raise TypeError(f"expected a single character, got {type(sep).__name__}")
    if len(sep) != 1:
        raise ValueError(f"expected a single character, got {sep!r}")
    return sep


def strtrim(s: Optional[str], charset: Optional[str]) -> Optional[str]:
    """Remove every leading and trailing character of ``s`` found in ``charset``.

    Returns ``None`` when either argument is ``None``.  An empty
    ``charset`` leaves ``s`` unchanged.
    """
    if s is None or charset is None:
        return None
    if not charset:
        return s
    return s.strip(charset)


def split(s: Optional[str], sep: str) -> Optional[List[str]]:
    """Split ``s`` on the character ``sep``, dropping empty words.

    Runs of separators, and separators at either end, produce no empty
    entries.  Returns ``None`` when ``s`` is ``None``.
    """
    ch = _separator(sep)
    if s is None:
        return None
    return [word for word in s.split(ch) if word]


def strmapi(
    s: Optional[str], func: Optional[Callable[[int, str], str]]
) -> Optional[str]:
    """Build a new string from ``func(index, char)`` applied to each character.

    Returns ``None`` when either argument is ``None``.
    """
    if s is None or func is None:
        return None
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(
    s: Optional[str], func: Optional[Callable[[int, str], Optional[str]]]
) -> Optional[str]:
    """Call ``func(index, char)`` on each character of ``s`` in order.

    A non-``None`` return value replaces that character; ``None`` keeps
    it.  Returns the resulting string, or ``None`` when either argument
    is ``None``.
    """
    if s is None or func is None:
        return None
    result = []
    for index, ch in enumerate(s):
        replacement = func(index, ch)
        result.append(ch if replacement is None else replacement)
    return "".join(result)