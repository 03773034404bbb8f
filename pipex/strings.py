"""String searching, comparison and bounded copying.

Positions are returned as indices into the string, or ``None`` when
nothing is found.
"""

from __future__ import annotations

from typing import Optional, Tuple, Union

CharLike = Union[str, int]


def _char(c: CharLike) -> str:
    """Return ``c`` as a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")
    return chr(c)


def _require_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def find_char(s: Optional[str], c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``s``.

    Searching for the NUL character finds the end of the string.
    ``None`` is returned when ``c`` is absent or ``s`` is ``None``.
    """
    if s is None:
        return None
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return index if index >= 0 else None


def rfind_char(s: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``s``; NUL finds the end of the string."""
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return index if index >= 0 else None


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the character codes at the first mismatch,
    the end of a string counting as code 0, or 0 when they agree.
    """
    _require_non_negative("n", n)
    for a, b in zip(s1[:n] + "\0", s2[:n] + "\0"):
        if a != b:
            return ord(a) - ord(b)
        if a == "\0":
            break
    return 0


def strnstr(haystack: Optional[str], needle: Optional[str], length: int) -> Optional[int]:
    """Index of ``needle`` in the first ``length`` characters of ``haystack``.

    An empty needle is found at 0.  ``None`` is returned when the needle
    does not fit entirely within the searched range or either string is
    ``None``.
    """
    if haystack is None or needle is None:
        return None
    _require_non_negative("length", length)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return index if index >= 0 else None


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the text that fits and the length of ``src``, which exceeds
    the copied length exactly when the copy was truncated.
    """
    _require_non_negative("size", size)
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have
    had.  When ``size`` does not exceed the length of ``dst``, ``dst`` is
    left unchanged and the returned length is ``size + len(src)``.
    """
    _require_non_negative("size", size)
    if size <= len(dst):
        return dst, size + len(src)
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def substr(s: Optional[str], start: int, length: int) -> Optional[str]:
    """At most ``length`` characters of ``s`` beginning at ``start``.

    A start past the end gives an empty string; ``None`` gives ``None``.
    """
    if s is None:
        return None
    _require_non_negative("start", start)
    _require_non_negative("length", length)
    if start >= len(s):
        return ""
    return s[start : start + length]


def strjoin(s1: Optional[str], s2: Optional[str]) -> str:
    """Concatenate two strings, treating ``None`` as empty."""
    return (s1 or "") + (s2 or "")