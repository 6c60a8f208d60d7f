"""Glob patterns for file identity matching.

Glob-like patterns for matching slash-separated file identities.

Syntax:
    *       any characters within one segment (no slashes)
    **      any number of whole segments, including zero
    ?       one character except a slash (extended only)
    [abc]   character class, [!abc] negated (extended only)
    {a,b}   alternation (extended only)

Layer patterns are compiled with an implicit leading ``**/`` and match a
directory as well as everything below it:
    domain/*     matches domain/a, src/domain/a and domain/a/b
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# Globstar segment: zero or more "name/" groups, or a trailing name
_GLOBSTAR = r"(?:[^/]*(?:/|$))*"
_SEGMENT = r"[^/]*"


@dataclass(frozen=True, slots=True)
class CompiledPattern:
    """Compiled file identity pattern.

    Immutable value object containing original pattern and compiled regex.

    Attributes:
        original: Original pattern string
        regex: Compiled regex for matching
    """

    original: str
    regex: re.Pattern[str]

    def match(self, identity: str) -> bool:
        """Check if identity matches pattern.

        Backslash separators are normalised to slashes first.

        Args:
            identity: File identity to match

        Returns:
            True if identity matches pattern

        Raises:
            TypeError: If identity is None
        """
        if identity is None:
            raise TypeError("identity must not be None")
        return self.regex.search(identity.replace("\\", "/")) is not None

    def __str__(self) -> str:
        """Return original pattern string."""
        return self.original

    def __repr__(self) -> str:
        """Return repr with original pattern."""
        return f"CompiledPattern({self.original!r})"


def _class_end(pattern: str, start: int) -> int:
    """Index of the ``]`` closing the class opened at start, or -1."""
    i = start + 1
    if i < len(pattern) and pattern[i] in "!^":
        i += 1
    if i < len(pattern) and pattern[i] == "]":
        i += 1
    return pattern.find("]", i)


def _translate(pattern: str, *, extended: bool) -> str:
    """Translate glob syntax to a regex body (no anchors)."""
    out: list[str] = []
    depth = 0
    i = 0
    n = len(pattern)

    while i < n:
        c = pattern[i]

        if c == "*":
            j = i
            while j < n and pattern[j] == "*":
                j += 1
            prev = pattern[i - 1] if i > 0 else "/"
            nxt = pattern[j] if j < n else "/"
            if j - i >= 2 and prev == "/" and nxt == "/":
                out.append(_GLOBSTAR)
                if j < n:
                    j += 1  # globstar swallows its trailing slash
            else:
                out.append(_SEGMENT)
            i = j
            continue

        if extended and c == "?":
            out.append("[^/]")
        elif extended and c == "[":
            end = _class_end(pattern, i)
            if end == -1:
                out.append(re.escape(c))
            else:
                body = pattern[i + 1 : end]
                if body[:1] in ("!", "^"):
                    body = "^" + body[1:]
                out.append("[" + body.replace("\\", "\\\\") + "]")
                i = end + 1
                continue
        elif extended and c == "{":
            depth += 1
            out.append("(?:")
        elif extended and c == "}" and depth:
            depth -= 1
            out.append(")")
        elif extended and c == "," and depth:
            out.append("|")
        else:
            out.append(re.escape(c))
        i += 1

    if depth:
        raise ValueError(f"unbalanced '{{' in pattern '{pattern}'")

    return "".join(out)


def compile_pattern(
    pattern: str,
    *,
    extended: bool = True,
    anchored: bool = True,
    any_prefix: bool = False,
    covers_children: bool = False,
) -> CompiledPattern:
    """Compile glob pattern to regex.

    FAIL-FIRST: raises ValueError for invalid patterns.

    Args:
        pattern: Glob pattern string
        extended: Enable ``?``, ``[...]`` and ``{a,b}``
        anchored: Match the whole identity (False = search anywhere)
        any_prefix: Evaluate as if prefixed with ``**/``
        covers_children: Matching a directory also matches its contents

    Returns:
        CompiledPattern with original and compiled regex

    Raises:
        ValueError: If pattern is empty or malformed
    """
    if not pattern:
        raise ValueError("pattern must not be empty")

    source = f"**/{pattern}" if any_prefix else pattern
    body = _translate(source, extended=extended)

    if covers_children:
        body += r"(?:/.*)?"
    if anchored:
        body = f"^{body}$"

    try:
        regex = re.compile(body)
    except re.error as e:
        raise ValueError(f"invalid pattern '{pattern}': {e}") from e

    return CompiledPattern(original=pattern, regex=regex)


def compile_layer_pattern(pattern: str) -> CompiledPattern:
    """Compile a layer ``files``/``exports`` pattern.

    Implicit leading ``**/``, extended syntax, directory matches cover children.
    """
    return compile_pattern(pattern, any_prefix=True, covers_children=True)


def compile_exclude_pattern(pattern: str) -> CompiledPattern:
    """Compile an ``exclude`` pattern.

    Plain globstar syntax, found anywhere in the identity.
    """
    return compile_pattern(pattern, extended=False, anchored=False)


def matches_any(identity: str, patterns: tuple[CompiledPattern, ...]) -> bool:
    """Check if identity matches any of the patterns.

    Args:
        identity: File identity to match
        patterns: Compiled patterns to check

    Returns:
        True if identity matches at least one pattern
    """
    return any(p.match(identity) for p in patterns)
