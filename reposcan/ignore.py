"""Glob-based ignore rules for directory scanning."""

from __future__ import annotations

import os
import re
from functools import lru_cache


def _to_slash(path: str) -> str:
    return path.replace(os.sep, "/") if os.sep != "/" else path


def _class_regex(segment: str, start: int) -> tuple[str, int]:
    """Translate a bracket expression starting at segment[start] == '['."""
    j = start + 1
    negate = j < len(segment) and segment[j] in "!^"
    if negate:
        j += 1
    close = segment.find("]", j + 1 if j < len(segment) and segment[j] == "]" else j)
    if close == -1 or close == j:
        raise ValueError(f"syntax error in pattern: unterminated character class in {segment!r}")
    body = "".join("-" if ch == "-" else re.escape(ch) for ch in segment[j:close])
    regex = f"[^/{body}]" if negate else f"[{body}]"
    return regex, close + 1


def _brace_regex(segment: str, start: int) -> tuple[str, int]:
    """Translate a brace alternation starting at segment[start] == '{'."""
    depth = 0
    alternatives: list[str] = []
    piece_start = start + 1
    for pos in range(start, len(segment)):
        ch = segment[pos]
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                alternatives.append(segment[piece_start:pos])
                inner = "|".join(_segment_regex(alt) for alt in alternatives)
                return f"(?:{inner})", pos + 1
        elif ch == "," and depth == 1:
            alternatives.append(segment[piece_start:pos])
            piece_start = pos + 1
    raise ValueError(f"syntax error in pattern: unterminated brace in {segment!r}")


def _segment_regex(segment: str) -> str:
    """Translate one path segment of a glob into a regular expression."""
    out: list[str] = []
    i = 0
    while i < len(segment):
        ch = segment[i]
        if ch == "\\":
            if i + 1 >= len(segment):
                raise ValueError("syntax error in pattern: trailing escape")
            out.append(re.escape(segment[i + 1]))
            i += 2
        elif ch == "*":
            while i < len(segment) and segment[i] == "*":
                i += 1
            out.append("[^/]*")
        elif ch == "?":
            out.append("[^/]")
            i += 1
        elif ch == "[":
            regex, i = _class_regex(segment, i)
            out.append(regex)
        elif ch == "{":
            regex, i = _brace_regex(segment, i)
            out.append(regex)
        else:
            out.append(re.escape(ch))
            i += 1
    return "".join(out)


@lru_cache(maxsize=512)
def _compile(pattern: str) -> re.Pattern[str]:
    segments = pattern.split("/")
    last = len(segments) - 1
    out: list[str] = []
    skip_separator = False
    for index, segment in enumerate(segments):
        if segment == "**":
            if index == 0:
                out.append(".*" if last == 0 else "(?:.*/)?")
                skip_separator = True
            else:
                out.append("(?:/.*)?")
                skip_separator = False
            continue
        if index > 0 and not skip_separator:
            out.append("/")
        out.append(_segment_regex(segment))
        skip_separator = False
    return re.compile("".join(out), re.DOTALL)


def path_match(pattern: str, name: str) -> bool:
    """Match a slash-separated path against a glob supporting '**', '*', '?', [] and {}.

    Raises ValueError for a malformed pattern.
    """
    return _compile(pattern).fullmatch(name) is not None


class IgnoreMatcher:
    """Normalized ignore patterns together with the scan roots they anchor to."""

    def __init__(self, roots: list[str], raw: list[str]) -> None:
        self.roots: tuple[str, ...] = tuple(_to_slash(r) for r in roots)
        patterns: list[str] = []
        for item in raw:
            pattern = item.strip()
            if not pattern or pattern.startswith("#"):
                continue
            pattern = _to_slash(pattern)

            # A bare name matches a directory of that name anywhere.
            if "/" not in pattern and not any(c in pattern for c in "*?["):
                pattern = f"**/{pattern}/**"

            if pattern.endswith("/") and not pattern.endswith("/**"):
                pattern += "**"

            # Also match the directory itself, not only its contents.
            if pattern.endswith("/**"):
                patterns.append(pattern.removesuffix("/**"))

            patterns.append(pattern)
        self.patterns: tuple[str, ...] = tuple(patterns)

    @staticmethod
    def _matches(pattern: str, path: str) -> bool:
        try:
            return path_match(pattern, path)
        except ValueError:
            return False

    def should_ignore(self, abs_path: str) -> bool:
        """Whether abs_path matches any pattern; leading-'/' patterns are anchored to each root."""
        if not self.patterns:
            return False
        path = _to_slash(str(abs_path))
        for pattern in self.patterns:
            if pattern.startswith("/"):
                if any(self._matches(root + pattern, path) for root in self.roots):
                    return True
            elif self._matches(pattern, path):
                return True
        return False