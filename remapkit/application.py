"""Matching of application and window names."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .keys import ConfigError

__all__ = [
    "ApplicationMatcher",
    "MatcherKind",
    "OnlyOrNot",
    "parse_application_matcher",
    "slash_unescape",
    "string_or_list",
    "parse_only_or_not",
]


class MatcherKind(Enum):
    LITERAL = "literal"  # class.name
    NAME = "name"  # name only
    REGEX = "regex"  # /regex/


@dataclass(frozen=True)
class ApplicationMatcher:
    kind: MatcherKind
    pattern: str

    def matches(self, app: str) -> bool:
        if self.kind is MatcherKind.LITERAL:
            return self.pattern == app
        if self.kind is MatcherKind.NAME:
            return self.pattern == app.rpartition(".")[2]
        return re.search(self.pattern, app) is not None


def slash_unescape(text: str) -> str:
    """Turn ``/regex/`` into a regex, unescaping ``\\/`` to ``/``."""
    result: list[str] = []
    escaping = False
    finished = False
    for char in text[1:]:
        if finished:
            raise ConfigError("Unexpected trailing string after closing / in application name regex")
        if escaping:
            escaping = False
            if char != "/":
                result.append("\\")
            result.append(char)
        elif char == "/":
            finished = True
        elif char == "\\":
            escaping = True
        else:
            result.append(char)
    if not finished:
        raise ConfigError("Missing closing / in application name regex")
    return "".join(result)


def parse_application_matcher(text: str) -> ApplicationMatcher:
    if text.startswith("/"):
        pattern = slash_unescape(text)
        try:
            re.compile(pattern)
        except re.error as exc:
            raise ConfigError(f"invalid regex {pattern!r}: {exc}") from exc
        return ApplicationMatcher(MatcherKind.REGEX, pattern)
    kind = MatcherKind.LITERAL if "." in text else MatcherKind.NAME
    return ApplicationMatcher(kind, text)


def string_or_list(value: Any) -> list[str] | None:
    """Accept a string or a list of strings; ``None`` means absent."""
    if value is None:
        return None
    if isinstance(value, str):
        return [value]
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return list(value)
    raise ConfigError(f"expected a string or a list of strings, got {value!r}")


@dataclass(frozen=True)
class OnlyOrNot:
    only: tuple[ApplicationMatcher, ...] | None = None
    not_: tuple[ApplicationMatcher, ...] | None = None


def _matchers(value: Any) -> tuple[ApplicationMatcher, ...] | None:
    strings = string_or_list(value)
    return None if strings is None else tuple(parse_application_matcher(s) for s in strings)


def parse_only_or_not(value: Any) -> OnlyOrNot:
    if not isinstance(value, dict):
        raise ConfigError(f"expected a mapping with 'only' or 'not', got {value!r}")
    unknown = set(value) - {"only", "not"}
    if unknown:
        raise ConfigError(f"unknown field(s): {', '.join(sorted(map(str, unknown)))}")
    return OnlyOrNot(_matchers(value.get("only")), _matchers(value.get("not")))