"""Filter normalization.

A filter decides, per entry, whether the entry is included in the result
and how traversal continues.  Callers may pass a quick filter (a bool, a
substring, a compiled regex) or a predicate returning either a truthy
value or a full :class:`FilterDecision`.  :func:`normalize_filter` turns
any of these into a single ``Entry -> FilterDecision`` function.
"""

from __future__ import annotations

import logging
import os
import re
import sys
from collections.abc import Callable, Mapping
from dataclasses import dataclass, replace
from typing import Any, Protocol, Union

from .entry import Entry

logger = logging.getLogger(__name__)

_CASE_INSENSITIVE = sys.platform == "win32"


@dataclass
class FilterDecision:
    """Outcome of applying a filter to one entry.

    ``recursive=None`` means "use the scan's default".  ``exit`` drops the
    remaining siblings at the current directory level; ``stop`` aborts the
    whole scan.
    """

    include: bool = False
    recursive: bool | None = None
    exit: bool = False
    stop: bool = False

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> FilterDecision:
        recursive = data.get("recursive")
        return cls(
            include=bool(data.get("include")),
            recursive=recursive if isinstance(recursive, bool) else None,
            exit=bool(data.get("exit")),
            stop=bool(data.get("stop")),
        )

    def resolve(self, default_recursive: bool) -> FilterDecision:
        """Return a copy with ``recursive`` filled in from the default."""
        if self.recursive is not None:
            return self
        return replace(self, recursive=default_recursive)


class _Searchable(Protocol):
    def search(self, string: str) -> Any: ...


@dataclass(frozen=True)
class BoolFilter:
    value: bool

    def __call__(self, entry: Entry) -> FilterDecision:
        return FilterDecision(include=self.value)


@dataclass(frozen=True)
class PatternFilter:
    """Include entries whose absolute path matches *pattern* anywhere."""

    pattern: _Searchable

    def __call__(self, entry: Entry) -> FilterDecision:
        return FilterDecision(include=self.pattern.search(entry.full_path) is not None)


@dataclass(frozen=True)
class SubstringFilter:
    """Include entries whose absolute path contains *text*.

    Both ``/`` and ``\\`` in *text* match the host separator.  Matching
    ignores case on case-insensitive platforms unless *case_sensitive*
    says otherwise.
    """

    text: str
    case_sensitive: bool | None = None

    def __call__(self, entry: Entry) -> FilterDecision:
        needle = re.sub(r"[/\\]", lambda _: os.sep, self.text)
        haystack = entry.full_path
        case_sensitive = (
            not _CASE_INSENSITIVE if self.case_sensitive is None else self.case_sensitive
        )
        if not case_sensitive:
            needle = needle.lower()
            haystack = haystack.lower()
        return FilterDecision(include=needle in haystack)


@dataclass(frozen=True)
class PredicateFilter:
    """Delegate the decision to *func*.

    A :class:`FilterDecision` or a mapping with ``include``/``recursive``/
    ``exit``/``stop`` keys is taken as a full decision; anything else is
    treated as a plain include flag.
    """

    func: Callable[[Entry], Any]

    def __call__(self, entry: Entry) -> FilterDecision:
        result = self.func(entry)
        if isinstance(result, FilterDecision):
            return result
        if isinstance(result, Mapping):
            return FilterDecision.from_mapping(result)
        return FilterDecision(include=bool(result))


Filter = Union[BoolFilter, PatternFilter, SubstringFilter, PredicateFilter]

_INCLUDE_ALL = BoolFilter(True)


def as_filter(spec: Any) -> Filter:
    """Convert a raw filter specification into a tagged filter."""
    if isinstance(spec, (BoolFilter, PatternFilter, SubstringFilter, PredicateFilter)):
        return spec
    if spec is None:
        return _INCLUDE_ALL
    if isinstance(spec, bool):
        return BoolFilter(spec)
    if isinstance(spec, str):
        return SubstringFilter(spec)
    if callable(getattr(spec, "search", None)):
        return PatternFilter(spec)
    if callable(spec):
        return PredicateFilter(spec)
    logger.debug("Unsupported filter %r, including every entry", spec)
    return _INCLUDE_ALL


def normalize_filter(
    spec: Any, recursive: bool = True
) -> Callable[[Entry], FilterDecision]:
    """Return an ``Entry -> FilterDecision`` function with ``recursive`` resolved."""
    flt = as_filter(spec)

    def decide(entry: Entry) -> FilterDecision:
        return flt(entry).resolve(recursive)

    return decide
