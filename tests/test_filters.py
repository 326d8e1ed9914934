"""Tests for filter normalization."""

import os
import re
from pathlib import Path

import pytest

from statscan.entry import Entry
from statscan.filters import (
    BoolFilter,
    FilterDecision,
    PatternFilter,
    PredicateFilter,
    SubstringFilter,
    as_filter,
    normalize_filter,
)


@pytest.fixture
def entry(tmp_path: Path) -> Entry:
    d = tmp_path / "Docs"
    d.mkdir()
    f = d / "Guide.md"
    f.write_text("# guide")
    return Entry.from_stat(str(f), os.stat(f), str(f))


def test_no_filter_includes_everything(entry: Entry):
    decision = normalize_filter(None, recursive=False)(entry)
    assert decision == FilterDecision(include=True, recursive=False)


@pytest.mark.parametrize("value", [True, False])
def test_bool_filter(entry: Entry, value: bool):
    assert normalize_filter(value)(entry) == FilterDecision(include=value, recursive=True)


def test_pattern_filter(entry: Entry):
    assert normalize_filter(re.compile(r"\.md$"))(entry).include
    assert not normalize_filter(re.compile(r"\.txt$"))(entry).include
    assert isinstance(as_filter(re.compile("x")), PatternFilter)


def test_substring_filter_normalizes_separators(entry: Entry):
    assert normalize_filter("Docs/Guide")(entry).include
    assert normalize_filter("Docs\\Guide")(entry).include
    assert not normalize_filter("Other/Guide")(entry).include


def test_substring_filter_case(entry: Entry):
    assert not SubstringFilter("docs", case_sensitive=True)(entry).include
    assert SubstringFilter("docs", case_sensitive=False)(entry).include
    assert SubstringFilter("DOCS/guide.MD", case_sensitive=False)(entry).include


def test_predicate_plain_values(entry: Entry):
    assert normalize_filter(lambda e: e.extension)(entry).include
    assert not normalize_filter(lambda e: 0)(entry).include
    assert normalize_filter(lambda e: None, recursive=False)(entry).recursive is False


def test_predicate_mapping_fills_recursive(entry: Entry):
    decide = normalize_filter(lambda e: {"include": True, "exit": True}, recursive=False)
    assert decide(entry) == FilterDecision(include=True, recursive=False, exit=True, stop=False)


def test_predicate_mapping_keeps_explicit_recursive(entry: Entry):
    decide = normalize_filter(lambda e: {"recursive": True, "stop": 1}, recursive=False)
    assert decide(entry) == FilterDecision(include=False, recursive=True, stop=True)


def test_predicate_decision_is_not_mutated(entry: Entry):
    returned = FilterDecision(include=True)
    decision = normalize_filter(lambda e: returned, recursive=False)(entry)
    assert decision.recursive is False
    assert returned.recursive is None


def test_unsupported_filter_includes_everything(entry: Entry):
    assert as_filter(42) == BoolFilter(True)
    assert normalize_filter(42)(entry).include


def test_tagged_filters_pass_through():
    flt = PredicateFilter(lambda e: True)
    assert as_filter(flt) is flt
    assert isinstance(as_filter("abc"), SubstringFilter)
    assert isinstance(as_filter(False), BoolFilter)
