"""Tests for JSON extraction from completions."""

import json
import time

import pytest

from formgen.llm.json_extractor import (
    Failed,
    Recovered,
    balanced_objects,
    boundary_trimmed,
    depth_balanced,
    extract_json,
    fence_stripped,
    greedy_regex,
    strip_fences,
)


def test_plain_json_uses_direct_strategy():
    """Unwrapped JSON is decoded without falling through."""
    text = '  {"formTitle": "T", "fields": []}\n'
    result = extract_json(text)
    assert isinstance(result, Recovered)
    assert result.strategy == "direct"
    assert result.value == {"formTitle": "T", "fields": []}


@pytest.mark.parametrize("fence", ["```json", "```", "```JSON"])
def test_fenced_json(fence):
    """Fenced block with or without language tag."""
    text = f'{fence}\n{{"formTitle": "T", "fields": []}}\n```'
    result = extract_json(text)
    assert isinstance(result, Recovered)
    assert result.strategy == "fence_stripped"
    assert result.value["formTitle"] == "T"


def test_json_with_prose():
    """Single object surrounded by prose is recovered by boundary trimming."""
    text = 'Here is your form:\n\n{"formTitle": "Signup", "fields": [{"id": "a"}]}\n\nHope this helps!'
    result = extract_json(text)
    assert isinstance(result, Recovered)
    assert result.strategy == "boundary_trimmed"
    assert result.json_text == '{"formTitle": "Signup", "fields": [{"id": "a"}]}'


def test_two_objects_picks_longest():
    """Two disjoint objects: the longer one wins."""
    text = 'noise {"a":1} more {"formTitle":"X","fields":[]} end'
    result = extract_json(text)
    assert isinstance(result, Recovered)
    assert result.strategy == "depth_balanced"
    assert result.value == {"formTitle": "X", "fields": []}


def test_unbalanced_braces_fail_without_raising():
    result = extract_json("{{{ this is { not json")
    assert isinstance(result, Failed)
    assert result.reason
    assert "not json" in result.reason


def test_empty_string_fails():
    result = extract_json("")
    assert isinstance(result, Failed)
    assert result.reason
    assert not result.ok


def test_non_string_input_fails():
    result = extract_json(None)
    assert isinstance(result, Failed)


def test_failure_reason_bounded_excerpt():
    text = "x" * 5000 + "{bad"
    result = extract_json(text, excerpt_chars=100)
    assert isinstance(result, Failed)
    assert "x" * 100 in result.reason
    assert "x" * 101 not in result.reason


def test_failure_reports_decode_error():
    result = extract_json("prefix {not: valid} suffix")
    assert isinstance(result, Failed)
    assert "Failed to parse AI response" in result.reason


def test_strip_fences_without_fence_is_trim():
    assert strip_fences("  {}  ") == "{}"
    assert fence_stripped('{"a": 1}') is None


def test_boundary_trimmed_needs_both_braces():
    assert boundary_trimmed("} before {") is None
    assert boundary_trimmed("no braces") is None


def test_balanced_objects_ignores_stray_closing_brace():
    assert balanced_objects('} {"a": {"b": 1}} x {"c": 2}') == ['{"a": {"b": 1}}', '{"c": 2}']


def test_depth_balanced_tie_keeps_first():
    assert depth_balanced('{"a":1} {"b":2}') == '{"a":1}'


def test_recovered_text_decodes():
    text = "Sure!\n```json\n" + json.dumps({"formTitle": "T", "fields": []}) + "\n```\nLet me know."
    result = extract_json(text)
    assert isinstance(result, Recovered)
    assert json.loads(result.json_text) == result.value


def test_greedy_regex_spans_outermost_braces():
    assert greedy_regex('a {"x": 1} b {"y": 2} c') == '{"x": 1} b {"y": 2}'
    assert greedy_regex("```json\n{}\n```") == "{}"
    assert greedy_regex("nothing") is None


@pytest.mark.parametrize("constant", ["NaN", "Infinity", "-Infinity"])
def test_non_json_constants_are_not_recovered(constant):
    text = '{"formTitle":"T","fields":[{"id":"a","label":"A","type":"number","placeholder":' + constant + "}]}"
    result = extract_json(text)
    assert isinstance(result, Failed)
    assert "Invalid JSON constant" in result.reason


def test_non_json_constant_falls_through_to_next_candidate():
    text = 'draft {"value": NaN} final {"formTitle": "T", "fields": [], "note": "ok"}'
    result = extract_json(text)
    assert isinstance(result, Recovered)
    assert result.strategy == "depth_balanced"
    assert result.value["formTitle"] == "T"


def test_unclosed_braces_scan_quickly():
    """Many '{' with no '}' must not backtrack through every start position."""
    text = "{" * 200000
    start = time.perf_counter()
    assert greedy_regex(text) is None
    result = extract_json(text)
    elapsed = time.perf_counter() - start
    assert isinstance(result, Failed)
    assert elapsed < 1.0
