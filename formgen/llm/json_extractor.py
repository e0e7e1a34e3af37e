"""Extract a JSON object from LLM completions.

Models wrap JSON in prose or Markdown fences and sometimes emit more than one
JSON-like fragment. ``extract_json`` tries an ordered list of strategies, from
the text as-is to a brace-depth scan, and returns the first candidate that
decodes.
"""

import json
import logging
import re
from dataclasses import dataclass, field
from typing import Any, Callable

logger = logging.getLogger(__name__)

EXCERPT_CHARS = 1000

_FENCE_OPEN = re.compile(r"^```[\w-]*[ \t]*\r?\n?")
_FENCE_CLOSE = re.compile(r"\s*```\s*$")
_GREEDY_OBJECT = re.compile(r"\{[\s\S]*\}")


@dataclass(frozen=True)
class Recovered:
    """Decodable JSON source and the strategy that found it."""

    json_text: str
    strategy: str
    value: Any = field(default=None, repr=False, compare=False)

    ok = True


@dataclass(frozen=True)
class Failed:
    reason: str

    ok = False


ExtractionOutcome = Recovered | Failed


def reject_json_constant(name: str) -> Any:
    """NaN and Infinity are accepted by json.loads but are not JSON."""
    raise ValueError(f"Invalid JSON constant: {name}")


def strip_fences(text: str) -> str:
    """Trim text and remove a surrounding ``` / ```json fence if it starts with one."""
    text = text.strip()
    if not text.startswith("```"):
        return text
    text = _FENCE_OPEN.sub("", text, count=1)
    return _FENCE_CLOSE.sub("", text).strip()


def direct(text: str) -> str | None:
    trimmed = text.strip()
    return trimmed or None


def fence_stripped(text: str) -> str | None:
    trimmed = text.strip()
    if not trimmed.startswith("```"):
        return None
    return strip_fences(trimmed)


def boundary_trimmed(text: str) -> str | None:
    """Substring from the first '{' to the last '}'."""
    text = strip_fences(text)
    first = text.find("{")
    last = text.rfind("}")
    if first == -1 or last <= first:
        return None
    return text[first:last + 1]


def greedy_regex(text: str) -> str | None:
    text = strip_fences(text)
    # Without a "}" after the first "{" the search only backtracks.
    first = text.find("{")
    if first == -1 or text.rfind("}") < first:
        return None
    match = _GREEDY_OBJECT.search(text, first)
    return match.group() if match else None


def balanced_objects(text: str) -> list[str]:
    """
    All top-level brace-balanced spans, in order of appearance.

    A '}' seen at depth zero is ignored. Braces inside string literals are
    counted like any other.
    """
    spans: list[str] = []
    depth = 0
    start = -1
    for i, ch in enumerate(text):
        if ch == "{":
            if depth == 0:
                start = i
            depth += 1
        elif ch == "}" and depth > 0:
            depth -= 1
            if depth == 0:
                spans.append(text[start:i + 1])
    return spans


def depth_balanced(text: str) -> str | None:
    """Longest complete object from the brace-depth scan (first one wins ties)."""
    spans = balanced_objects(strip_fences(text))
    if not spans:
        return None
    return max(spans, key=len)


# Ordered from well-behaved output to salvaging anything brace-shaped.
STRATEGIES: tuple[tuple[str, Callable[[str], str | None]], ...] = (
    ("direct", direct),
    ("fence_stripped", fence_stripped),
    ("boundary_trimmed", boundary_trimmed),
    ("greedy_regex", greedy_regex),
    ("depth_balanced", depth_balanced),
)


def extract_json(text: str, excerpt_chars: int = EXCERPT_CHARS) -> ExtractionOutcome:
    """
    Recover decodable JSON from a completion.

    Never raises for string input. On failure the reason holds the last decode
    error and the first ``excerpt_chars`` characters of the text.
    """
    if not isinstance(text, str):
        return Failed(f"Expected completion text, got {type(text).__name__}")

    last_error: str | None = None
    for name, strategy in STRATEGIES:
        candidate = strategy(text)
        if candidate is None:
            continue
        try:
            value = json.loads(candidate, parse_constant=reject_json_constant)
        except ValueError as e:
            last_error = str(e)
            logger.debug("JSON strategy %s failed: %s", name, e, extra={"strategy": name})
            continue
        logger.debug("JSON recovered with strategy %s", name, extra={"strategy": name})
        return Recovered(json_text=candidate, strategy=name, value=value)

    excerpt = text[:excerpt_chars]
    if last_error is None:
        return Failed(f"No JSON object found in completion. Raw response (first {excerpt_chars} chars): {excerpt!r}")
    return Failed(
        f"Failed to parse AI response. Tried multiple parsing strategies. "
        f"Error: {last_error}. Raw response (first {excerpt_chars} chars): {excerpt!r}"
    )
