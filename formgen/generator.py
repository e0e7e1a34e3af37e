"""Form generation: prompt -> model completion -> validated FormSpec."""

import logging
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FutureTimeout
from dataclasses import dataclass
from enum import Enum
from typing import Any

from formgen.config import get_config
from formgen.llm.json_extractor import EXCERPT_CHARS, Failed, extract_json
from formgen.llm.prompt_manager import build_form_request
from formgen.schema.models import FormSpec
from formgen.schema.validator import Invalid, validate_form_schema

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 60


class ErrorKind(str, Enum):
    """Failure categories shown to the user as distinct messages."""

    INVALID_PROMPT = "invalid_prompt"
    UPSTREAM_FAILURE = "upstream_failure"
    TIMEOUT = "timeout"
    EXTRACTION_FAILED = "extraction_failed"
    STRUCTURALLY_INVALID = "structurally_invalid"


@dataclass(frozen=True)
class Generated:
    form: FormSpec

    ok = True


@dataclass(frozen=True)
class GenerationFailed:
    """Failure category, user-facing message and operator detail."""

    kind: ErrorKind
    message: str
    detail: str = ""

    ok = False


GenerationResult = Generated | GenerationFailed


def _timeout_seconds(timeout: float | None) -> float:
    if timeout is not None:
        return timeout
    generation = get_config().get("generation", {})
    return float(generation.get("timeout_seconds", DEFAULT_TIMEOUT_SECONDS))


def _default_client() -> Any:
    from formgen.llm.ollama_client import OllamaClient
    return OllamaClient()


def _complete(client: Any, prompt: str, system: str, timeout: float) -> str:
    """Run the model call with a wall-clock ceiling; raises FutureTimeout when exceeded."""
    executor = ThreadPoolExecutor(max_workers=1)
    try:
        future = executor.submit(client.query, prompt, system)
        return future.result(timeout=timeout)
    finally:
        # Abandon a call still in flight instead of waiting for it.
        executor.shutdown(wait=False, cancel_futures=True)


def generate_form(
    prompt: str,
    client: Any = None,
    timeout: float | None = None,
) -> GenerationResult:
    """
    Generate a FormSpec from a natural-language description.

    The model is called once; a completion that cannot be extracted or
    validated ends the request. Every failure is returned as a
    GenerationFailed, never raised.

    Args:
        prompt: Form description from the user.
        client: Object with ``query(prompt, system) -> str``. Defaults to OllamaClient.
        timeout: Seconds allowed for the model call. Defaults to config
            ``generation.timeout_seconds``.
    """
    if not prompt or not isinstance(prompt, str) or not prompt.strip():
        return GenerationFailed(ErrorKind.INVALID_PROMPT, "Prompt is required")

    limit = timeout
    try:
        limit = _timeout_seconds(timeout)
        excerpt_chars = int(get_config().get("generation", {}).get("error_excerpt_chars", EXCERPT_CHARS))
        system, user_prompt = build_form_request(prompt)
        if client is None:
            client = _default_client()
        completion = _complete(client, user_prompt, system, limit)
    except FutureTimeout:
        logger.warning("Form generation exceeded %s seconds", limit, extra={"error_kind": ErrorKind.TIMEOUT.value})
        return GenerationFailed(
            ErrorKind.TIMEOUT,
            f"Timeout: The operation exceeded {limit:g} seconds. Please try again.",
        )
    except Exception as e:
        logger.exception("Error generating form", extra={"error_kind": ErrorKind.UPSTREAM_FAILURE.value})
        return GenerationFailed(
            ErrorKind.UPSTREAM_FAILURE,
            str(e) or "Failed to generate form. Please try again.",
            detail=repr(e),
        )

    extracted = extract_json(completion or "", excerpt_chars=excerpt_chars)
    if isinstance(extracted, Failed):
        logger.error(
            "Could not extract JSON from completion (%d chars)",
            len(completion or ""),
            extra={"error_kind": ErrorKind.EXTRACTION_FAILED.value, "excerpt": (completion or "")[:excerpt_chars]},
        )
        return GenerationFailed(
            ErrorKind.EXTRACTION_FAILED,
            "Failed to parse AI response. Please try again.",
            detail=extracted.reason,
        )

    validated = validate_form_schema(extracted.value)
    if isinstance(validated, Invalid):
        logger.error(
            "Generated schema rejected: %s",
            validated.reason,
            extra={"error_kind": ErrorKind.STRUCTURALLY_INVALID.value, "strategy": extracted.strategy},
        )
        return GenerationFailed(
            ErrorKind.STRUCTURALLY_INVALID,
            f"Invalid form schema generated: {validated.reason}",
            detail=extracted.json_text[:excerpt_chars],
        )

    logger.info(
        "Generated form %r with %d fields",
        validated.form.title,
        len(validated.form.fields),
        extra={"strategy": extracted.strategy},
    )
    return Generated(validated.form)
