"""Save and load form schemas as JSON files."""

import json
from pathlib import Path

from formgen.config import get_config
from formgen.llm.json_extractor import reject_json_constant
from formgen.schema.models import FormSpec
from formgen.schema.validator import Invalid, ValidationOutcome, validate_form_schema

PARSE_ERROR = "Failed to parse JSON file. Please check the file format."


def default_schema_filename() -> str:
    return get_config().get("export", {}).get("schema_filename", "form-schema.json")


def export_schema(form: FormSpec) -> str:
    """
    Serialize a form as indented JSON, the FormSpec object verbatim.

    Raises:
        ValueError: If a value is NaN or infinite, which JSON cannot hold.
    """
    return json.dumps(form.to_dict(), indent=2, ensure_ascii=False, allow_nan=False)


def import_schema(text: str | bytes) -> ValidationOutcome:
    """
    Parse and validate a user-supplied schema file.

    Uses a plain JSON decode, not the completion extractor: a file must hold
    the schema and nothing else.
    """
    try:
        value = json.loads(text, parse_constant=reject_json_constant)
    except (ValueError, TypeError):
        return Invalid(PARSE_ERROR)
    return validate_form_schema(value)


def save_schema(form: FormSpec, path: str | Path) -> Path:
    path = Path(path)
    path.write_text(export_schema(form) + "\n", encoding="utf-8")
    return path


def load_schema(path: str | Path) -> ValidationOutcome:
    """Read and validate a schema file. Raises FileNotFoundError if missing."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Schema file not found: {path}")
    return import_schema(path.read_text(encoding="utf-8"))
