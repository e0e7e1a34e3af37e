"""Structural validation of decoded form schemas."""

from dataclasses import dataclass
from typing import Any

from formgen.schema.models import FormSpec

MISSING_TITLE_OR_FIELDS = "missing formTitle or fields"
INVALID_FIELD_STRUCTURE = "invalid field structure"


@dataclass(frozen=True)
class Valid:
    form: FormSpec

    ok = True


@dataclass(frozen=True)
class Invalid:
    reason: str

    ok = False


ValidationOutcome = Valid | Invalid


def validate_form_schema(value: Any) -> ValidationOutcome:
    """
    Check that a decoded JSON value is a structurally valid form schema.

    Used for both model output and imported files, so the rules do not depend
    on the caller. Field types, select options and id uniqueness are not
    checked; tightening them would reject schemas accepted today.
    """
    if not isinstance(value, dict):
        return Invalid(MISSING_TITLE_OR_FIELDS)
    if not isinstance(value.get("fields"), list):
        return Invalid(MISSING_TITLE_OR_FIELDS)
    if not value.get("formTitle"):
        return Invalid(MISSING_TITLE_OR_FIELDS)

    for f in value["fields"]:
        if not isinstance(f, dict) or not (f.get("id") and f.get("label") and f.get("type")):
            return Invalid(INVALID_FIELD_STRUCTURE)

    return Valid(FormSpec.from_dict(value))
