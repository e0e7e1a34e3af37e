"""Form schema types and their JSON wire shape."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class FieldType(str, Enum):
    """Field kinds a generated form may use."""

    TEXT = "text"
    TEXTAREA = "textarea"
    NUMBER = "number"
    EMAIL = "email"
    SELECT = "select"
    CHECKBOX = "checkbox"


@dataclass(frozen=True)
class FieldSpec:
    """Single form field."""

    id: str
    label: str
    type: str
    required: bool = False
    placeholder: str | None = None
    options: tuple[str, ...] | None = None

    @property
    def kind(self) -> FieldType | None:
        """Recognized field kind, or None for a type outside FieldType."""
        try:
            return FieldType(self.type)
        except ValueError:
            return None

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "FieldSpec":
        options = raw.get("options")
        return cls(
            id=raw["id"],
            label=raw["label"],
            type=raw["type"],
            required=bool(raw.get("required", False)),
            placeholder=raw.get("placeholder"),
            options=tuple(options) if isinstance(options, list) else None,
        )

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"id": self.id, "label": self.label, "type": self.type}
        if self.placeholder is not None:
            out["placeholder"] = self.placeholder
        out["required"] = self.required
        if self.options is not None:
            out["options"] = list(self.options)
        return out


@dataclass(frozen=True)
class FormSpec:
    """Whole form: title, description and fields in display order."""

    title: str
    description: str = ""
    fields: tuple[FieldSpec, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "FormSpec":
        """
        Build a FormSpec from a decoded schema.

        Expects input already accepted by validate_form_schema.
        """
        return cls(
            title=raw["formTitle"],
            description=raw.get("formDescription") or "",
            fields=tuple(FieldSpec.from_dict(f) for f in raw["fields"]),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "formTitle": self.title,
            "formDescription": self.description,
            "fields": [f.to_dict() for f in self.fields],
        }
