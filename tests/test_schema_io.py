"""Tests for schema export/import."""

import json

import pytest

from formgen.export.schema_io import (
    PARSE_ERROR,
    default_schema_filename,
    export_schema,
    import_schema,
    load_schema,
    save_schema,
)
from formgen.schema.models import FieldSpec, FormSpec
from formgen.schema.validator import Invalid, Valid, validate_form_schema


def test_export_import_round_trip(sample_schema):
    form = validate_form_schema(sample_schema).form
    text = export_schema(form)
    assert json.loads(text) == sample_schema
    result = import_schema(text)
    assert isinstance(result, Valid)
    assert result.form == form


def test_export_is_indented(sample_schema):
    form = validate_form_schema(sample_schema).form
    assert export_schema(form).startswith('{\n  "formTitle"')


def test_import_does_not_use_extractor():
    """A file with prose around the JSON is rejected."""
    assert import_schema('Here: {"formTitle": "T", "fields": []}') == Invalid(PARSE_ERROR)


def test_import_same_rules_as_generation():
    assert import_schema('{"formTitle": "T", "items": []}') == Invalid("missing formTitle or fields")
    assert import_schema('{"formTitle": "T", "fields": [{"id": "a"}]}') == Invalid("invalid field structure")


def test_import_bytes(sample_schema):
    assert isinstance(import_schema(json.dumps(sample_schema).encode("utf-8")), Valid)


def test_save_and_load(tmp_path, sample_schema):
    form = validate_form_schema(sample_schema).form
    path = save_schema(form, tmp_path / default_schema_filename())
    assert path.name == "form-schema.json"
    assert load_schema(path) == Valid(form)


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_schema(tmp_path / "missing.json")


def test_import_rejects_nan():
    text = '{"formTitle": "T", "fields": [{"id": "a", "label": "A", "type": "number", "placeholder": NaN}]}'
    assert import_schema(text) == Invalid(PARSE_ERROR)


def test_export_refuses_nan():
    form = FormSpec(title="T", fields=(FieldSpec(id="a", label="A", type="number", placeholder=float("nan")),))
    with pytest.raises(ValueError):
        export_schema(form)
