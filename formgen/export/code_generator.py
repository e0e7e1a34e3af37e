"""Generate React (JSX) component source from a FormSpec."""

import json
import re

from formgen.schema.models import FieldSpec, FieldType, FormSpec

INDENT = "  "


def _js(value: str) -> str:
    """JSX expression for a literal string, e.g. {"Email"}."""
    return "{" + json.dumps(str(value), ensure_ascii=False) + "}"


def component_name(form: FormSpec) -> str:
    """Title stripped to letters and digits, suffixed with Form."""
    name = re.sub(r"[^a-zA-Z0-9]", "", str(form.title))
    if not name or name[0].isdigit():
        name = "Generated" + name
    return f"{name}Form"


def _field_lines(field: FieldSpec) -> list[str]:
    fid = json.dumps(str(field.id))
    required = ["required"] if field.required else []
    placeholder = [f"placeholder={_js(field.placeholder)}"] if field.placeholder else []
    kind = field.kind

    if kind == FieldType.CHECKBOX:
        return [
            '<div className="form-checkbox-container">',
            INDENT + "<input",
            *(INDENT * 2 + a for a in ['type="checkbox"', f"id={fid}", f"name={fid}", *required, 'className="form-checkbox"']),
            INDENT + "/>",
            INDENT + f'<label htmlFor={fid} className="form-checkbox-label">',
            INDENT * 2 + _js(field.placeholder or field.label),
            INDENT + "</label>",
            "</div>",
        ]

    lines = [
        f'<label htmlFor={fid} className="form-label">',
        INDENT + _js(field.label),
    ]
    if field.required:
        lines.append(INDENT + '<span className="form-required">*</span>')
    lines.append("</label>")

    if kind == FieldType.TEXTAREA:
        attrs = [f"id={fid}", f"name={fid}", *placeholder, *required, "rows={4}", 'className="form-textarea"']
        lines += ["<textarea", *(INDENT + a for a in attrs), "/>"]
    elif kind == FieldType.SELECT:
        attrs = [f"id={fid}", f"name={fid}", *required, 'className="form-select"']
        lines += ["<select", *(INDENT + a for a in attrs), ">"]
        lines.append(INDENT + '<option value="">Select an option...</option>')
        for opt in field.options or ():
            lines.append(INDENT + f"<option value={json.dumps(str(opt))}>{_js(opt)}</option>")
        lines.append("</select>")
    else:
        # text, email, number; unrecognized types fall back to a text input
        input_type = kind.value if kind in (FieldType.EMAIL, FieldType.NUMBER) else "text"
        attrs = [f'type="{input_type}"', f"id={fid}", f"name={fid}", *placeholder, *required, 'className="form-input"']
        lines += ["<input", *(INDENT + a for a in attrs), "/>"]
    return lines


def generate_form_component_code(form: FormSpec) -> str:
    """
    Build a standalone React component for the form.

    The output uses form-container, form-input, etc. classes from
    generated-form.css, which the user copies alongside the component.
    """
    body: list[str] = []
    for i, field in enumerate(form.fields):
        if i:
            body.append("")
        body.extend(_field_lines(field))
    fields_jsx = "\n".join((INDENT * 4 + line) if line else "" for line in body)

    description = ""
    if form.description:
        description = f"\n{INDENT * 4}<p>{_js(form.description)}</p>"

    return f"""import {{ FormEvent }} from 'react';
import './generated-form.css';

export default function {component_name(form)}() {{
  const handleSubmit = (e: FormEvent<HTMLFormElement>) => {{
    e.preventDefault();
    const formData = new FormData(e.currentTarget);
    const data = Object.fromEntries(formData.entries());
    console.log('Form data:', data);
    // Add your form submission logic here
  }};

  return (
    <div className="form-container">
      <div className="form-header">
        <h2>{_js(form.title)}</h2>{description}
      </div>

      <form onSubmit={{handleSubmit}} className="form-form">
{fields_jsx}

        <div className="form-submit-container">
          <button type="submit" className="form-submit-button">
            Submit
          </button>
        </div>
      </form>
    </div>
  );
}}
"""
