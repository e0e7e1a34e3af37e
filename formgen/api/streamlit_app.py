"""Streamlit application for FormGen."""

import streamlit as st

from formgen.export.code_generator import generate_form_component_code
from formgen.export.pdf_export import filled_pdf_filename, generate_filled_pdf
from formgen.export.schema_io import PARSE_ERROR, default_schema_filename, export_schema, import_schema
from formgen.generator import ErrorKind, Generated, generate_form
from formgen.logging_config import setup_logging
from formgen.schema.models import FieldSpec, FieldType, FormSpec
from formgen.schema.validator import Valid

EXAMPLE_DESCRIPTIONS = [
    "A contact form with name, email, subject, and message fields",
    "A job application form with personal info, work experience, and skills",
    "A survey form about product satisfaction with rating and feedback",
]


def main() -> None:
    import subprocess
    import sys
    subprocess.run([sys.executable, "-m", "streamlit", "run", __file__, *sys.argv[1:]], check=True)


def get_ollama_client():
    """Get OllamaClient. Raises if the ollama package is missing."""
    from formgen.llm.ollama_client import OllamaClient
    return OllamaClient()


def check_ollama_available() -> tuple[bool, str]:
    """Check if Ollama is running and reachable. Returns (ok, error_message)."""
    try:
        client = get_ollama_client()
        client.list_models()
        return True, ""
    except ImportError:
        return False, "ollama package required. Install with: pip install ollama"
    except Exception as e:
        return False, f"Ollama not available: {e}. Start Ollama (ollama serve) and pull the model."


def missing_required(form: FormSpec, answers: dict) -> list[str]:
    """Error messages for required fields left empty."""
    errors = []
    for field in form.fields:
        if not field.required:
            continue
        value = answers.get(field.id)
        if value is None or value == "" or value is False:
            errors.append(f"{field.label} is required")
    return errors


def _render_input(field: FieldSpec):
    key = f"answer_{field.id}"
    label = f"{field.label}{' *' if field.required else ''}"
    placeholder = field.placeholder or None
    kind = field.kind
    if kind == FieldType.TEXTAREA:
        return st.text_area(label, key=key, placeholder=placeholder)
    if kind == FieldType.NUMBER:
        return st.number_input(label, key=key, value=None, placeholder=placeholder)
    if kind == FieldType.SELECT:
        options = ["", *(field.options or ())]
        return st.selectbox(label, options, key=key, format_func=lambda o: o or "Select an option...")
    if kind == FieldType.CHECKBOX:
        return st.checkbox(field.placeholder or field.label, key=key)
    return st.text_input(label, key=key, placeholder=placeholder)


def render_form(form: FormSpec) -> None:
    """Interactive preview; submitting offers the filled PDF."""
    st.subheader(form.title)
    if form.description:
        st.caption(form.description)

    with st.form("form_preview"):
        answers = {field.id: _render_input(field) for field in form.fields}
        submitted = st.form_submit_button("Generate PDF", type="primary")

    if submitted:
        errors = missing_required(form, answers)
        if errors:
            for message in errors:
                st.error(message)
            return
        try:
            pdf = generate_filled_pdf(form, answers)
        except ImportError as e:
            st.error(str(e))
            return
        st.download_button("Download PDF", pdf, filled_pdf_filename(form), mime="application/pdf")


def reset_form() -> None:
    """Drop the current form and prompt; runs before the next rerun."""
    st.session_state.pop("form", None)
    st.session_state["prompt"] = ""


def render_toolbar(form: FormSpec) -> None:
    c1, c2, c3 = st.columns(3)
    with c1:
        st.button("Create new form", on_click=reset_form)
    with c2:
        st.download_button("Save JSON", export_schema(form), default_schema_filename(), mime="application/json")
    with c3:
        st.download_button("Download JSX", generate_form_component_code(form), "GeneratedForm.tsx")
    with st.expander("JSX code"):
        st.code(generate_form_component_code(form), language="tsx")


def import_error_message(reason: str) -> str:
    """User message for a rejected import; parse errors already say what failed."""
    if reason == PARSE_ERROR:
        return reason
    return f"Invalid JSON file: {reason}"


def handle_import() -> None:
    uploaded = st.file_uploader("Load JSON", type=["json"])
    if uploaded is None:
        return
    # The uploader keeps its file across reruns; import each upload once.
    # Choosing a file again gives a new file_id, so re-imports still apply.
    upload_id = uploaded.file_id
    if st.session_state.get("imported") == upload_id:
        return
    st.session_state["imported"] = upload_id
    result = import_schema(uploaded.getvalue())
    if isinstance(result, Valid):
        st.session_state["form"] = result.form
        st.success("Form loaded successfully!")
    else:
        st.error(import_error_message(result.reason))


def run_app() -> None:
    setup_logging()
    st.set_page_config(page_title="FormGen", page_icon="\U0001f4dd")
    st.title("AI Form Builder")
    st.caption("Describe your form in plain English and let AI generate it for you")

    ollama_ok, ollama_error = check_ollama_available()
    if not ollama_ok:
        st.error(f"**Ollama is required.** {ollama_error}")
        return

    prompt = st.text_area("Form description", key="prompt", placeholder="Form for high school students...")

    if st.button("Generate form", type="primary"):
        with st.spinner("Generating form..."):
            result = generate_form(prompt, client=get_ollama_client())
        if isinstance(result, Generated):
            st.session_state["form"] = result.form
        else:
            st.session_state.pop("form", None)
            if result.kind == ErrorKind.TIMEOUT:
                st.warning(result.message)
            else:
                st.error(result.message)

    form = st.session_state.get("form")
    if form is None:
        st.write("**Example descriptions**")
        for example in EXAMPLE_DESCRIPTIONS:
            st.write(f"- {example}")
        handle_import()
        return

    render_toolbar(form)
    handle_import()
    render_form(form)


if __name__ == "__main__":
    run_app()
