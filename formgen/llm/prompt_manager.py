"""Load and format prompts from config files."""

from pathlib import Path

FORM_BUILDER = "form_builder"
FORM_BUILDER_SYSTEM = "form_builder_system"


def get_prompts_dir() -> Path:
    """Return path to prompts directory."""
    return Path(__file__).resolve().parent.parent.parent / "config" / "prompts"


def load_prompt(name: str) -> str:
    """Load prompt template by name (without .txt)."""
    path = get_prompts_dir() / f"{name}.txt"
    if not path.exists():
        raise FileNotFoundError(f"Prompt not found: {path}")
    return path.read_text(encoding="utf-8").strip()


def format_prompt(name: str, **kwargs: str) -> str:
    """Load and format prompt with given variables."""
    template = load_prompt(name)
    return template.format(**kwargs)


def build_form_request(description: str) -> tuple[str, str]:
    """Return (system instruction, user prompt) for a form description."""
    system = load_prompt(FORM_BUILDER_SYSTEM)
    prompt = format_prompt(FORM_BUILDER, description=description.strip())
    return system, prompt
