"""
List models available on the configured Ollama server.

Requires: pip install ollama
Run: python scripts/check_models.py
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from formgen.config import get_config
from formgen.llm.ollama_client import OllamaClient


def main() -> int:
    config = get_config()
    configured = config.get("ollama", {}).get("model")
    try:
        client = OllamaClient()
        models = client.list_models()
    except ImportError as e:
        print(str(e))
        return 1
    except Exception as e:
        print(f"Could not reach Ollama at {config.get('ollama', {}).get('base_url')}: {e}")
        print("Start the server with: ollama serve")
        return 1

    if not models:
        print("No models installed. Pull one with: ollama pull <model>")
        return 1

    print(f"Found {len(models)} model(s):")
    for i, name in enumerate(models, 1):
        marker = " (configured)" if name == configured else ""
        print(f"{i}. {name}{marker}")
    if configured not in models:
        print(f"\nConfigured model {configured!r} is not installed. Run: ollama pull {configured}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
