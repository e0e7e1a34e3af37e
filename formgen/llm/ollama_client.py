"""Ollama HTTP client for form generation."""

from formgen.config import get_config

try:
    import ollama
except ImportError:
    ollama = None


class OllamaClient:
    """Client for Ollama API with JSON output support."""

    def __init__(
        self,
        model: str | None = None,
        base_url: str | None = None,
        timeout: int | None = None,
    ) -> None:
        if ollama is None:
            raise ImportError("ollama package required. Install with: pip install ollama")
        config = get_config()
        ollama_config = config.get("ollama", {})
        self.model = model or ollama_config.get("model", "qwen2.5-coder:3b")
        self.base_url = base_url or ollama_config.get("base_url", "http://localhost:11434")
        self.timeout = timeout or ollama_config.get("timeout", 60)

    def _client(self):
        return ollama.Client(host=self.base_url, timeout=self.timeout)

    def query(self, prompt: str, system: str | None = None, json_mode: bool = True) -> str:
        """Send a query to Ollama and return the completion text.

        ``json_mode`` asks the server for JSON output; models may still wrap it.
        """
        messages = []
        if system:
            messages.append({"role": "system", "content": system})
        messages.append({"role": "user", "content": prompt})

        kwargs = {"format": "json"} if json_mode else {}
        response = self._client().chat(
            model=self.model,
            messages=messages,
            **kwargs,
        )
        return response["message"]["content"] or ""

    def list_models(self) -> list[str]:
        """Names of the models available on the server."""
        response = self._client().list()
        names = []
        for m in response["models"]:
            name = m.get("model") or m.get("name")
            if name:
                names.append(name)
        return names
