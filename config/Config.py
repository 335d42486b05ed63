# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-02
# Description: Config
# -----------------------------------------------------------------------------

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv, find_dotenv

# Load .env once globally
load_dotenv(find_dotenv(usecwd=True), override=True)

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_CORPUS_PATH = PROJECT_ROOT / "data" / "quranic_sample.json"


@dataclass(frozen=True)
class Config:
    # Ollama embedding provider
    ollama_url: str = "http://nexus_ollama:11434"
    embed_model: str = "nomic-embed-text"
    embed_timeout: float = 30.0  # seconds, 0 disables the timeout

    # Corpus source
    corpus_path: str = str(DEFAULT_CORPUS_PATH)

    # ---- Single source of truth: field_name -> ENV VAR NAME ----
    ENV_VARS = {
        "ollama_url": "OLLAMA_URL",
        "embed_model": "VERSE_EMBED_MODEL",
        "embed_timeout": "VERSE_EMBED_TIMEOUT",
        "corpus_path": "VERSE_CORPUS_PATH",
    }

    @staticmethod
    def from_env() -> "Config":
        """Build Config object from environment variables, keeping defaults for unset ones."""
        kwargs = {}
        for field_name, env_name in Config.ENV_VARS.items():
            value = (os.getenv(env_name) or "").strip()
            if value:
                kwargs[field_name] = value

        if "embed_timeout" in kwargs:
            try:
                kwargs["embed_timeout"] = float(kwargs["embed_timeout"])
            except ValueError as e:
                raise ValueError(
                    f"{Config.ENV_VARS['embed_timeout']} must be a number, got {kwargs['embed_timeout']!r}"
                ) from e

        return Config(**kwargs)

    def __post_init__(self):
        """Fail fast on values the embedder cannot work with."""
        if not self.ollama_url:
            raise ValueError(f"Missing required environment variable: {self.ENV_VARS['ollama_url']}")
        if not self.embed_model:
            raise ValueError(f"Missing required environment variable: {self.ENV_VARS['embed_model']}")
        if self.embed_timeout < 0:
            raise ValueError(f"embed_timeout must be >= 0, got {self.embed_timeout}")

    @property
    def embed_endpoint(self) -> str:
        return f"{self.ollama_url.rstrip('/')}/api/embed"

    def summary(self) -> dict:
        """Return a safe summary for logging."""
        return {
            "ollama_url": self.ollama_url,
            "embed_model": self.embed_model,
            "embed_timeout": self.embed_timeout,
            "corpus_path": self.corpus_path,
        }
