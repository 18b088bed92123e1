# src/explainshell_cli/config.py

from dataclasses import dataclass

DEFAULT_BASE_URL = "https://explainshell.com"


@dataclass(frozen=True)
class ExplainConfig:
    """Configuration for talking to the explanation service.

    Immutable. Explicit. No magic defaults from environment.
    """

    base_url: str = DEFAULT_BASE_URL  # Also the origin for relative hrefs
    timeout: float | None = None  # None keeps the transport default
    user_agent: str = "explainshell-cli"

    @property
    def origin(self) -> str:
        return self.base_url.rstrip("/")

    def explain_url(self) -> str:
        return f"{self.origin}/explain"
