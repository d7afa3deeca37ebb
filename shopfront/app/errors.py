from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ConfigurationError(Exception):
    """Raised at startup when the app cannot serve its route table."""

    message: str
    template: str | None = None

    def __str__(self) -> str:
        if self.template:
            return f"{self.message}: {self.template}"
        return self.message
