from dataclasses import dataclass

from ..plugin.ordering import HIGHEST_PRECEDENCE, order
from ..plugin.provider import PromptProvider


@order(HIGHEST_PRECEDENCE)
@dataclass(frozen=True)
class SimplePromptProvider(PromptProvider):
    """Prompt for the Isac shell, selected ahead of every other provider."""

    def get_prompt(self) -> str:
        return "isac-shell>"

    def get_provider_name(self) -> str:
        return "Isac Prompt"
