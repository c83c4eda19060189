from abc import ABC, abstractmethod

from .ordering import LOWEST_PRECEDENCE, order


class NamedProvider(ABC):
    """Abstract base class for anything the shell can pick among several implementations."""

    @abstractmethod
    def get_provider_name(self) -> str:
        """
        Get the display name of this provider.

        Returns:
            Human readable provider name
        """
        pass


class PromptProvider(NamedProvider):
    """Abstract base class for providers that supply the shell prompt."""

    @abstractmethod
    def get_prompt(self) -> str:
        """
        Get the prompt shown when the shell is ready for input.

        Returns:
            Prompt text, without trailing whitespace
        """
        pass


@order(LOWEST_PRECEDENCE)
class DefaultPromptProvider(PromptProvider):
    """Fallback prompt used when no other provider is registered."""

    def get_prompt(self) -> str:
        return "shell>"

    def get_provider_name(self) -> str:
        return "default prompt provider"
