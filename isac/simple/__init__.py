from .prompt_provider import SimplePromptProvider

__all__ = ["SimplePromptProvider"]
