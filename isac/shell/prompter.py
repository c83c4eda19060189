import logging
from typing import Callable, Optional

from prompt_toolkit import PromptSession
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from ..plugin.provider import PromptProvider
from ..plugin.registry import ProviderRegistry

logger = logging.getLogger(__name__)


class Prompter:
    """Runs the interactive prompt loop with a provider-supplied prompt."""

    def __init__(
        self,
        registry: ProviderRegistry,
        exit_sequence: str = "/exit",
        on_input: Optional[Callable[[str], None]] = None,
        provider_name: Optional[str] = None,
        session: Optional[PromptSession] = None,
        console: Optional[Console] = None,
    ):
        """
        Initialize the Prompter.

        Args:
            registry: Registry the prompt provider is selected from
            exit_sequence: The command to exit the interactive session
            on_input: Called with every non-empty line the user enters
            provider_name: Force the provider with this name instead of the
                           highest priority one
            session: Prompt session to read from (created on first use if not provided)
            console: Rich console for shell output (creates one if not provided)
        """
        self.registry = registry
        self.exit_sequence = exit_sequence
        self.on_input = on_input
        self.provider_name = provider_name
        self._session = session
        self.console = console or Console()

    @property
    def session(self) -> PromptSession:
        if self._session is None:
            self._session = PromptSession()
        return self._session

    def provider(self) -> PromptProvider:
        """
        Get the provider currently selected for this shell.

        Raises:
            LookupError: If no provider can be selected
        """
        return self.registry.select(self.provider_name)

    def prompt_text(self) -> str:
        """Prompt text as rendered, with one trailing space."""
        return f"{self.provider().get_prompt()} "

    def run_interactive_session(self) -> None:
        """
        Run an interactive shell session until the exit sequence or EOF.

        Raises:
            LookupError: If no prompt provider can be selected
        """
        self._show_welcome_banner()

        while True:
            try:
                user_input = self.session.prompt(self.prompt_text()).strip()

                if not user_input:
                    continue

                if user_input == self.exit_sequence:
                    break

                self._handle_input(user_input)

            except KeyboardInterrupt:
                self.console.print(Text(f"\nUse '{self.exit_sequence}' to exit."))
                continue
            except EOFError:
                break

        logger.debug("Interactive session ended")

    def _handle_input(self, user_input: str) -> None:
        if self.on_input is None:
            self.console.print(Text(f"No command handler registered for: {user_input}"))
            return

        try:
            self.on_input(user_input)
        except Exception as e:
            logger.exception("Command handler failed for input %r", user_input)
            self.console.print(Text(f"Error: {e}", style="red"))

    def _show_welcome_banner(self) -> None:
        """Display a welcome banner naming the active prompt provider."""
        provider = self.provider()
        body = Text.assemble(
            ("Welcome to the interactive shell!\n\n", "bold"),
            f"Prompt provider: {provider.get_provider_name()}\n",
            "Press Ctrl+C to interrupt\n",
            f"Type '{self.exit_sequence}' to quit",
        )
        self.console.print(Panel.fit(body, border_style="blue"))
