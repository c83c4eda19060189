"""
Registry that holds competing providers and picks one by priority.
"""

import logging
import threading
from dataclasses import dataclass
from importlib.metadata import entry_points
from typing import List, Optional, Tuple

from .ordering import get_order
from .provider import DefaultPromptProvider, PromptProvider

logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP = "isac.prompt_providers"


@dataclass(frozen=True)
class Registration:
    provider: PromptProvider
    priority: int
    sequence: int


class ProviderRegistry:
    """Holds registered prompt providers in selection order."""

    def __init__(self):
        self._lock = threading.Lock()
        self._registrations: Tuple[Registration, ...] = ()
        self._sequence = 0

    def register(
        self, provider: PromptProvider, priority: Optional[int] = None
    ) -> PromptProvider:
        """
        Register a prompt provider.

        Args:
            provider: The provider instance
            priority: Explicit priority, overrides the one declared with ``order``

        Returns:
            The registered provider

        Raises:
            TypeError: If provider is not a PromptProvider, its name is not a str
                or priority is not an int
        """
        if not isinstance(provider, PromptProvider):
            raise TypeError(
                f"expected a PromptProvider instance, got {type(provider).__name__}"
            )
        if priority is None:
            priority = get_order(provider)
        elif isinstance(priority, bool) or not isinstance(priority, int):
            raise TypeError(f"priority must be an int, got {type(priority).__name__}")

        name = provider.get_provider_name()
        if not isinstance(name, str):
            raise TypeError(f"provider name must be a str, got {type(name).__name__}")

        with self._lock:
            registration = Registration(provider, priority, self._sequence)
            self._sequence += 1
            self._registrations = self._registrations + (registration,)

        logger.debug(
            "Registered prompt provider %r with priority %d", name, priority
        )
        return provider

    def discover(self, group: str = ENTRY_POINT_GROUP) -> List[PromptProvider]:
        """
        Register every provider advertised in an entry point group.

        Entry points may name a provider class or a ready-made instance.
        Entry points that fail to load are logged and skipped, and so are
        providers whose class is already registered.

        Args:
            group: Entry point group to scan

        Returns:
            Providers registered by this call
        """
        discovered = []
        for ep in entry_points(group=group):
            try:
                target = ep.load()
                provider = target() if isinstance(target, type) else target
                if self._has_type(type(provider)):
                    logger.debug("Prompt provider %r already registered", ep.name)
                    continue
                self.register(provider)
            except Exception as e:
                logger.warning("Skipping prompt provider entry point %r: %s", ep.name, e)
                continue
            discovered.append(provider)
        logger.debug("Discovered %d prompt provider(s) in %r", len(discovered), group)
        return discovered

    def providers(self) -> List[PromptProvider]:
        """Return all registered providers, first selected first."""
        return [r.provider for r in self._ordered()]

    def priority_of(self, provider: PromptProvider) -> int:
        """
        Get the priority a provider was registered with.

        Raises:
            LookupError: If the provider is not registered
        """
        for registration in self._registrations:
            if registration.provider is provider:
                return registration.priority
        raise LookupError(f"Provider is not registered: {provider!r}")

    def select(self, name: Optional[str] = None) -> PromptProvider:
        """
        Pick the provider the shell should use.

        Args:
            name: If given, pick the provider with this display name instead
                  of the highest priority one

        Returns:
            The selected provider

        Raises:
            LookupError: If no provider is registered or none matches name
        """
        ordered = self._ordered()
        if not ordered:
            raise LookupError("No prompt provider is registered")

        if name is None:
            selected = ordered[0].provider
        else:
            matches = [r.provider for r in ordered if r.provider.get_provider_name() == name]
            if not matches:
                raise LookupError(f"No prompt provider named {name!r}")
            selected = matches[0]

        logger.debug("Selected prompt provider %r", selected.get_provider_name())
        return selected

    def __len__(self) -> int:
        return len(self._registrations)

    def _has_type(self, cls: type) -> bool:
        return any(type(r.provider) is cls for r in self._registrations)

    def _ordered(self) -> List[Registration]:
        # Ties go to the earliest registration.
        return sorted(self._registrations, key=lambda r: (r.priority, r.sequence))


def default_registry(discover: bool = True) -> ProviderRegistry:
    """
    Build the shell's standard registry.

    Args:
        discover: Also load providers from installed entry points

    Returns:
        Registry holding the default provider, the Isac provider and any
        discovered providers
    """
    from ..simple import SimplePromptProvider

    registry = ProviderRegistry()
    registry.register(DefaultPromptProvider())
    registry.register(SimplePromptProvider())
    if discover:
        registry.discover()
    return registry
