import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean, got {value!r}")


def check_log_level(value: str) -> str:
    """
    Normalize a log level name.

    Raises:
        ValueError: If value is not a standard level name
    """
    level = value.strip().upper()
    if level not in _LOG_LEVELS:
        raise ValueError(f"log level must be one of {', '.join(_LOG_LEVELS)}, got {value!r}")
    return level


@dataclass
class ShellSettings:
    """
    Runtime settings for the shell.
    Env:
      ISAC_SHELL_EXIT_SEQUENCE     (optional, default '/exit')
      ISAC_SHELL_PROMPT_PROVIDER   (optional, force a provider by name)
      ISAC_SHELL_DISCOVER          (optional, default 'true')
      ISAC_SHELL_LOG_LEVEL         (optional, default 'WARNING')
      ISAC_SHELL_LOG_FILE          (optional)
    """

    exit_sequence: str = "/exit"
    prompt_provider: Optional[str] = None
    discover: bool = True
    log_level: str = "WARNING"
    log_file: Optional[Path] = None

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> "ShellSettings":
        """
        Build settings from the environment.

        Args:
            load_env_file: Load a .env file first, without overriding set variables

        Raises:
            ValueError: If a variable holds an invalid value
        """
        if load_env_file:
            load_dotenv(find_dotenv(usecwd=True))

        settings = cls()
        settings.exit_sequence = os.environ.get("ISAC_SHELL_EXIT_SEQUENCE", settings.exit_sequence).strip()
        settings.prompt_provider = os.environ.get("ISAC_SHELL_PROMPT_PROVIDER") or None
        if "ISAC_SHELL_DISCOVER" in os.environ:
            settings.discover = _parse_bool("ISAC_SHELL_DISCOVER", os.environ["ISAC_SHELL_DISCOVER"])
        settings.log_level = check_log_level(os.environ.get("ISAC_SHELL_LOG_LEVEL", settings.log_level))
        log_file = os.environ.get("ISAC_SHELL_LOG_FILE")
        settings.log_file = Path(log_file) if log_file else None

        if not settings.exit_sequence:
            raise ValueError("ISAC_SHELL_EXIT_SEQUENCE must not be empty")
        return settings
