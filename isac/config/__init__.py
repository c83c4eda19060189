from .logging_config import setup_logging
from .settings import ShellSettings, check_log_level

__all__ = ["ShellSettings", "check_log_level", "setup_logging"]
