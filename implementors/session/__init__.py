"""Public API for YAML-configured loader/consumer sessions."""

from .session import ImplementorSession
from .session_config import SessionConfig

__all__ = ["ImplementorSession", "SessionConfig"]
