"""Logger interface.

Every component logs through this interface so callers can drop in their own
implementation. Messages are short event descriptions; context travels as
keyword arguments rather than being formatted into the message.
"""

from abc import ABC, abstractmethod
from typing import Any


class Logger(ABC):
    """Structured logger with key/value context."""

    @abstractmethod
    def debug(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def info(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def warning(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def error(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def critical(self, message: str, **kwargs: Any) -> None:
        pass
