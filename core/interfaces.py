"""Abstract base classes for dependency injection."""

from abc import ABC, abstractmethod
from typing import Callable


class AdvanceScheduler(ABC):
    """Abstract deferred callback used to move to the next question after a correct answer."""

    @abstractmethod
    def schedule(self, delay_seconds: float, callback: Callable[[], None]) -> None:
        """Run callback once after delay_seconds, replacing any pending callback."""
        pass

    @abstractmethod
    def cancel(self) -> None:
        """Drop the pending callback, if any."""
        pass
