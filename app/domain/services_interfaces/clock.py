from abc import ABC, abstractmethod


class ClockInterface(ABC):
    @abstractmethod
    def now(self) -> int:
        """
        Returns current time in nanoseconds since the epoch.
        """
        raise NotImplementedError
