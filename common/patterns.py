from abc import ABC, abstractmethod
from typing import Protocol


class NotInitializedError(RuntimeError):
    """Raised when a context is used before anything has been selected for it."""


# Output sink
class Writer(Protocol):
    def write(self, line: str) -> None:
        ...

# Observer pattern
class Observer(ABC):
    @abstractmethod
    def update(self, message: str) -> None:
        pass

class Subject:
    def __init__(self):
        self._observers = []

    def attach(self, observer: Observer) -> None:
        self._observers.append(observer)

    def detach(self, observer: Observer) -> None:
        """Remove every attachment of the observer. Unknown observers are ignored."""
        self._observers = [o for o in self._observers if o is not observer]

    def notify(self, message: str) -> None:
        for observer in list(self._observers):
            observer.update(message)

# Command pattern
class Command(ABC):
    @abstractmethod
    def execute(self) -> None:
        pass
