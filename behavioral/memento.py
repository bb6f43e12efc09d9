from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Memento:
    """Immutable snapshot of an Originator's state."""
    state: Optional[str]


class Originator:
    def __init__(self, state: Optional[str] = None):
        self.state: Optional[str] = state

    def save(self) -> Memento:
        return Memento(self.state)

    def restore(self, memento: Memento) -> None:
        self.state = memento.state
