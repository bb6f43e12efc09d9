from abc import ABC, abstractmethod
from typing import Optional

from common.config import Message
from common.patterns import NotInitializedError, Writer
from common.utils import ConsoleWriter, Logger


class State(ABC):
    def __init__(self, writer: Optional[Writer] = None):
        self.writer = writer if writer is not None else ConsoleWriter()

    @abstractmethod
    def handle(self) -> None:
        pass


class StartState(State):
    def handle(self) -> None:
        self.writer.write(Message.STATE_START)


class StopState(State):
    def handle(self) -> None:
        self.writer.write(Message.STATE_STOP)


class Context:
    """
    Holds the current state. Any state may follow any other; there is no transition table.
    """

    def __init__(self, logger: Optional[Logger] = None):
        self._state: Optional[State] = None
        self.logger = logger

    @property
    def state(self) -> Optional[State]:
        return self._state

    def set_state(self, state: State) -> None:
        """
        Replace the current state and run its behavior immediately.
        :param state: The new state.
        """
        if self.logger:
            previous = type(self._state).__name__ if self._state else "None"
            self.logger.log(f"State change: {previous} -> {type(state).__name__}")
        self._state = state
        state.handle()

    def request(self) -> None:
        if self._state is None:
            raise NotInitializedError("Context has no state; call set_state() first")
        self._state.handle()
