from abc import ABC, abstractmethod
from typing import Optional

from common.config import Message
from common.patterns import Writer
from common.utils import ConsoleWriter


class Game(ABC):
    def __init__(self, writer: Optional[Writer] = None):
        self.writer = writer if writer is not None else ConsoleWriter()

    def play(self) -> None:
        """
        Run a game. Step order is fixed; subclasses only supply the steps.
        """
        # 1) Set up
        self._initialize()
        # 2) Play
        self._start_play()
        # 3) Wrap up
        self._end_play()

    @abstractmethod
    def _initialize(self) -> None:
        pass

    @abstractmethod
    def _start_play(self) -> None:
        pass

    @abstractmethod
    def _end_play(self) -> None:
        pass


class Football(Game):
    def _initialize(self) -> None:
        self.writer.write(Message.FOOTBALL_INITIALIZE)

    def _start_play(self) -> None:
        self.writer.write(Message.FOOTBALL_START)

    def _end_play(self) -> None:
        self.writer.write(Message.FOOTBALL_END)
