from abc import ABC, abstractmethod
from typing import Optional

from common.config import Message
from common.patterns import NotInitializedError, Writer
from common.utils import ConsoleWriter, Logger


class Strategy(ABC):
    def __init__(self, writer: Optional[Writer] = None):
        self.writer = writer if writer is not None else ConsoleWriter()

    @abstractmethod
    def execute(self) -> None:
        pass


class FastStrategy(Strategy):
    def execute(self) -> None:
        self.writer.write(Message.FAST_STRATEGY)


class SlowStrategy(Strategy):
    def execute(self) -> None:
        self.writer.write(Message.SLOW_STRATEGY)


class StrategyContext:
    def __init__(self, strategy: Optional[Strategy] = None, logger: Optional[Logger] = None):
        self._strategy: Optional[Strategy] = strategy
        self.logger = logger

    @property
    def strategy(self) -> Optional[Strategy]:
        return self._strategy

    def set_strategy(self, strategy: Strategy) -> None:
        self._strategy = strategy
        if self.logger:
            self.logger.log(f"Strategy selected: {type(strategy).__name__}")

    def run(self) -> None:
        """
        Run the selected strategy.
        :raises NotInitializedError: If no strategy has been selected.
        """
        if self._strategy is None:
            raise NotInitializedError("No strategy selected; call set_strategy() first")
        self._strategy.execute()
