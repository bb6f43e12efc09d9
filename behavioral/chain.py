from abc import ABC, abstractmethod
from typing import Optional

from common.config import Message, Request
from common.patterns import Writer
from common.utils import ConsoleWriter, Logger


class Handler(ABC):
    """
    A node in a chain of responsibility. Each node either consumes a request or passes it on.
    """

    def __init__(self, writer: Optional[Writer] = None, logger: Optional[Logger] = None):
        self.writer = writer if writer is not None else ConsoleWriter()
        self.logger = logger
        self._next: Optional["Handler"] = None

    @property
    def next(self) -> Optional["Handler"]:
        return self._next

    def set_next(self, handler: "Handler") -> "Handler":
        """
        Link the node that receives requests this one does not handle.
        :param handler: The next handler in the chain.
        :return: The handler passed in, so chains can be built as a.set_next(b).set_next(c).
        """
        self._next = handler
        return handler

    def handle(self, request: str) -> None:
        if self._can_handle(request):
            self._process(request)
            return
        if self._next is not None:
            self._next.handle(request)
        elif self.logger:
            self.logger.log(f"Request '{request}' reached end of chain unhandled")

    @abstractmethod
    def _can_handle(self, request: str) -> bool:
        pass

    @abstractmethod
    def _process(self, request: str) -> None:
        pass


class AuthHandler(Handler):
    def _can_handle(self, request: str) -> bool:
        return request == Request.AUTH

    def _process(self, request: str) -> None:
        self.writer.write(Message.AUTH_HANDLED)


class LogHandler(Handler):
    def _can_handle(self, request: str) -> bool:
        return request == Request.LOG

    def _process(self, request: str) -> None:
        self.writer.write(Message.LOG_HANDLED)
