from typing import Optional

from common.config import Message
from common.patterns import Observer, Subject, Writer
from common.utils import ConsoleWriter, Logger


class NewsAgency(Subject):
    """Subject: publishes headlines to every attached reader, in attachment order."""

    def __init__(self, logger: Optional[Logger] = None):
        super().__init__()
        self.logger = logger

    @property
    def observers(self) -> list:
        return list(self._observers)

    def notify(self, message: str) -> None:
        if self.logger:
            self.logger.log(f"Publishing '{message}' to {len(self._observers)} reader(s)")
        super().notify(message)


class NewsReader(Observer):
    def __init__(self, name: str, writer: Optional[Writer] = None):
        self.name = name
        self.writer = writer if writer is not None else ConsoleWriter()

    def update(self, message: str) -> None:
        self.writer.write(Message.NEWS_RECEIVED.format(name=self.name, message=message))
