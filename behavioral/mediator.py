import weakref
from abc import ABC, abstractmethod
from typing import List, Optional

from common.config import Message
from common.patterns import Writer
from common.utils import ConsoleWriter, Logger


class ChatMediator(ABC):
    @abstractmethod
    def add_user(self, user: "User") -> None:
        pass

    @abstractmethod
    def send_message(self, message: str, sender: "User") -> None:
        pass


class Chat(ChatMediator):
    """
    Mediator: routes each message to every registered user except its sender.
    """

    def __init__(self, logger: Optional[Logger] = None):
        self._users: List["User"] = []
        self.logger = logger

    @property
    def users(self) -> List["User"]:
        return list(self._users)

    def add_user(self, user: "User") -> None:
        """Register a user. A user added twice receives each message twice."""
        self._users.append(user)
        if self.logger:
            self.logger.log(f"User {user.name} joined the chat")

    def send_message(self, message: str, sender: "User") -> None:
        for user in self._users:
            if user is not sender:
                user.receive(message)


class User(ABC):
    """A chat participant. Holds only a weak reference to its chat."""

    def __init__(self, mediator: ChatMediator, name: str, writer: Optional[Writer] = None):
        self._mediator = weakref.ref(mediator)
        self.name = name
        self.writer = writer if writer is not None else ConsoleWriter()

    @property
    def mediator(self) -> ChatMediator:
        mediator = self._mediator()
        if mediator is None:
            raise ReferenceError(f"Chat for user {self.name} no longer exists")
        return mediator

    @abstractmethod
    def send(self, message: str) -> None:
        pass

    @abstractmethod
    def receive(self, message: str) -> None:
        pass


class ChatUser(User):
    def send(self, message: str) -> None:
        self.writer.write(Message.USER_SENT.format(name=self.name, message=message))
        self.mediator.send_message(message, self)

    def receive(self, message: str) -> None:
        self.writer.write(Message.USER_RECEIVED.format(name=self.name, message=message))
