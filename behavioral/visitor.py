from abc import ABC, abstractmethod
from typing import Optional

from common.config import BOOK_PRICE, CURRENCY, PEN_PRICE, Message
from common.patterns import Writer
from common.utils import ConsoleWriter


class Element(ABC):
    @abstractmethod
    def accept(self, visitor: "Visitor") -> None:
        pass


class Book(Element):
    def accept(self, visitor: "Visitor") -> None:
        visitor.visit_book(self)


class Pen(Element):
    def accept(self, visitor: "Visitor") -> None:
        visitor.visit_pen(self)


class Visitor(ABC):
    """One visit method per element kind. A new element kind means a new method here."""

    @abstractmethod
    def visit_book(self, book: Book) -> None:
        pass

    @abstractmethod
    def visit_pen(self, pen: Pen) -> None:
        pass


class PriceVisitor(Visitor):
    def __init__(self, writer: Optional[Writer] = None):
        self.writer = writer if writer is not None else ConsoleWriter()

    def visit_book(self, book: Book) -> None:
        self.writer.write(Message.BOOK_PRICE.format(price=BOOK_PRICE, currency=CURRENCY))

    def visit_pen(self, pen: Pen) -> None:
        self.writer.write(Message.PEN_PRICE.format(price=PEN_PRICE, currency=CURRENCY))
