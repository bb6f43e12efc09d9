from typing import Optional

from behavioral.chain import AuthHandler, LogHandler
from behavioral.command import Light, LightOnCommand
from behavioral.iterator import NameRepository
from behavioral.mediator import Chat, ChatUser
from behavioral.memento import Originator
from behavioral.observer import NewsAgency, NewsReader
from behavioral.state import Context, StartState, StopState
from behavioral.strategy import FastStrategy, StrategyContext
from behavioral.template_method import Football
from behavioral.visitor import Book, Pen, PriceVisitor
from common.config import *
from common.patterns import Writer
from common.utils import ConsoleWriter, Logger


#region Demonstrations
def demo_chain(writer: Writer, logger: Optional[Logger] = None):
    auth = AuthHandler(writer, logger)
    auth.set_next(LogHandler(writer, logger))
    auth.handle(Request.LOG)

def demo_command(writer: Writer, logger: Optional[Logger] = None):
    command = LightOnCommand(Light(writer))
    command.execute()

def demo_iterator(writer: Writer, logger: Optional[Logger] = None):
    for name in NameRepository():
        writer.write(name)

def demo_mediator(writer: Writer, logger: Optional[Logger] = None):
    chat = Chat(logger)
    sender, receiver = (ChatUser(chat, name, writer) for name in CHAT_USERS)
    chat.add_user(sender)
    chat.add_user(receiver)
    sender.send(CHAT_GREETING)

def demo_memento(writer: Writer, logger: Optional[Logger] = None):
    origin = Originator()
    origin.state = MEMENTO_FIRST_STATE
    saved = origin.save()
    origin.state = MEMENTO_SECOND_STATE
    origin.restore(saved)
    writer.write(Message.CURRENT_STATE.format(state=origin.state))

def demo_observer(writer: Writer, logger: Optional[Logger] = None):
    agency = NewsAgency(logger)
    agency.attach(NewsReader(NEWS_READER, writer))
    agency.notify(NEWS_HEADLINE)

def demo_state(writer: Writer, logger: Optional[Logger] = None):
    context = Context(logger)
    context.set_state(StartState(writer))
    context.set_state(StopState(writer))

def demo_strategy(writer: Writer, logger: Optional[Logger] = None):
    context = StrategyContext(logger=logger)
    context.set_strategy(FastStrategy(writer))
    context.run()

def demo_template_method(writer: Writer, logger: Optional[Logger] = None):
    Football(writer).play()

def demo_visitor(writer: Writer, logger: Optional[Logger] = None):
    visitor = PriceVisitor(writer)
    for item in (Book(), Pen()):
        item.accept(visitor)
#endregion

DEMOS = {
    Section.CHAIN: demo_chain,
    Section.COMMAND: demo_command,
    Section.ITERATOR: demo_iterator,
    Section.MEDIATOR: demo_mediator,
    Section.MEMENTO: demo_memento,
    Section.OBSERVER: demo_observer,
    Section.STATE: demo_state,
    Section.STRATEGY: demo_strategy,
    Section.TEMPLATE_METHOD: demo_template_method,
    Section.VISITOR: demo_visitor,
}


def main(writer: Optional[Writer] = None, logger: Optional[Logger] = None) -> None:
    """
    Run every demonstration in order, each under its own header.
    :param writer: Output sink. Defaults to the console, mirrored into the demo log.
    :param logger: Logger for internal events. Defaults to the demo log when writing to the console.
    """
    if writer is None:
        logger = logger or Logger(DEMO_LOG_NAME)
        writer = ConsoleWriter(logger)

    for index, title in enumerate(SECTION_ORDER):
        if index > 0:
            writer.write("")
        writer.write(HEADER_TEMPLATE.format(title=title))
        DEMOS[title](writer, logger)


if __name__ == "__main__":
    main()
