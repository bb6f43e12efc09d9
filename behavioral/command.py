from typing import Optional

from common.config import Message
from common.patterns import Command, Writer
from common.utils import ConsoleWriter


class Light:
    """Receiver: the device the command switches on."""

    def __init__(self, writer: Optional[Writer] = None):
        self.writer = writer if writer is not None else ConsoleWriter()

    def on(self) -> None:
        self.writer.write(Message.LIGHT_ON)


class LightOnCommand(Command):
    def __init__(self, light: Light):
        self._light = light

    def execute(self) -> None:
        self._light.on()
