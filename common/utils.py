import os
import datetime
from typing import List, Optional

from common.config import LOGS_DIR_NAME

project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


class Logger:
    """
    Logger for demo events, writing to a text file and optionally printing to console.
    """

    def __init__(self, name: str) -> None:
        logs_dir = os.path.join(project_root, LOGS_DIR_NAME)
        if not os.path.exists(logs_dir):
            os.makedirs(logs_dir)

        self.name = name
        self.log_file = os.path.join(logs_dir, f"{name}.txt")

        with open(self.log_file, 'w', encoding='utf-8') as f:
            timestamp = get_current_time_string()
            f.write(f"[{timestamp}] {name} started\n")

    def log(self, message: str, also_print: bool = False) -> None:
        """
        Log a message to the log file (and optionally print it to the console).
        :param message: Message to log.
        :param also_print: Whether to print the message to console as well.
        """
        timestamp = get_current_time_string()
        log_entry = f"[{timestamp}] {message}\n"

        with open(self.log_file, 'a', encoding='utf-8') as f:
            f.write(log_entry)

        if also_print:
            print(f"[{timestamp}] {message}")


class ConsoleWriter:
    """
    Output sink that prints each line to the console, mirroring it into a logger when one is given.
    """

    def __init__(self, logger: Optional[Logger] = None) -> None:
        self.logger = logger

    def write(self, line: str) -> None:
        print(line)
        if self.logger:
            self.logger.log(line)


class BufferWriter:
    """Output sink that keeps lines in memory."""

    def __init__(self) -> None:
        self.lines: List[str] = []

    def write(self, line: str) -> None:
        self.lines.append(line)

    def getvalue(self) -> str:
        return "\n".join(self.lines)


def get_current_time_string() -> str:
    """
    Get the current time as a string formatted HH:MM:SS.
    :return: Current time string.
    """
    return datetime.datetime.now().strftime("%H:%M:%S")
