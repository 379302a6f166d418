import logging
from typing import Iterator, List, Optional, Tuple

from ..models import Command, SendCommand
from .grammar import parse_line

logger = logging.getLogger(__name__)


class NSUpdateQueue:
    """Ordered commands of one batch, closed by a ``send`` command."""

    def __init__(self):
        self.commands: List[Command] = []
        self.send = False
        self.lines_consumed = 0

    def __len__(self) -> int:
        return len(self.commands)

    def __iter__(self) -> Iterator[Command]:
        return iter(self.commands)

    def __repr__(self) -> str:
        return f"NSUpdateQueue(commands={self.commands!r}, send={self.send})"

    def has_send(self) -> bool:
        return self.send

    def push(self, command: Command):
        if self.send:
            raise ValueError("Cannot append to a batch closed by 'send'")
        self.commands.append(command)
        if isinstance(command, SendCommand):
            self.send = True

    def parse_text(self, text: str, start_line: int = 1) -> Optional[str]:
        """
        Parse commands from text until a ``send`` line or the end of input.

        Args:
            text: nsupdate text, any line ending style
            start_line: Line number of the first line of ``text``

        Returns:
            The unconsumed text after the ``send`` line, or None if nothing
            but whitespace remains

        Raises:
            ParseError: If any consumed line is malformed
        """
        lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")

        position = 0
        while not self.send and position < len(lines):
            command = parse_line(lines[position], start_line + position)
            position += 1
            if command is not None:
                self.push(command)

        self.lines_consumed += position
        remaining = "\n".join(lines[position:])
        if not remaining.strip():
            return None
        return remaining


def parse_text(text: str, start_line: int = 1) -> Tuple[NSUpdateQueue, Optional[str]]:
    """Parse one batch from text and return it with the unconsumed remainder."""
    batch = NSUpdateQueue()
    remaining = batch.parse_text(text, start_line)
    logger.debug(f"Parsed {len(batch)} commands from {batch.lines_consumed} lines")
    return batch, remaining
