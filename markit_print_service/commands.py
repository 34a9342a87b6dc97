"""
Command Sequence
================

Ordered ESC/POS directives for one receipt or report. Builders append to a
sequence; the USB gateway consumes it once and replays it on the printer.
"""

from dataclasses import dataclass
from typing import Any, Iterator, List, Optional, Tuple


@dataclass(frozen=True)
class Command:
    """A single printer directive."""

    # text, raw, feed, line, qr, align, style, size, cut
    op: str
    value: Any = None


class CommandSequence:
    """Write-once list of printer directives."""

    def __init__(self):
        self._commands: List[Command] = []
        self._consumed = False

    def _add(self, op: str, value: Any = None) -> 'CommandSequence':
        if self._consumed:
            raise RuntimeError('Command sequence already sent to the printer')
        self._commands.append(Command(op, value))
        return self

    def text(self, line: Any) -> 'CommandSequence':
        """Print one line (a newline is appended when sent)."""
        return self._add('text', str(line))

    def raw(self, data: bytes) -> 'CommandSequence':
        return self._add('raw', bytes(data))

    def feed(self, lines: int = 1) -> 'CommandSequence':
        return self._add('feed', lines)

    def line(self, width: int) -> 'CommandSequence':
        """Print a dashed separator ``width`` characters wide."""
        return self._add('line', width)

    def qr(self, payload: str) -> 'CommandSequence':
        return self._add('qr', payload)

    def align(self, align: str) -> 'CommandSequence':
        """``'left'``, ``'center'`` or ``'right'``."""
        return self._add('align', align)

    def bold(self, enabled: bool = True) -> 'CommandSequence':
        return self._add('style', enabled)

    def size(self, double: bool) -> 'CommandSequence':
        """Switch between double width+height and normal text size."""
        return self._add('size', double)

    def cut(self) -> 'CommandSequence':
        return self._add('cut')

    # -------------------------------------------------------------------------
    # Inspection
    # -------------------------------------------------------------------------

    @property
    def consumed(self) -> bool:
        return self._consumed

    def __len__(self) -> int:
        return len(self._commands)

    def __iter__(self) -> Iterator[Command]:
        return iter(self._commands)

    def lines(self) -> List[str]:
        """Text lines in print order."""
        return [c.value for c in self._commands if c.op == 'text']

    def qr_payload(self) -> Optional[str]:
        for command in self._commands:
            if command.op == 'qr':
                return command.value
        return None

    def consume(self) -> Tuple[Command, ...]:
        """Hand the directives over for printing; allowed once."""
        if self._consumed:
            raise RuntimeError('Command sequence already sent to the printer')
        self._consumed = True
        return tuple(self._commands)
