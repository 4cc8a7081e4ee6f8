"""
Output sinks for describe() and greet().
"""

import sys
from typing import List, Optional, TextIO

from .interfaces import OutputSink


class ConsoleSink(OutputSink):
    """Writes lines to a text stream, stdout unless told otherwise."""
    
    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream
    
    def write_line(self, text: str) -> None:
        # Resolve stdout lazily so redirection after construction is honoured.
        print(text, file=self._stream or sys.stdout)


class BufferSink(OutputSink):
    """Collects lines in memory."""
    
    def __init__(self):
        self._lines: List[str] = []
    
    @property
    def lines(self) -> List[str]:
        return self._lines.copy()
    
    def write_line(self, text: str) -> None:
        self._lines.append(text)
    
    def getvalue(self) -> str:
        return "".join(f"{line}\n" for line in self._lines)
    
    def clear(self) -> None:
        self._lines.clear()
