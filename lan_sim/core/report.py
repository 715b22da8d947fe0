"""Report sinks for LAN simulation.

The network writes a human-readable trace of every request to a report
sink. Writing is best-effort: a failing sink never changes the outcome of
the operation being traced.
"""

import logging
from abc import ABC, abstractmethod
from typing import List, TextIO

logger = logging.getLogger(__name__)


class ReportSink(ABC):
    """Abstract append-only destination for trace text."""

    @abstractmethod
    def append(self, text: str) -> None:
        """Append text to the report.

        Args:
            text: Text to append.

        Raises:
            Exception: Any failure of the underlying destination. The core
                discards such failures.
        """
        pass


class StringReport(ReportSink):
    """Report sink that collects trace text in memory."""

    def __init__(self) -> None:
        self._parts: List[str] = []

    def append(self, text: str) -> None:
        self._parts.append(text)

    def getvalue(self) -> str:
        """Return everything written so far as a single string."""
        return "".join(self._parts)

    def lines(self) -> List[str]:
        """Return the report split into lines, line endings kept."""
        return self.getvalue().splitlines(keepends=True)

    def clear(self) -> None:
        self._parts.clear()

    def __repr__(self) -> str:
        return f"StringReport({len(self.getvalue())} chars)"


class StreamReport(ReportSink):
    """Report sink that writes to a text stream such as stdout or a file."""

    def __init__(self, stream: TextIO) -> None:
        """Initialize the sink.

        Args:
            stream: Writable text stream.
        """
        self.stream = stream

    def append(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()


def write_report(report: ReportSink, *parts: str) -> None:
    """Write parts to a report, discarding sink failures.

    Args:
        report: Destination sink.
        *parts: Text fragments written in order.
    """
    try:
        for part in parts:
            report.append(part)
    except Exception as exc:
        logger.debug("Discarding report write failure: %s", exc)
