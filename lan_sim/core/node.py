"""Node classes for LAN simulation.

This module defines the elements of the token ring: plain relay nodes,
workstations and printers. Nodes do not hold each other; ``next_name``
names the successor inside the owning network's node table.
"""

from typing import NamedTuple, Optional, TYPE_CHECKING

from lan_sim.core.enums import NodeKind
from lan_sim.core.packet import Packet
from lan_sim.core.report import ReportSink, write_report

if TYPE_CHECKING:
    from lan_sim.core.network import Network

POSTSCRIPT_PREFIX = "!PS"
AUTHOR_KEY = "author:"
TITLE_KEY = "title:"
DEFAULT_AUTHOR = "Unknown"
DEFAULT_TITLE = "Untitled"
ASCII_TITLE = "ASCII DOCUMENT"
# Plain text documents carry the author in a fixed-width field.
ASCII_AUTHOR_SLICE = slice(8, 16)


class DocumentInfo(NamedTuple):
    """Metadata extracted from a print job."""

    postscript: bool
    author: str
    title: str


def _extract_field(message: str, key: str, default: str) -> str:
    start = message.find(key)
    if start < 0:
        return default
    start += len(key)
    end = message.find(".", start)
    if end < 0:
        end = len(message)
    return message[start:end]


def parse_document(message: str) -> DocumentInfo:
    """Classify a document and extract its author and title.

    PostScript documents start with ``!PS`` and may carry ``author:`` and
    ``title:`` fields, each terminated by a ``.`` or the end of the
    message. Both fields are searched from the start of the message, so
    they may appear in any order. Any other document is plain text, whose
    author occupies characters 8 to 16.

    Args:
        message: Document contents.

    Returns:
        The document kind, author and title.
    """
    if message.startswith(POSTSCRIPT_PREFIX):
        return DocumentInfo(
            True,
            _extract_field(message, AUTHOR_KEY, DEFAULT_AUTHOR),
            _extract_field(message, TITLE_KEY, DEFAULT_TITLE),
        )
    author = message[ASCII_AUTHOR_SLICE] if len(message) >= 16 else DEFAULT_AUTHOR
    return DocumentInfo(False, author, ASCII_TITLE)


class Node:
    """Represents a plain node on the token ring.

    Attributes:
        name: Name of the node, unique within a consistent network.
        next_name: Name of the next node on the ring, or None if unlinked.
    """

    kind = NodeKind.NODE

    def __init__(self, name: str, next_name: Optional[str] = None) -> None:
        """Initialize a node.

        Args:
            name: Name of the node.
            next_name: Name of the successor on the ring.
        """
        self.name = name
        self.next_name = next_name

    def relay(self, report: ReportSink) -> None:
        """Record that this node passed a packet on.

        Args:
            report: Sink receiving the trace line.
        """
        write_report(report, "\tNode '", self.name, "' passes packet on.\n")

    def describe_short(self) -> str:
        label = self.kind.label
        return f"{label} {self.name} [{label}]"

    def describe_long(self) -> str:
        return f"{self.kind.label} '{self.name}'"

    def to_xml(self) -> str:
        tag = self.kind.xml_tag
        return f"<{tag}>{self.name}</{tag}>"

    def handle_document(
        self, network: "Network", packet: Packet, report: ReportSink
    ) -> bool:
        """Try to print the document carried by a packet.

        Only printers accept documents; every other node cancels the job.

        Args:
            network: Network the node belongs to.
            packet: Packet carrying the document.
            report: Sink receiving the trace lines.

        Returns:
            True if the document was printed, False otherwise.
        """
        write_report(report, ">>> Destination is not a printer, print job cancelled.\n\n")
        return False

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r} -> {self.next_name!r})"


class WorkStation(Node):
    """A workstation: the only kind of node that may request printing."""

    kind = NodeKind.WORKSTATION


class Printer(Node):
    """A printer: accepts every document that reaches it."""

    kind = NodeKind.PRINTER

    def handle_document(
        self, network: "Network", packet: Packet, report: ReportSink
    ) -> bool:
        info = parse_document(packet.message)
        network.write_accounting(report, packet, info.author, info.title)
        if info.postscript:
            write_report(report, ">>> Postscript job delivered.\n\n")
        else:
            write_report(report, ">>> ASCII Print job delivered.\n\n")
        return True
