"""Network class for LAN simulation.

This module defines the Network class, which owns the token ring and
implements its consistency check and the two request protocols:
broadcasting to every node and routing a print job to a printer.
"""

import logging
import networkx as nx
from typing import Any, Callable, Dict, List, Optional

from lan_sim.core.enums import NodeKind
from lan_sim.core.errors import PreconditionError
from lan_sim.core.node import Node
from lan_sim.core.packet import Packet
from lan_sim.core.report import ReportSink, write_report

logger = logging.getLogger(__name__)

BROADCAST_MESSAGE = "BROADCAST"


class Network:
    """A token ring local area network.

    Packets are passed from one node to the next until they reach their
    destination or have travelled the whole ring.

    Attributes:
        nodes: Node objects keyed by name. Every ``next_name`` refers into
            this table.
        entry_name: Name of the node where traversals start.
        workstations: Registered workstations keyed by name.
        initialized: Whether the network was set up by its constructor.
        graph: NetworkX directed graph mirroring the ring links.
        hooks: Callbacks keyed by event type.
    """

    def __init__(self) -> None:
        """Initialize an empty network.

        The result is initialized but not consistent: nodes must be added,
        linked and registered before any request can be served.
        """
        self.nodes: Dict[str, Node] = {}
        self.entry_name: Optional[str] = None
        self.workstations: Dict[str, Node] = {}
        self.graph = nx.DiGraph()
        self.hooks: Dict[str, List[Callable[..., Any]]] = {
            "packet_hop": [],  # node passes a packet on
            "broadcast_done": [],  # broadcast completed a lap
            "job_accounted": [],  # printer accounted a document
            "job_delivered": [],  # print job accepted by its destination
            "job_rejected": [],  # destination is not a printer
            "job_not_found": [],  # destination is not on the ring
        }
        self.initialized = True

    def add_node(self, node: Node) -> Node:
        """Add a node to the network.

        Args:
            node: The node to add. Its ``next_name`` may already be set.

        Returns:
            The added node.
        """
        if node.name in self.nodes:
            raise ValueError(f"Node {node.name!r} already exists")
        self.nodes[node.name] = node
        self.graph.add_node(node.name, kind=node.kind.label)
        if node.next_name in self.nodes:
            self.graph.add_edge(node.name, node.next_name)
        for other in self.nodes.values():
            if other is not node and other.next_name == node.name:
                self.graph.add_edge(other.name, node.name)
        return node

    def link(self, source: str, destination: str) -> None:
        """Make ``destination`` the successor of ``source`` on the ring.

        Args:
            source: Name of the node whose link is set.
            destination: Name of the new successor.
        """
        if source not in self.nodes or destination not in self.nodes:
            raise ValueError(f"Nodes {source} and/or {destination} do not exist")
        node = self.nodes[source]
        if node.next_name is not None and self.graph.has_edge(source, node.next_name):
            self.graph.remove_edge(source, node.next_name)
        node.next_name = destination
        self.graph.add_edge(source, destination)

    def register_workstation(self, name: str) -> None:
        """Add a node of the network to the workstation directory.

        Args:
            name: Name of the node to register.
        """
        if name not in self.nodes:
            raise ValueError(f"Node {name} does not exist")
        self.workstations[name] = self.nodes[name]

    def set_entry(self, name: str) -> None:
        """Choose the node where traversals start.

        Args:
            name: Name of a node of the network.
        """
        if name not in self.nodes:
            raise ValueError(f"Node {name} does not exist")
        self.entry_name = name

    def node(self, name: str) -> Node:
        return self.nodes[name]

    @property
    def first_node(self) -> Optional[Node]:
        """The entry node, or None if no entry was set."""
        if self.entry_name is None:
            return None
        return self.nodes.get(self.entry_name)

    def is_initialized(self) -> bool:
        return self.initialized

    def has_workstation(self, name: str) -> bool:
        """Answer whether a workstation with the given name is registered.

        Args:
            name: Name of the workstation.

        Returns:
            True if the name is registered and refers to a workstation.
        """
        self._require_initialized()
        node = self.workstations.get(name)
        return node is not None and node.kind is NodeKind.WORKSTATION

    def consistent_network(self) -> bool:
        """Answer whether the network is a consistent token ring.

        A consistent token ring
         - contains at least one workstation and one printer,
         - is circular, returning to the entry node before any other node,
         - has all registered workstations on the ring,
         - has all workstations on the ring registered.

        Returns:
            True if the network is consistent, False otherwise.
        """
        self._require_initialized()
        if not self.workstations:
            return False
        entry = self.first_node
        if entry is None:
            return False

        for name, node in self.workstations.items():
            if node.kind is not NodeKind.WORKSTATION or self.nodes.get(name) is not node:
                logger.debug("Registered workstation %r is not a workstation", name)
                return False

        encountered = set()
        printers_found = 0
        workstations_found = 0
        current = entry
        while current.name not in encountered:
            encountered.add(current.name)
            if current.kind is NodeKind.WORKSTATION:
                workstations_found += 1
            elif current.kind is NodeKind.PRINTER:
                printers_found += 1
            successor = self.nodes.get(current.next_name)
            if successor is None:
                logger.debug("Node %r has no successor on the ring", current.name)
                return False
            current = successor

        if current is not entry:
            logger.debug("Ring does not return to %r but to %r", entry.name, current.name)
            return False
        if printers_found == 0:
            return False
        return workstations_found == len(self.workstations)

    def ring(self, start: Optional[str] = None) -> List[Node]:
        """Return the nodes of the ring in traversal order.

        Args:
            start: Name of the first node, defaults to the entry node.

        Returns:
            Every node on the ring exactly once, starting at ``start``.
        """
        self._require_initialized()
        first = self.first_node if start is None else self.nodes.get(start)
        if first is None:
            raise PreconditionError("Network has no node to start from")
        nodes = [first]
        seen = {first.name}
        current = self.nodes.get(first.next_name)
        while current is not first:
            if current is None or current.name in seen:
                raise PreconditionError(f"Node {first.name!r} is not on a simple ring")
            nodes.append(current)
            seen.add(current.name)
            current = self.nodes.get(current.next_name)
        return nodes

    def request_broadcast(self, report: ReportSink) -> bool:
        """Send a broadcast packet around the whole token ring.

        Every node accepts the packet and passes it on until it arrives
        back at the entry node.

        Args:
            report: Sink receiving a trace of the request.

        Returns:
            True once the broadcast completed its lap.
        """
        self._require_consistent()
        write_report(report, "Broadcast Request\n")

        entry = self.first_node
        packet = Packet(BROADCAST_MESSAGE, origin=entry.name, destination=entry.name)
        current = entry
        while True:
            write_report(report, "\tNode '", current.name, "' accepts broadcast packet.\n")
            self._pass_on(current, packet, report)
            current = self.nodes[current.next_name]
            if current.name == packet.destination:
                break

        write_report(report, ">>> Broadcast travelled whole token ring.\n\n")
        self.call_hooks("broadcast_done", packet)
        return True

    def request_workstation_prints_document(
        self, workstation: str, document: str, printer: str, report: ReportSink
    ) -> bool:
        """Send a document from a workstation to a printer.

        The packet travels the ring until it reaches ``printer`` or arrives
        back at ``workstation`` after a full lap.

        Args:
            workstation: Name of the workstation requesting the service.
            document: Contents to print.
            printer: Name of the node that should print the document.
            report: Sink receiving a trace of the request.

        Returns:
            True if the document was printed, False if the destination was
            not found or is not a printer.
        """
        self._require_consistent()
        if not self.has_workstation(workstation):
            raise PreconditionError(f"Workstation {workstation!r} is not registered")

        write_report(
            report,
            "'", workstation, "' requests printing of '", document,
            "' on '", printer, "' ...\n",
        )
        packet = Packet(document, origin=workstation, destination=printer)

        start = self.workstations[workstation]
        self._pass_on(start, packet, report)
        current = self.nodes[start.next_name]
        while current.name != packet.destination and current.name != packet.origin:
            self._pass_on(current, packet, report)
            current = self.nodes[current.next_name]

        if current.name == packet.destination:
            delivered = current.handle_document(self, packet, report)
            self.call_hooks("job_delivered" if delivered else "job_rejected", packet, current)
            return delivered

        write_report(report, ">>> Destination not found, print job cancelled.\n\n")
        self.call_hooks("job_not_found", packet)
        return False

    def write_accounting(
        self, report: ReportSink, packet: Packet, author: str, title: str
    ) -> None:
        """Record the author and title of a printed document.

        Args:
            report: Sink receiving the accounting line.
            packet: Packet carrying the document.
            author: Author of the document.
            title: Title of the document.
        """
        write_report(
            report, "\tAccounting -- author = '", author, "' -- title = '", title, "'\n"
        )
        self.call_hooks("job_accounted", packet, author, title)

    def register_hook(self, event_type: str, callback: Callable[..., Any]) -> None:
        """Register a callback function for a specific event type.

        Args:
            event_type: The type of event to register for.
            callback: The function to call when the event occurs.
        """
        if event_type not in self.hooks:
            raise ValueError(f"Unknown hook type: {event_type}")
        self.hooks[event_type].append(callback)

    def call_hooks(self, event_type: str, *args: Any, **kwargs: Any) -> None:
        """Call all registered callbacks for the given event type.

        Args:
            event_type: The type of event that occurred.
            *args, **kwargs: Arguments to pass to the callback functions.
        """
        if event_type in self.hooks:
            for callback in self.hooks[event_type]:
                callback(*args, **kwargs)

    def _pass_on(self, node: Node, packet: Packet, report: ReportSink) -> None:
        logger.debug("%s passes %r on to %r", node.describe_long(), packet.message, node.next_name)
        node.relay(report)
        self.call_hooks("packet_hop", packet, node)

    def _require_initialized(self) -> None:
        if not self.is_initialized():
            raise PreconditionError("Network is not initialized")

    def _require_consistent(self) -> None:
        if not self.consistent_network():
            raise PreconditionError("Network is not a consistent token ring")

    def __len__(self) -> int:
        return len(self.nodes)

    def __contains__(self, name: object) -> bool:
        return name in self.nodes

    def __str__(self) -> str:
        from lan_sim.utils.rendering import render_text

        return render_text(self)

    def __repr__(self) -> str:
        return f"Network({len(self.nodes)} nodes, entry={self.entry_name!r})"
