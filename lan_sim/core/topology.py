"""Topology construction for LAN simulation.

This module builds consistent networks, either programmatically through
NetworkBuilder or from a JSON topology description.
"""

import json
import logging
from typing import Any, Dict, List, Type

from lan_sim.core.errors import PreconditionError
from lan_sim.core.network import Network
from lan_sim.core.node import Node, Printer, WorkStation

logger = logging.getLogger(__name__)

NODE_TYPES: Dict[str, Type[Node]] = {
    "node": Node,
    "workstation": WorkStation,
    "printer": Printer,
}


class NetworkBuilder:
    """Builds a consistent token ring from nodes listed in ring order.

    Example:
        network = NetworkBuilder().workstation("Filip").printer("Andy").build()
    """

    def __init__(self) -> None:
        self._nodes: List[Node] = []

    def add(self, node: Node) -> "NetworkBuilder":
        """Append a node to the ring.

        Args:
            node: The node to append after the previously added one.

        Returns:
            The builder, for chaining.
        """
        self._nodes.append(node)
        return self

    def relay(self, name: str) -> "NetworkBuilder":
        return self.add(Node(name))

    def workstation(self, name: str) -> "NetworkBuilder":
        return self.add(WorkStation(name))

    def printer(self, name: str) -> "NetworkBuilder":
        return self.add(Printer(name))

    def build(self) -> Network:
        """Link the nodes into a ring and register the workstations.

        The first node added becomes the entry node.

        Returns:
            A consistent Network.

        Raises:
            ValueError: If two nodes share a name.
            PreconditionError: If the ring lacks a workstation or a printer.
        """
        network = Network()
        for node in self._nodes:
            network.add_node(node)
        for node, successor in zip(self._nodes, self._nodes[1:] + self._nodes[:1]):
            network.link(node.name, successor.name)
        for node in self._nodes:
            if isinstance(node, WorkStation):
                network.register_workstation(node.name)
        if self._nodes:
            network.set_entry(self._nodes[0].name)

        if not network.consistent_network():
            raise PreconditionError(
                "A token ring needs at least one workstation and one printer"
            )
        logger.debug("Built %r", network)
        return network


def default_example() -> Network:
    """Return a network that may serve as starting point for experiments.

    The network looks as follows::

        Workstation Filip [Workstation] -> Node n1 [Node]
        -> Workstation Hans [Workstation] -> Printer Andy [Printer] -> ...

    Returns:
        A consistent Network.
    """
    return (
        NetworkBuilder()
        .workstation("Filip")
        .relay("n1")
        .workstation("Hans")
        .printer("Andy")
        .build()
    )


def network_from_config(config: Dict[str, Any]) -> Network:
    """Build a network from a topology description.

    Args:
        config: Mapping with a ``nodes`` list, in ring order, of mappings
            with a ``name`` and a ``kind`` (``node``, ``workstation`` or
            ``printer``).

    Returns:
        A consistent Network.
    """
    if not isinstance(config, dict):
        raise ValueError("Topology config must be a mapping")
    entries = config.get("nodes")
    if not isinstance(entries, list):
        raise ValueError("Topology config needs a 'nodes' list")

    builder = NetworkBuilder()
    for entry in entries:
        if not isinstance(entry, dict):
            raise ValueError(f"Node entry must be a mapping: {entry!r}")
        name = entry.get("name")
        if not name:
            raise ValueError(f"Node entry without a name: {entry}")
        kind = entry.get("kind", "node")
        if not isinstance(kind, str):
            raise ValueError(f"Node kind must be a string for node {name!r}")
        kind = kind.lower()
        if kind not in NODE_TYPES:
            raise ValueError(f"Unknown node kind {kind!r} for node {name!r}")
        builder.add(NODE_TYPES[kind](name))
    return builder.build()


def load_network(filename: str) -> Network:
    """Load a network from a JSON topology file.

    Args:
        filename: Path of the JSON file.

    Returns:
        A consistent Network.
    """
    with open(filename) as f:
        config = json.load(f)
    logger.info("Loading topology from %s", filename)
    return network_from_config(config)
