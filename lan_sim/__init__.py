"""LAN simulation package.

Simulates a token ring local area network: a closed loop of named nodes
around which packets are broadcast or routed from workstations to
printers.
"""

from lan_sim.core.enums import NodeKind
from lan_sim.core.errors import PreconditionError
from lan_sim.core.network import Network
from lan_sim.core.node import DocumentInfo, Node, Printer, WorkStation, parse_document
from lan_sim.core.packet import Packet
from lan_sim.core.report import ReportSink, StreamReport, StringReport
from lan_sim.core.topology import (
    NetworkBuilder,
    default_example,
    load_network,
    network_from_config,
)

__all__ = [
    "DocumentInfo",
    "Network",
    "NetworkBuilder",
    "Node",
    "NodeKind",
    "Packet",
    "PreconditionError",
    "Printer",
    "ReportSink",
    "StreamReport",
    "StringReport",
    "WorkStation",
    "default_example",
    "load_network",
    "network_from_config",
    "parse_document",
]
