"""Packet class for LAN simulation.

This module defines the Packet class, which represents a message
travelling around the token ring.
"""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Packet:
    """Represents a packet in flight on the token ring.

    Attributes:
        message: Payload carried by the packet (document or broadcast text).
        destination: Name of the node the packet is addressed to.
        origin: Name of the node that sent the packet.
    """

    message: str
    destination: str
    origin: str = ""

    def with_origin(self, origin: str) -> "Packet":
        """Return a copy of this packet sent from another node.

        Args:
            origin: Name of the new originating node.

        Returns:
            A new Packet with the same message and destination.
        """
        return replace(self, origin=origin)
