"""Enumerations for LAN simulation.

This module defines enumerations used throughout the LAN simulator.
"""

from enum import Enum


class NodeKind(Enum):
    """Enum for the kinds of node found on the token ring.

    Attributes:
        NODE: Plain relay node, forwards packets only.
        WORKSTATION: Workstation that may originate print requests.
        PRINTER: Printer that accepts print jobs.
    """

    NODE = 1
    WORKSTATION = 2
    PRINTER = 3

    @property
    def label(self) -> str:
        """Human-readable kind name."""
        return self.name.capitalize()

    @property
    def xml_tag(self) -> str:
        return self.name.lower()
