"""Rendering utilities for LAN simulation.

This module renders the token ring as plain text, HTML or XML. Rendering
walks the ring once, starting at the entry node unless told otherwise.
"""

from typing import Optional

from lan_sim.core.network import Network

HTML_HEADER = (
    "<HTML>\n<HEAD>\n<TITLE>LAN Simulation</TITLE>\n</HEAD>\n<BODY>\n"
    "<H1>LAN SIMULATION</H1>"
)
XML_HEADER = '<?xml version="1.0" encoding="UTF-8"?>\n\n'


def render_text(network: Network, start: Optional[str] = None) -> str:
    """Render the ring as a single line of text.

    Args:
        network: Network to render.
        start: Name of the first node, defaults to the entry node.

    Returns:
        Each node followed by ``" -> "``, terminated by ``" ... "``.
    """
    parts = [f"{node.describe_short()} -> " for node in network.ring(start)]
    parts.append(" ... ")
    return "".join(parts)


def render_html(network: Network, start: Optional[str] = None) -> str:
    """Render the ring as an HTML page with one list item per node.

    Args:
        network: Network to render.
        start: Name of the first node, defaults to the entry node.

    Returns:
        The HTML document.
    """
    parts = [HTML_HEADER, "\n\n<UL>"]
    for node in network.ring(start):
        parts.append(f"\n\t<LI> {node.describe_short()} </LI>")
    parts.append("\n\t<LI>...</LI>\n</UL>\n\n</BODY>\n</HTML>\n")
    return "".join(parts)


def render_xml(network: Network, start: Optional[str] = None) -> str:
    """Render the ring as an XML document.

    Args:
        network: Network to render.
        start: Name of the first node, defaults to the entry node.

    Returns:
        The XML document.
    """
    parts = [XML_HEADER, "<network>"]
    for node in network.ring(start):
        parts.append(f"\n\t{node.to_xml()}")
    parts.append("\n</network>")
    return "".join(parts)


RENDERERS = {
    "text": render_text,
    "html": render_html,
    "xml": render_xml,
}
