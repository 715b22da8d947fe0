"""Visualization utilities for LAN simulation.

This module draws the token ring with NetworkX and Matplotlib, placing the
nodes on a circle in ring order and colouring them by kind.
"""

import os
from typing import Dict, Optional, Tuple

import matplotlib.pyplot as plt
import networkx as nx
import numpy as np

from lan_sim.core.enums import NodeKind
from lan_sim.core.network import Network

NODE_COLORS: Dict[NodeKind, str] = {
    NodeKind.NODE: "lightgray",
    NodeKind.WORKSTATION: "lightblue",
    NodeKind.PRINTER: "lightgreen",
}


def ring_layout(network: Network) -> Dict[str, np.ndarray]:
    """Place the ring's nodes on the unit circle in traversal order.

    Args:
        network: Network whose ring is laid out.

    Returns:
        Position of each node keyed by name, entry node at the top.
    """
    nodes = network.ring()
    angles = np.pi / 2 - np.linspace(0, 2 * np.pi, len(nodes), endpoint=False)
    return {
        node.name: np.array([np.cos(angle), np.sin(angle)])
        for node, angle in zip(nodes, angles)
    }


def draw_ring(
    network: Network,
    filename: Optional[str] = None,
    figsize: Tuple[int, int] = (8, 8),
    block: bool = True,
) -> None:
    """Save or show a drawing of the token ring.

    Args:
        network: Network to draw.
        filename: Output filename, or None to show it immediately.
        figsize: Figure size as (width, height) in inches.
        block: Whether showing the figure blocks until it is closed.
    """
    fig = plt.figure(figsize=figsize)

    graph: nx.DiGraph = network.graph
    pos = ring_layout(network)
    ring_names = list(pos)
    colors = [NODE_COLORS[network.node(name).kind] for name in ring_names]

    nx.draw_networkx_nodes(
        graph, pos, nodelist=ring_names, node_size=1500, node_color=colors
    )
    nx.draw_networkx_edges(
        graph,
        pos,
        edgelist=[(name, network.node(name).next_name) for name in ring_names],
        edge_color="gray",
        arrows=True,
        arrowsize=20,
        node_size=1500,
        connectionstyle="arc3,rad=0.1",
    )
    nx.draw_networkx_labels(graph, pos, labels={name: name for name in ring_names}, font_size=12)

    plt.title("LAN Simulation Token Ring", pad=20)
    plt.axis("off")
    plt.tight_layout()

    if filename:
        directory = os.path.dirname(filename)
        if directory:
            os.makedirs(directory, exist_ok=True)
        fig.savefig(filename, bbox_inches="tight")
        plt.close(fig)
    else:
        plt.show(block=block)
        if not block:
            plt.pause(0.001)
