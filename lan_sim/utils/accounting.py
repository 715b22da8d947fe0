"""Accounting utilities for LAN simulation.

This module provides a ledger that listens to a network's hooks and keeps
track of printed documents and routing outcomes, and helpers to export
it to JSON or CSV.
"""

import csv
import json
import os
from collections import Counter
from dataclasses import asdict, dataclass
from typing import Any, Dict, List

from lan_sim.core.network import Network
from lan_sim.core.node import Node
from lan_sim.core.packet import Packet


@dataclass
class JobRecord:
    """A document accounted by a printer.

    Attributes:
        origin: Workstation that requested the job.
        destination: Printer that printed it.
        author: Author extracted from the document.
        title: Title extracted from the document.
    """

    origin: str
    destination: str
    author: str
    title: str


class JobLedger:
    """Collects print accounting and request outcomes from a network.

    Attributes:
        jobs: Accounted documents, in order of printing.
        outcomes: Number of requests per outcome.
        hops: Number of relays per node name.
    """

    def __init__(self, network: Network) -> None:
        """Attach the ledger to a network.

        Args:
            network: Network whose hooks feed the ledger.
        """
        self.jobs: List[JobRecord] = []
        self.outcomes: Counter = Counter()
        self.hops: Counter = Counter()

        network.register_hook("packet_hop", self._on_hop)
        network.register_hook("broadcast_done", self._on_broadcast)
        network.register_hook("job_accounted", self._on_accounted)
        network.register_hook("job_delivered", self._outcome("delivered"))
        network.register_hook("job_rejected", self._outcome("rejected"))
        network.register_hook("job_not_found", self._outcome("not_found"))

    def _on_hop(self, packet: Packet, node: Node) -> None:
        self.hops[node.name] += 1

    def _on_broadcast(self, packet: Packet) -> None:
        self.outcomes["broadcasts"] += 1

    def _on_accounted(self, packet: Packet, author: str, title: str) -> None:
        self.jobs.append(JobRecord(packet.origin, packet.destination, author, title))

    def _outcome(self, name: str):
        def record(*args: Any) -> None:
            self.outcomes[name] += 1

        return record

    def summary(self) -> Dict[str, Any]:
        """Summarize the ledger.

        Returns:
            Dictionary with outcome counts, relays per node and the jobs.
        """
        return {
            "delivered": self.outcomes["delivered"],
            "rejected": self.outcomes["rejected"],
            "not_found": self.outcomes["not_found"],
            "broadcasts": self.outcomes["broadcasts"],
            "hops": dict(self.hops),
            "jobs": [asdict(job) for job in self.jobs],
        }

    def save_to_json(self, filename: str = "results/ledger.json") -> None:
        """Save the ledger summary to a JSON file.

        Args:
            filename: Output filename.
        """
        _ensure_parent(filename)
        with open(filename, "w") as f:
            json.dump(self.summary(), f, indent=2)

    def save_to_csv(self, filename: str = "results/jobs.csv") -> None:
        """Save the accounted jobs to a CSV file.

        Args:
            filename: Output filename.
        """
        _ensure_parent(filename)
        with open(filename, "w", newline="") as f:
            writer = csv.writer(f)
            writer.writerow(["Origin", "Destination", "Author", "Title"])
            for job in self.jobs:
                writer.writerow([job.origin, job.destination, job.author, job.title])


def _ensure_parent(filename: str) -> None:
    directory = os.path.dirname(filename)
    if directory:
        os.makedirs(directory, exist_ok=True)
