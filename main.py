import argparse
import logging
import sys

from lan_sim.core.errors import PreconditionError
from lan_sim.core.network import Network
from lan_sim.core.report import ReportSink, StreamReport, write_report
from lan_sim.core.topology import default_example, load_network
from lan_sim.utils.accounting import JobLedger
from lan_sim.utils.rendering import RENDERERS

SCENARIOS = [
    ("Print Success", "Filip", "Hello World", "Andy"),
    ("PrintFailure (UnkownPrinter)", "Filip", "Hello World", "UnknownPrinter"),
    ("PrintFailure (print on Workstation)", "Filip", "Hello World", "Hans"),
    ("PrintFailure (print on Node)", "Filip", "Hello World", "n1"),
    ("Print Success Postscript", "Filip", "!PS Hello World in postscript", "Andy"),
    ("Print Failure Postscript", "Filip", "!PS Hello World in postscript", "Hans"),
]


def run_scenario(network: Network, report: ReportSink) -> None:
    """Run the reference print and broadcast scenarios on the default ring.

    Args:
        network: Network built by default_example().
        report: Sink receiving the trace.
    """
    for title, workstation, document, printer in SCENARIOS:
        write_report(report, f"\n\n---------------- SCENARIO: {title} ----------------\n")
        network.request_workstation_prints_document(workstation, document, printer, report)
    write_report(report, "\n\n---------------- SCENARIO: Broadcast Success ----------------\n")
    network.request_broadcast(report)


def main():
    """Main function to run LAN simulations"""
    parser = argparse.ArgumentParser(description="Token Ring LAN Simulation")
    parser.add_argument(
        "--config", help="JSON topology file (default: built-in example network)"
    )
    parser.add_argument(
        "--render", choices=sorted(RENDERERS), help="Render the ring in the given format"
    )
    parser.add_argument(
        "--broadcast", action="store_true", help="Broadcast a packet around the ring"
    )
    parser.add_argument(
        "--print",
        nargs=3,
        action="append",
        metavar=("WORKSTATION", "DOCUMENT", "PRINTER"),
        dest="print_jobs",
        help="Send DOCUMENT from WORKSTATION to PRINTER (repeatable)",
    )
    parser.add_argument(
        "--scenario", action="store_true", help="Run the reference scenarios"
    )
    parser.add_argument("--ledger", help="Save the accounting ledger to a JSON file")
    parser.add_argument(
        "--visualize",
        nargs="?",
        const="",
        help="Draw the ring, saving it to the given file if one is named",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    actions = [args.render, args.broadcast, args.print_jobs, args.scenario, args.visualize]
    if all(action is None or action is False for action in actions):
        parser.print_help()
        return 0

    network = load_network(args.config) if args.config else default_example()
    ledger = JobLedger(network)
    report = StreamReport(sys.stdout)

    if args.render:
        print(RENDERERS[args.render](network))

    try:
        for workstation, document, printer in args.print_jobs or []:
            if not network.has_workstation(workstation):
                print(f"Unknown workstation: {workstation}", file=sys.stderr)
                return 1
            network.request_workstation_prints_document(workstation, document, printer, report)

        if args.broadcast:
            network.request_broadcast(report)

        if args.scenario:
            run_scenario(network, report)
    except PreconditionError as exc:
        print(f"Request failed: {exc}", file=sys.stderr)
        return 1

    if args.ledger:
        ledger.save_to_json(args.ledger)
        print(f"Ledger saved to {args.ledger}")

    if args.visualize is not None:
        from lan_sim.utils.visualization import draw_ring

        draw_ring(network, args.visualize or None)

    return 0


if __name__ == "__main__":
    sys.exit(main())
