import csv
import json

from lan_sim.utils.accounting import JobLedger, JobRecord


def run_requests(network, report):
    network.request_workstation_prints_document("Filip", "!PS author:Bob.title:Report.", "Andy", report)
    network.request_workstation_prints_document("Hans", "Hello World, this is Bart", "Andy", report)
    network.request_workstation_prints_document("Filip", "Hello World", "Hans", report)
    network.request_workstation_prints_document("Filip", "Hello World", "Nobody", report)
    network.request_broadcast(report)


def test_ledger_records_jobs_and_outcomes(network, report):
    ledger = JobLedger(network)
    run_requests(network, report)

    assert ledger.jobs == [
        JobRecord("Filip", "Andy", "Bob", "Report"),
        JobRecord("Hans", "Andy", "rld, thi", "ASCII DOCUMENT"),
    ]
    summary = ledger.summary()
    assert summary["delivered"] == 2
    assert summary["rejected"] == 1
    assert summary["not_found"] == 1
    assert summary["broadcasts"] == 1
    # Filip relays for three print requests plus the broadcast.
    assert summary["hops"]["Filip"] == 4


def test_ledger_without_requests(network):
    summary = JobLedger(network).summary()
    assert summary["jobs"] == []
    assert summary["delivered"] == 0
    assert summary["hops"] == {}


def test_save_to_json(network, report, tmp_path):
    ledger = JobLedger(network)
    run_requests(network, report)
    filename = tmp_path / "results" / "ledger.json"
    ledger.save_to_json(str(filename))

    with open(filename) as f:
        saved = json.load(f)
    assert saved["jobs"][0] == {"origin": "Filip", "destination": "Andy", "author": "Bob", "title": "Report"}
    assert saved["not_found"] == 1


def test_save_to_csv(network, report, tmp_path):
    ledger = JobLedger(network)
    run_requests(network, report)
    filename = tmp_path / "jobs.csv"
    ledger.save_to_csv(str(filename))

    with open(filename, newline="") as f:
        rows = list(csv.reader(f))
    assert rows[0] == ["Origin", "Destination", "Author", "Title"]
    assert rows[1:] == [["Filip", "Andy", "Bob", "Report"], ["Hans", "Andy", "rld, thi", "ASCII DOCUMENT"]]
