import pytest

from lan_sim.core.report import ReportSink, StringReport
from lan_sim.core.topology import default_example


class FailingReport(ReportSink):
    """Report sink whose every write fails."""

    def __init__(self):
        self.attempts = 0

    def append(self, text):
        self.attempts += 1
        raise OSError("disk full")


@pytest.fixture
def network():
    """The reference ring: Filip -> n1 -> Hans -> Andy -> Filip."""
    return default_example()


@pytest.fixture
def report():
    return StringReport()


@pytest.fixture
def failing_report():
    return FailingReport()
