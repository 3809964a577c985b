"""Tags group abstracts; aliases give them alternative names."""

from __future__ import annotations

from bindwire import Container


class CpuReport:
    title = "cpu"


class MemoryReport:
    title = "memory"


class ReportAggregator:
    def __init__(self, reports: list) -> None:
        self.reports = reports


def main() -> None:
    container = Container()
    container.tag([CpuReport, MemoryReport], "reports")
    container.when(ReportAggregator).needs("$reports").give_tagged("reports")
    container.alias(ReportAggregator, "reports.aggregator")

    aggregator = container.make("reports.aggregator")
    titles = ",".join(report.title for report in aggregator.reports)
    print(f"titles={titles}")  # => titles=cpu,memory


if __name__ == "__main__":
    main()
