from __future__ import annotations

"""
Statistics Report Printer.

Renders a bordered table of in-degree and out-degree per component,
sorted by in-degree, followed by node and edge totals.
"""

from dataclasses import dataclass
from typing import List, Optional, TextIO

from verif.core.graph.generator import GraphGenerator
from verif.core.graph.statistics import create_component_statistics, group_by
from verif.core.graph.strategies import OutputKind
from verif.core.printers.base import Printer
from verif.core.services.registry import ComponentRegistry
from verif.domain.graph_models import ComponentStatistics, GraphElement, Node, is_edge_def

# Margin size for the table and summary
MARGIN_LEFT = "  "


class StatisticsReportPrinter(Printer):

    def __init__(self, registry: ComponentRegistry, stream: Optional[TextIO] = None) -> None:
        super().__init__(registry, stream)
        self.generator = GraphGenerator(registry, OutputKind.OBJECT)

    def print(self, node: Node) -> None:
        self.write_report(self.generator.generate(node))

    def print_all(self, nodes: List[Node]) -> None:
        self.write_report(self.generator.generate_all(nodes))

    def write_report(self, elements: List[GraphElement]) -> None:
        """Format the statistics table and summary, then write them."""
        self._write(create_report(elements))
        self._run_if_handler_present()


def create_report(elements: List[GraphElement]) -> str:
    """
    Build the full report text for a flat element sequence.

    Args:
        elements: Node and edge records from the object strategy.
    """
    formatter = StatisticsReportFormatter(create_component_statistics(elements))
    table = formatter.format()
    separation_line = "-" * formatter.width

    return "\n".join([
        "Node degrees:",
        table,
        separation_line,
        "Summary: ",
        "",
        format_summary(elements),
        "",
    ])


@dataclass(frozen=True)
class _Cell:
    value: str
    length: int
    align: str = "left"

    def render(self) -> str:
        if self.align == "right":
            return self.value.rjust(self.length)
        return self.value.ljust(self.length)


class StatisticsReportFormatter:
    """
    Table layout for component statistics.

    Example:
        ----------------------------------------------------------
        | # | name                        | indegree | outdegree |
        ----------------------------------------------------------
        |1  |components/atoms/Message.vue |         2|          0|
    """

    HEADER_ROWNUM = " # "
    HEADER_NAME = " name "
    HEADER_INDEGREE = " indegree "
    HEADER_OUTDEGREE = " outdegree "

    def __init__(self, statistics: List[ComponentStatistics]) -> None:
        self.statistics = statistics
        longest = max((len(s.name) for s in statistics), default=0)
        self._name_width = max(longest + 2, len(self.HEADER_NAME))
        self._table_border = "-" * len(self._join(self._header_cells()))
        self._width = len(MARGIN_LEFT + self._table_border)

    @property
    def width(self) -> int:
        """Report width including the left margin."""
        return self._width

    def format(self) -> str:
        records: List[str] = []
        records.extend(self.create_header_rows())
        records.extend(self.create_data_rows())
        # Margin bottom of the table
        records.extend([self._table_border, ""])
        return "\n".join(f"{MARGIN_LEFT}{record}" for record in records)

    def create_header_rows(self) -> List[str]:
        # Blank line on top of the table
        return ["", self._table_border, self._join(self._header_cells()), self._table_border]

    def create_data_rows(self) -> List[str]:
        ordered = sorted(self.statistics, key=lambda s: s.indegree, reverse=True)
        rows: List[str] = []
        for i, statistic in enumerate(ordered):
            cells = [
                _Cell(str(i + 1), len(self.HEADER_ROWNUM)),
                _Cell(statistic.name, self._name_width),
                _Cell(str(statistic.indegree), len(self.HEADER_INDEGREE), "right"),
                _Cell(str(statistic.outdegree), len(self.HEADER_OUTDEGREE), "right"),
            ]
            rows.append(self._join(cells))
        return rows

    def _header_cells(self) -> List[_Cell]:
        return [
            _Cell(self.HEADER_ROWNUM, len(self.HEADER_ROWNUM)),
            _Cell(self.HEADER_NAME, self._name_width),
            _Cell(self.HEADER_INDEGREE, len(self.HEADER_INDEGREE)),
            _Cell(self.HEADER_OUTDEGREE, len(self.HEADER_OUTDEGREE)),
        ]

    @staticmethod
    def _join(cells: List[_Cell]) -> str:
        return "|".join([""] + [cell.render() for cell in cells] + [""])


def format_summary(elements: List[GraphElement]) -> str:
    """Total node and edge counts, indented by the report margin."""
    by_type = group_by(elements, lambda e: "edge" if is_edge_def(e) else "node")
    lines = [
        f"Total nodes: {len(by_type.get('node', []))}",
        f"Total edges: {len(by_type.get('edge', []))}",
    ]
    return "\n".join(f"{MARGIN_LEFT}{line}" for line in lines)
