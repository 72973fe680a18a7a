from __future__ import annotations

from .base import Printer
from .console_printer import ConsolePrinter
from .factory import PrinterFormat, create_printer
from .statistics_printer import StatisticsReportPrinter
from .visual_graph_printer import VisualGraphPrinter

__all__ = [
    "Printer",
    "ConsolePrinter",
    "StatisticsReportPrinter",
    "VisualGraphPrinter",
    "PrinterFormat",
    "create_printer",
]
