from __future__ import annotations

"""
Printer Factory.

Maps the user-facing output format to a printer implementation.
"""

from typing import Optional, TextIO

from verif.core.printers.base import Printer
from verif.core.printers.console_printer import ConsolePrinter
from verif.core.printers.statistics_printer import StatisticsReportPrinter
from verif.core.printers.visual_graph_printer import PreviewCallback, VisualGraphPrinter
from verif.core.services.registry import ComponentRegistry
from verif.domain import constants as const
from verif.domain.errors import InvalidPrinterFormatError
from verif.infra.fs import get_default_output_dir


class PrinterFormat:
    """
    Validated output format.

    Raises:
        InvalidPrinterFormatError: For unsupported values.
    """

    def __init__(self, value: str) -> None:
        canonical = const.PRINTER_FORMAT_ALIASES.get((value or "").strip().lower())
        if canonical is None:
            raise InvalidPrinterFormatError(value)
        self._type = canonical

    @property
    def type(self) -> str:
        return self._type

    def __repr__(self) -> str:
        return f"PrinterFormat({self._type!r})"


def create_printer(
        registry: ComponentRegistry,
        printer_format: Optional[PrinterFormat] = None,
        *,
        output_dir: Optional[str] = None,
        preview: Optional[PreviewCallback] = None,
        stream: Optional[TextIO] = None,
) -> Printer:
    """
    Instantiate the printer for an output format.

    Args:
        registry: Registry of the run.
        printer_format: Desired format, console output when omitted.
        output_dir: Destination of the visual graph artifacts.
        preview: Callback receiving the written elements file (graph only).
        stream: Text stream for console and report output.
    """
    kind = printer_format.type if printer_format else const.FORMAT_STDOUT

    if kind == const.FORMAT_GRAPH:
        return VisualGraphPrinter(
            registry,
            output_dir or get_default_output_dir(),
            preview=preview,
            stream=stream,
        )
    if kind == const.FORMAT_REPORT:
        return StatisticsReportPrinter(registry, stream=stream)
    return ConsolePrinter(registry, stream=stream)
