"""
Personal data exporters.

One exporter per category of a member's data, all sharing the paging
contract of BaseExporter, plus the registration helper that adds them
to a host's exporter mapping.
"""

from .base_exporter import BaseExporter
from .hooks import ExportHooks
from .models import ExportField, ExportItem, ExportPage
from .registry import EXPORTER_CLASSES, RegisteredExporter, register_exporters

__all__ = [
    "BaseExporter",
    "ExportHooks",
    "ExportField",
    "ExportItem",
    "ExportPage",
    "EXPORTER_CLASSES",
    "RegisteredExporter",
    "register_exporters",
]
