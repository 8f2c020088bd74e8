"""
Export utilities package.

Provides the local export runner and the helpers that describe, save and
display its reports.
"""

from .runner import ExportRunner
from .metadata_builder import MetadataBuilder
from .file_saver import FileSaver
from .view_renderer import ViewRenderer

__all__ = [
    "ExportRunner",
    "MetadataBuilder",
    "FileSaver",
    "ViewRenderer",
]
