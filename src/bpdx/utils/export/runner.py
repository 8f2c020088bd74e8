"""
Local export runner.

Drives registered exporters the way a privacy-export orchestrator does:
each exporter is called with page 1, 2, ... until it reports done, then
the next exporter runs. The collected items form an export report.
"""

import time
from typing import Any, Dict, Iterable, List, Optional, Tuple

from tqdm import tqdm

from bpdx.constants import DEFAULT_MAX_PAGES, EXPORTER_KEY_PREFIX
from bpdx.exporters.registry import RegisteredExporter
from bpdx.logging import get_logger, log_application_event
from .metadata_builder import MetadataBuilder


class ExportRunner:
    """Runs every registered exporter to completion for one address"""

    def __init__(
        self,
        exporters: Dict[str, RegisteredExporter],
        max_pages: int = DEFAULT_MAX_PAGES,
        show_progress: bool = False,
        key_prefix: str = EXPORTER_KEY_PREFIX,
    ):
        self.exporters = exporters
        self.key_prefix = key_prefix
        self.max_pages = max_pages
        self.show_progress = show_progress
        self.logger = get_logger("bpdx.utils.export.runner")

    def select(self, only: Optional[Iterable[str]] = None) -> List[str]:
        """
        Resolve the exporter keys to run.

        Args:
            only: Keys to restrict the run to, with or without the key prefix

        Returns:
            Registered keys in registration order

        Raises:
            KeyError: If a requested key is not registered
        """
        if not only:
            return list(self.exporters)

        selected = set()
        for wanted in only:
            if wanted in self.exporters:
                selected.add(wanted)
            elif f"{self.key_prefix}{wanted}" in self.exporters:
                selected.add(f"{self.key_prefix}{wanted}")
            else:
                raise KeyError(f"Unknown exporter: {wanted}")
        return [key for key in self.exporters if key in selected]

    def run_exporter(self, key: str, email_address: str) -> Tuple[List[Dict[str, Any]], int]:
        """
        Page through one exporter until it reports done.

        Args:
            key: Registered exporter key
            email_address: Address to export

        Returns:
            Tuple of (items as dicts, pages fetched)

        Raises:
            RuntimeError: If the exporter is still not done after max_pages
        """
        callback = self.exporters[key].callback
        items: List[Dict[str, Any]] = []
        page = 1

        while True:
            result = callback(email_address, page)
            items.extend(item.to_dict() for item in result.data)
            if result.done:
                return items, page
            if page >= self.max_pages:
                raise RuntimeError(
                    f"Exporter {key} did not finish within {self.max_pages} pages"
                )
            page += 1

    def run(self, email_address: str, only: Optional[Iterable[str]] = None) -> Dict[str, Any]:
        """
        Export everything for an address.

        Args:
            email_address: Address to export
            only: Optional subset of exporter keys

        Returns:
            Report with ``metadata`` and ``data`` (exporter key -> items)
        """
        keys = self.select(only)
        start = time.time()
        log_application_event(
            "Export run started", details={"email": email_address, "exporters": keys}
        )

        data: Dict[str, List[Dict[str, Any]]] = {}
        pages: Dict[str, int] = {}
        for key in tqdm(
            keys,
            desc="Exporting",
            unit="exporter",
            disable=not self.show_progress,
            leave=False,
        ):
            try:
                data[key], pages[key] = self.run_exporter(key, email_address)
            except Exception as e:
                self.logger.error(f"Exporter {key} failed: {str(e)}")
                raise

        metadata = MetadataBuilder.build_metadata(email_address, data, pages)
        self.logger.info(
            f"Export run finished: {metadata['total_items']} items from "
            f"{len(keys)} exporters in {time.time() - start:.2f}s"
        )
        return {"metadata": metadata, "data": data}
