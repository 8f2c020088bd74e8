"""
File saver for export reports.

Writes a report to a timestamped JSON file in the output directory.
"""

import json
import re
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from tqdm import tqdm

from bpdx.utils.console import info


class FileSaver:
    """Handles local file saving of export reports"""

    @staticmethod
    def build_filename(email_address: str, timestamp: str) -> str:
        """
        Build a filename for a report.

        Args:
            email_address: Address the report belongs to
            timestamp: Timestamp string

        Returns:
            Filename string
        """
        safe = re.sub(r"[^A-Za-z0-9]+", "-", email_address).strip("-").lower()
        return f"personal-data-{safe or 'unknown'}_{timestamp}.json"

    @staticmethod
    def save_to_local(
        report: Dict[str, Any],
        output_dir: Optional[str] = None,
        output_file: Optional[str] = None,
    ) -> str:
        """
        Save a report to local storage.

        Args:
            report: Report with ``metadata`` and ``data``
            output_dir: Output directory, current directory if None
            output_file: Custom filename without extension

        Returns:
            Full path to the saved file

        Raises:
            OSError: If the file cannot be written
        """
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        if output_file:
            filename = f"{output_file}.json"
        else:
            email_address = report.get("metadata", {}).get("email_address", "")
            filename = FileSaver.build_filename(email_address, timestamp)

        output_path = Path(output_dir) if output_dir else Path(".")
        output_path.mkdir(parents=True, exist_ok=True)
        file_path = output_path / filename

        groups = report.get("data", {})
        with tqdm(
            total=max(len(groups), 1),
            desc=f"💾 Writing {filename}",
            bar_format="{l_bar}{bar:40}{r_bar}{bar:-40b}",
            colour="green",
            ncols=100,
            leave=False,
        ) as pbar:
            payload = {"metadata": report.get("metadata", {}), "data": {}}
            for key, items in groups.items():
                payload["data"][key] = items
                pbar.update(1)
            with open(file_path, "w", encoding="utf-8") as f:
                json.dump(payload, f, indent=2, ensure_ascii=False)

        info(f"📁 Exported to: {file_path.resolve()}")
        return str(file_path.resolve())
