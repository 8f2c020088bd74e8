"""
Base exporter class for personal data exporters.

Every exporter follows the same contract: trim the email address,
resolve it to a user, fetch one batch of that user's records, project
each record into export items, and report whether the batch was the
last one. Subclasses only describe how to fetch and how to project.
"""

import time
from abc import ABC, abstractmethod
from typing import Any, Iterable, List, Optional

from bpdx.host.context import HostContext
from bpdx.host.models import User
from bpdx.logging import get_logger, log_export_page
from bpdx.utils.pagination import PaginationHandler
from .hooks import ExportHooks
from .models import ExportItem, ExportPage


class BaseExporter(ABC):
    """Base class for all personal data exporters"""

    #: Exporter key, registered with the key prefix
    key: str = ""
    #: Component whose activation gates registration
    component: str = ""
    friendly_name: str = ""
    group_id: str = ""
    group_label_text: str = ""
    #: Records per page; None for categories without pagination
    batch_size: Optional[int] = None

    def __init__(self, host: HostContext, hooks: Optional[ExportHooks] = None):
        self.host = host
        self.hooks = hooks or ExportHooks()
        self.logger = get_logger(f"bpdx.exporters.{self.key or 'base'}")

    def __call__(self, email_address: str, page: int = 1) -> ExportPage:
        return self.export(email_address, page)

    def export(self, email_address: str, page: int = 1) -> ExportPage:
        """Export one page of personal data for an email address

        Args:
            email_address: Address of the account to export
            page: 1-based batch number

        Returns:
            ExportPage with the items of this batch and the done flag

        Raises:
            ValueError: If page is not a positive integer
        """
        PaginationHandler.validate_page(page)
        start = time.time()

        email_address = (email_address or "").strip()
        user = self.host.find_user_by_email(email_address)
        if user is None:
            self.logger.debug(f"No account found for {email_address}")
            return ExportPage.empty()

        records = self.fetch_records(user, page)

        items: List[ExportItem] = []
        for record in records:
            for item in self.build_items(user, record):
                items.append(self.hooks.enrich(item, record))

        done = self.is_done(records)
        log_export_page(self.key, page, len(items), done, time.time() - start)
        return ExportPage(data=items, done=done)

    def is_done(self, records: List[Any]) -> bool:
        """Whether the fetched batch is the last one"""
        if self.batch_size is None:
            return True
        return PaginationHandler.is_done(len(records), self.batch_size)

    def offset_for(self, page: int) -> int:
        return PaginationHandler.offset_for(page, self.batch_size or 0)

    @property
    def group_label(self) -> str:
        return self.host.translate(self.group_label_text)

    def _(self, text: str) -> str:
        """Localise a display string through the host"""
        return self.host.translate(text)

    def yes_no(self, flag: bool) -> str:
        return self._("Yes") if flag else self._("No")

    def new_item(self, item_id: str) -> ExportItem:
        """Create an empty item in this exporter's group"""
        return ExportItem(
            group_id=self.group_id,
            group_label=self.group_label,
            item_id=item_id,
        )

    @abstractmethod
    def fetch_records(self, user: User, page: int) -> List[Any]:
        """Fetch the records of one page for the resolved user"""
        pass

    @abstractmethod
    def build_items(self, user: User, record: Any) -> Iterable[ExportItem]:
        """Project one record into zero or more export items"""
        pass
