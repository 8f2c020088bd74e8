"""
Pagination handler for exporter batches.

Handles the offset-based paging shared by every paginated exporter:
page numbers are 1-based and a page is the last one when it comes back
short of the batch size.
"""

from typing import List, Sequence, TypeVar

T = TypeVar("T")


class PaginationHandler:
    """Handles pagination logic for exporter batches"""

    @staticmethod
    def validate_page(page: int) -> int:
        """
        Check a caller-supplied page number.

        Args:
            page: 1-based page number

        Returns:
            The page number as an int

        Raises:
            ValueError: If the page is not a positive integer
        """
        if isinstance(page, bool) or not isinstance(page, int):
            raise ValueError(f"Page must be an integer, got {page!r}")
        if page < 1:
            raise ValueError(f"Page must be >= 1, got {page}")
        return page

    @staticmethod
    def offset_for(page: int, per_page: int) -> int:
        """
        Compute the record offset of a page.

        Args:
            page: 1-based page number
            per_page: Batch size

        Returns:
            Number of records preceding the page
        """
        return (PaginationHandler.validate_page(page) - 1) * per_page

    @staticmethod
    def is_done(fetched_count: int, per_page: int) -> bool:
        """
        Check whether a page was the last one.

        Args:
            fetched_count: Number of records the page returned
            per_page: Batch size requested

        Returns:
            True when fewer records than requested came back
        """
        return fetched_count < per_page

    @staticmethod
    def slice_page(records: Sequence[T], offset: int, limit: int) -> List[T]:
        """
        Cut one page out of an already ordered sequence.

        Args:
            records: Ordered records
            offset: Records to skip
            limit: Maximum records to return

        Returns:
            The records of the page
        """
        if offset < 0 or limit < 0:
            raise ValueError("Offset and limit must be non-negative")
        return list(records[offset:offset + limit])
