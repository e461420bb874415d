"""Admin screen: every booked service, filterable, pageable and exportable."""

from collections import Counter
from pathlib import Path
from typing import Optional, Union

from autoservice.api.booking import FetchResult, fetch_all_bookings
from autoservice.api.client import ApiClient
from autoservice.logging_context import get_view_logger
from autoservice.pipeline.export import ExportFormat, export_as
from autoservice.pipeline.filters import FilterCriteria
from autoservice.schemas.booking_schema import BookingStatus
from autoservice.views.base import ListViewController

logger = get_view_logger(__name__)


class BookedServicesView(ListViewController):
    """
    Controller for the admin Booked Services table.

    ``initial_status`` is the status filter the screen was navigated to
    with (e.g. from a statistics tile); it is also what the filters reset
    to when the view is deactivated.
    """

    def __init__(
        self,
        client: ApiClient,
        *,
        initial_status: Optional[Union[str, BookingStatus]] = None,
        items_per_page: Optional[int] = None,
        export_dir: Optional[Path] = None,
    ) -> None:
        initial = FilterCriteria().replace("status", initial_status) if initial_status else None
        super().__init__(client, items_per_page=items_per_page, initial_criteria=initial)
        self.export_dir = export_dir

    def _fetch(self) -> FetchResult:
        return fetch_all_bookings(self.client)

    def search(self, query: str) -> None:
        """Header search box: filter by customer name."""
        self.set_filter("customer_name", query)

    def filter_by_status(self, status: Optional[Union[str, BookingStatus]]) -> None:
        self.set_filter("status", status)

    def statistics(self) -> dict[str, int]:
        """Booking counts per status over the full (unfiltered) collection."""
        counts = Counter(record.status for record in self.records)
        stats = {"Total": len(self.records)}
        for status in BookingStatus:
            stats[status.value] = counts.pop(status.value, 0)
        stats.update(counts)
        return stats

    def export(
        self,
        export_format: Union[str, ExportFormat],
        output_dir: Optional[Path] = None,
    ) -> Path:
        """Export every record matching the current filters, ignoring paging."""
        records = self.filtered
        logger.info("Exporting %d filtered bookings as %s", len(records), export_format)
        return export_as(export_format, records, output_dir or self.export_dir)
