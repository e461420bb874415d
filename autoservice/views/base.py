"""
Shared controller for list screens: fetch -> filter -> paginate.

A controller owns the UI state of one screen (records, criteria, page,
selection) and recomputes everything derived through the pure pipeline
functions. Subscribers get a ``ViewSnapshot`` after every mutation.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from autoservice.api.booking import FetchResult
from autoservice.api.client import ApiClient
from autoservice.config import settings
from autoservice.layout import items_per_page_for_width
from autoservice.logging_context import get_view_logger, new_view_id, set_view_id
from autoservice.pipeline.filters import FilterCriteria, apply_filters
from autoservice.pipeline.pagination import Page, PageState, paginate
from autoservice.schemas.booking_schema import BookingRecord
from autoservice.views.state_machine import ViewState, ViewStateMachine, ViewTrigger

logger = get_view_logger(__name__)

KEY_NEXT_PAGE = "ArrowRight"
KEY_PREVIOUS_PAGE = "ArrowLeft"


@dataclass(frozen=True)
class ViewSnapshot:
    """Everything a presentation layer needs to draw the screen."""
    state: ViewState
    criteria: FilterCriteria
    page: Page[BookingRecord]
    total_records: int
    selected: Optional[BookingRecord] = None
    error: Optional[str] = None

    @property
    def no_results(self) -> bool:
        """Loaded fine, but nothing matches the current filters."""
        return self.state == ViewState.READY and self.page.total_items == 0


Listener = Callable[[ViewSnapshot], None]


class ListViewController:
    """Base class for the booked-services and booking-history screens."""

    def __init__(
        self,
        client: ApiClient,
        *,
        items_per_page: Optional[int] = None,
        initial_criteria: Optional[FilterCriteria] = None,
    ) -> None:
        self.client = client
        self.state_machine = ViewStateMachine()
        self._initial_criteria = initial_criteria or FilterCriteria()
        self.criteria = self._initial_criteria
        self._initial_items_per_page = items_per_page or settings.pagination.default_items_per_page
        self.page_state = PageState(items_per_page=self._initial_items_per_page)
        self.records: list[BookingRecord] = []
        self.selected: Optional[BookingRecord] = None
        self.last_result: Optional[FetchResult] = None
        self.view_id: Optional[str] = None
        self._listeners: list[Listener] = []

    # -- loading -----------------------------------------------------------

    def _fetch(self) -> FetchResult:
        raise NotImplementedError

    def _on_loaded(self, records: list[BookingRecord]) -> None:
        """Hook for subclasses; runs after a successful fetch."""

    @property
    def state(self) -> ViewState:
        return self.state_machine.current_state

    def activate(self) -> ViewState:
        """Mount the view: fetch the collection once and settle in Ready or Error."""
        if not self.state_machine.can(ViewTrigger.LOAD):
            logger.warning("View already active (%s); ignoring activation", self.state.value)
            return self.state
        self.view_id = new_view_id()
        set_view_id(self.view_id)
        self.state_machine.transition(ViewTrigger.LOAD)
        self._notify()
        return self._load()

    def refresh(self) -> ViewState:
        """Re-fetch after a settled load. Filters and page are kept."""
        if not self.state_machine.can(ViewTrigger.REFRESH):
            logger.warning("Cannot refresh from state %s", self.state.value)
            return self.state
        self.state_machine.transition(ViewTrigger.REFRESH)
        self._notify()
        return self._load()

    def _load(self) -> ViewState:
        result = self._fetch()
        self.last_result = result
        if result.ok:
            self.records = list(result.items)
            self.page_state.clamp(len(self.filtered))
            self._on_loaded(self.records)
            self.state_machine.transition(ViewTrigger.LOAD_SUCCEEDED)
            logger.info("Loaded %d bookings", len(self.records))
        else:
            self.records = []
            self.page_state.reset()
            self.state_machine.transition(ViewTrigger.LOAD_FAILED)
            logger.warning("Load failed (%s): %s", result.error_kind, result.error)
        self._notify()
        return self.state

    def deactivate(self) -> None:
        """Unmount the view: drop records and reset session state to defaults."""
        self.state_machine.transition(ViewTrigger.DEACTIVATE)
        self.records = []
        self.criteria = self._initial_criteria
        self.page_state = PageState(items_per_page=self._initial_items_per_page)
        self.selected = None
        self.last_result = None
        logger.debug("View deactivated")
        self.view_id = None
        set_view_id("-")
        self._notify()

    # -- derived state -----------------------------------------------------

    @property
    def filtered(self) -> list[BookingRecord]:
        return apply_filters(self.records, self.criteria)

    @property
    def page(self) -> Page[BookingRecord]:
        return paginate(self.filtered, self.page_state.current_page, self.page_state.items_per_page)

    @property
    def error(self) -> Optional[str]:
        if self.last_result is None or self.last_result.ok:
            return None
        return self.last_result.error

    def snapshot(self) -> ViewSnapshot:
        return ViewSnapshot(
            state=self.state,
            criteria=self.criteria,
            page=self.page,
            total_records=len(self.records),
            selected=self.selected,
            error=self.error,
        )

    # -- filters -----------------------------------------------------------

    def set_filter(self, name: str, value: object) -> None:
        """Change one criterion and go back to page 1."""
        self.criteria = self.criteria.replace(name, value)
        self.page_state.reset()
        logger.debug("Filter %s=%r (%d matches)", name, value, len(self.filtered))
        self._notify()

    def clear_filters(self) -> None:
        self.criteria = FilterCriteria()
        self.page_state.reset()
        self._notify()

    # -- paging ------------------------------------------------------------

    def go_to_page(self, page: int) -> bool:
        """Navigate to ``page``; out-of-range requests are ignored."""
        changed = self.page_state.go_to(page, len(self.filtered))
        if changed:
            self._notify()
        return changed

    def next_page(self) -> bool:
        return self.go_to_page(self.page_state.current_page + 1)

    def previous_page(self) -> bool:
        return self.go_to_page(self.page_state.current_page - 1)

    def handle_key(self, key: str) -> bool:
        """Keyboard navigation: ArrowRight / ArrowLeft move one page."""
        if key == KEY_NEXT_PAGE:
            return self.next_page()
        if key == KEY_PREVIOUS_PAGE:
            return self.previous_page()
        return False

    def set_items_per_page(self, items_per_page: int) -> None:
        if items_per_page == self.page_state.items_per_page:
            return
        self.page_state.set_items_per_page(items_per_page, len(self.filtered))
        self._notify()

    def resize(self, width: int) -> None:
        """Recompute the page size for a new viewport width."""
        self.set_items_per_page(items_per_page_for_width(width))

    # -- selection ---------------------------------------------------------

    def select(self, record: BookingRecord) -> None:
        self.selected = record
        self._notify()

    def clear_selection(self) -> None:
        self.selected = None
        self._notify()

    # -- subscribers -------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener``; returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        if not self._listeners:
            return
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener(snapshot)
