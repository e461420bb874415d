from autoservice.pipeline.export import ExportFormat, export_as, export_rows
from autoservice.pipeline.filters import FilterCriteria, apply_filters
from autoservice.pipeline.pagination import Page, PageState, paginate

__all__ = [
    "FilterCriteria",
    "apply_filters",
    "Page",
    "PageState",
    "paginate",
    "ExportFormat",
    "export_as",
    "export_rows",
]
