"""Tests for import chains and module integrity.

Ensures all public modules can be imported without errors and
that re-exports from __init__.py files work correctly.
"""


class TestSchemaImports:
    def test_import_booking_schema(self):
        from autoservice.schemas.booking_schema import BookingCreate, BookingRecord, BookingStatus
        assert BookingStatus.COMPLETED == "Completed"
        assert BookingRecord.model_validate({"_id": 7}).id == "7"

    def test_import_user_schema(self):
        from autoservice.schemas.user_schema import AuthResponse, SignInRequest, SignUpRequest
        assert AuthResponse.model_validate({"userId": "u"}).user_id == "u"


class TestPipelineImports:
    def test_import_pipeline_package(self):
        from autoservice.pipeline import (
            ExportFormat, FilterCriteria, Page, PageState, apply_filters, export_as, paginate,
        )
        assert ExportFormat.PDF == "pdf"
        assert FilterCriteria().is_empty()


class TestViewImports:
    def test_import_views_package(self):
        from autoservice.views import (
            BookedServicesView, BookingHistoryView, InvalidTransitionError,
            ViewState, ViewStateMachine,
        )
        assert ViewStateMachine().current_state == ViewState.IDLE


class TestFormImports:
    def test_import_forms_package(self):
        from autoservice.forms import AuthFormController, AuthMode, BookingFormController
        assert AuthMode.SIGN_UP == "Sign Up"


class TestConfigImport:
    def test_import_config(self):
        from autoservice.config import settings
        assert settings.backend.base_url.startswith("http")
        assert settings.pagination.default_items_per_page >= 1
        assert settings.backend.timeout_seconds > 0
