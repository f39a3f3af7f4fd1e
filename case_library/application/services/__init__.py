from .case_filter import filter_cases, derive_filter_options, matches_filters, matches_search
from .case_store_client import CaseStoreClient
from .authorization_service import AuthorizationService
from .store_protocol_handler import StoreProtocolHandler, CaseIdGenerator
from .catalog_controller import CatalogController, CaseEditorState, AdminManagerState

__all__ = [
    "filter_cases",
    "derive_filter_options",
    "matches_filters",
    "matches_search",
    "CaseStoreClient",
    "AuthorizationService",
    "StoreProtocolHandler",
    "CaseIdGenerator",
    "CatalogController",
    "CaseEditorState",
    "AdminManagerState",
]
