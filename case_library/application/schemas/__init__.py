from .store_protocol import (
    WireModel,
    VideoCaseDraft,
    VideoCaseRecord,
    AdminRecord,
    GetCasesRequest,
    CreateCaseRequest,
    UpdateCaseRequest,
    DeleteCaseRequest,
    GetAdminsRequest,
    AddAdminRequest,
    DeleteAdminRequest,
    StoreRequest,
    StoreEnvelope,
    STORE_ACTIONS,
    store_request_adapter,
    encode_request,
)
from .video_case import CaseForm, AdminEmailForm, default_case_form, case_to_form
from .catalog import (
    CaseItemResponse,
    FilterOptionsResponse,
    CatalogResponse,
    AdminCheckResponse,
)

__all__ = [
    "WireModel",
    "VideoCaseDraft",
    "VideoCaseRecord",
    "AdminRecord",
    "GetCasesRequest",
    "CreateCaseRequest",
    "UpdateCaseRequest",
    "DeleteCaseRequest",
    "GetAdminsRequest",
    "AddAdminRequest",
    "DeleteAdminRequest",
    "StoreRequest",
    "StoreEnvelope",
    "STORE_ACTIONS",
    "store_request_adapter",
    "encode_request",
    "CaseForm",
    "AdminEmailForm",
    "default_case_form",
    "case_to_form",
    "CaseItemResponse",
    "FilterOptionsResponse",
    "CatalogResponse",
    "AdminCheckResponse",
]
