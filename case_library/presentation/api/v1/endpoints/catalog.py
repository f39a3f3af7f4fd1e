"""Read-only catalog endpoints — filtered browsing through the sync client."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from case_library.application.schemas.catalog import (
    AdminCheckResponse,
    CaseItemResponse,
    CatalogResponse,
    FilterOptionsResponse,
)
from case_library.application.services import (
    AuthorizationService,
    CaseStoreClient,
    derive_filter_options,
    filter_cases,
)
from case_library.domain.entities import FilterState
from case_library.infrastructure.dependencies import (
    get_authorization_service,
    get_case_store_client,
)

router = APIRouter(prefix="/catalog", tags=["Catalog"])


@router.get("/cases", response_model=CatalogResponse)
async def browse_cases(
    search: str = Query("", description="Substring of client name, keyword or subcategory"),
    category: str = Query("", description="Exact category"),
    region: str = Query("", description="Exact region"),
    robot_type: str = Query("", description="Exact robot model"),
    client: CaseStoreClient = Depends(get_case_store_client),
) -> CatalogResponse:
    """Return the filtered cases plus the dropdown options of the full collection."""
    result = await client.list_cases()
    if not result.success:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=result.message)

    cases = result.data or []
    filters = FilterState(
        search=search, category=category, region=region, robot_type=robot_type
    )
    visible = filter_cases(cases, filters)
    return CatalogResponse(
        total=len(visible),
        items=[CaseItemResponse.from_case(case) for case in visible],
        options=FilterOptionsResponse.from_options(derive_filter_options(cases)),
    )


@router.get("/admins/check", response_model=AdminCheckResponse)
async def check_admin(
    email: str = Query(..., min_length=1),
    authorization: AuthorizationService = Depends(get_authorization_service),
) -> AdminCheckResponse:
    """Whether ``email`` is currently on the admin list (case-insensitive)."""
    is_admin = await authorization.is_authorized_admin(email)
    return AdminCheckResponse(email=email, is_admin=is_admin)
