from typing import Optional

from fastapi import APIRouter, Depends

from ..deps import get_current_user, get_optional_user
from ..domain.dashboard import can_access_dashboard, get_default_dashboard
from ..domain.permission import get_available_features, get_permission_description
from ..domain.user import User
from ..metrics import record_permission_check
from ..schemas.permission import FeaturesResponse, PageAccessResponse

router = APIRouter(prefix="/api/v1/permissions", tags=["permissions"])


@router.get("/me", response_model=FeaturesResponse, response_model_by_alias=True)
async def my_features(user: User = Depends(get_current_user)):
    """
    Role, description, capability tokens and landing page of the bearer.
    """
    return FeaturesResponse(
        role=user.role.value if user.role is not None else None,
        description=get_permission_description(user.role),
        features=sorted(f.value for f in get_available_features(user)),
        default_dashboard=get_default_dashboard(user).value,
    )


@router.get("/pages/{page}", response_model=PageAccessResponse)
async def page_access(page: str, user: Optional[User] = Depends(get_optional_user)):
    """
    Whether the bearer (or an anonymous visitor) may open ``page``.
    """
    allowed = can_access_dashboard(user, page)
    record_permission_check(f"page:{page}", allowed)
    return PageAccessResponse(page=page, allowed=allowed)
