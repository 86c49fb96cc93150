from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class FeaturesResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    role: Optional[str] = None
    description: str
    features: List[str]
    default_dashboard: str = Field(alias="defaultDashboard")


class PageAccessResponse(BaseModel):
    page: str
    allowed: bool
