"""API request/response models."""

from typing import Dict, List, Optional
from pydantic import BaseModel, Field

from ..config import MAX_BATCH_SIZE


class CleanRequest(BaseModel):
    """Request model for /clean and /inspect endpoints."""

    url: str = Field(..., description="URL to clean or inspect")
    whitelist: Optional[List[str]] = Field(
        default=None,
        description="Exact parameter names to keep even if they look like trackers",
    )


class BatchCleanRequest(BaseModel):
    """Request model for /clean/batch endpoint."""

    urls: List[str] = Field(..., min_length=1, max_length=MAX_BATCH_SIZE)
    whitelist: Optional[List[str]] = None


class CleanResponse(BaseModel):
    """Response model for /clean endpoint."""

    url: str
    cleaned_url: str
    removed: Dict[str, Optional[str]] = Field(
        default_factory=dict,
        description="Tracking params found in the input (last value per name)",
    )
    changed: bool


class BatchCleanResponse(BaseModel):
    """Response model for /clean/batch endpoint."""

    results: List[CleanResponse] = Field(default_factory=list)


class InspectResponse(BaseModel):
    """Response model for /inspect endpoint."""

    url: str
    contains_tracking: bool
    tracking_parameters: Dict[str, Optional[str]] = Field(default_factory=dict)


class ParametersResponse(BaseModel):
    """Known tracking parameters by category."""

    categories: Dict[str, List[str]]
    patterns: List[str]
    total: int


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = "ok"
