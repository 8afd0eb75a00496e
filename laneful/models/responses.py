"""Response bodies returned by ``POST /v1/email/send``."""

from pydantic import BaseModel, ConfigDict


class ApiResponse(BaseModel):
    """Successful (HTTP 200) response. ``status`` is the only success indicator."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    status: str = ""


class ApiErrorResponse(BaseModel):
    """Error response returned with any non-200 status."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    error: str = ""
