"""
Session schemas

Shape of the identity service's ``GET /session`` response body.
"""

from pydantic import BaseModel, ConfigDict, Field


class SessionUser(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    login: str
    name: str | None = None
    avatar_url: str | None = None
    email: str | None = None
    role: str


class SessionPayload(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    user: SessionUser
    csrf_token: str = Field(..., alias="csrfToken")
