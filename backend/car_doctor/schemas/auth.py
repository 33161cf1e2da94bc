"""Auth Schemas — identity claim posted to /jwt."""

from pydantic import BaseModel, ConfigDict

from car_doctor.schemas.fields import Email


class IdentityClaim(BaseModel):
    """Identity signed into the session token. Extra fields ride along."""
    model_config = ConfigDict(extra="allow")

    email: Email
