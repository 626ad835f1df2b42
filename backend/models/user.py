from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from enum import Enum

from config.constants import EMAIL_PATTERN


class UserRole(str, Enum):
    CUSTOMER = "customer"
    SELLER = "seller"
    ADMIN = "admin"


class SellerStatus(str, Enum):
    NONE = "none"
    REQUESTED = "requested"
    VERIFIED = "verified"


class SessionClaim(BaseModel):
    email: str = Field(..., pattern=EMAIL_PATTERN)


class UserProfile(BaseModel):
    """Profile sent by the client on every login."""

    model_config = ConfigDict(extra="allow")

    email: str = Field(..., pattern=EMAIL_PATTERN)
    name: Optional[str] = None
    image: Optional[str] = None


class RoleUpdate(BaseModel):
    # checked against UserRole by the account service
    role: str
