from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

from config.constants import DEFAULT_ORDER_STATUS, EMAIL_PATTERN


class OrderParty(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: Optional[str] = None
    email: Optional[str] = Field(None, pattern=EMAIL_PATTERN)
    image: Optional[str] = None


class OrderCreate(BaseModel):
    model_config = ConfigDict(extra="allow")

    plantId: str
    quantity: int = Field(..., gt=0)
    price: float = Field(..., ge=0)

    customer: OrderParty = Field(default_factory=OrderParty)
    seller: OrderParty

    address: Optional[str] = None
    status: str = DEFAULT_ORDER_STATUS
    transactionId: Optional[str] = None
