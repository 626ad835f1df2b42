from pydantic import BaseModel, ConfigDict, Field
from typing import Literal, Optional

from config.constants import EMAIL_PATTERN


class PlantSeller(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = Field(None, pattern=EMAIL_PATTERN)
    image: Optional[str] = None


class PlantCreate(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str = Field(..., min_length=1)
    category: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None

    price: float = Field(..., gt=0)
    quantity: int = Field(..., ge=0)

    seller: PlantSeller = Field(default_factory=PlantSeller)


class QuantityUpdate(BaseModel):
    quantityToUpdate: int = Field(..., gt=0)
    status: Literal["increase", "decrease"]


class PaymentIntentRequest(BaseModel):
    plantId: str
    quantity: int = Field(..., gt=0)
