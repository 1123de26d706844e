"""
Data model for inventory records.
"""
from pydantic import BaseModel, Field, field_validator


NAME_MAX_LENGTH = 49

# Integer fields hold 32-bit signed values
INT_MIN = -2**31
INT_MAX = 2**31 - 1

# Largest single-precision float; keeps quantity * price and totals finite
PRICE_MAX = 3.4028234663852886e38


class Item(BaseModel):
    """A single stock record."""
    id: int = Field(ge=INT_MIN, le=INT_MAX)
    name: str = ""
    quantity: int = Field(ge=0, le=INT_MAX)
    price: float = Field(ge=0, le=PRICE_MAX, allow_inf_nan=False)

    @field_validator('name')
    @classmethod
    def truncate_name(cls, value: str) -> str:
        """Keep only the first NAME_MAX_LENGTH characters."""
        return value[:NAME_MAX_LENGTH]

    @property
    def value(self) -> float:
        """Stock value of this record (quantity times unit price)."""
        return self.quantity * self.price
