from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Name(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: str = Field(..., min_length=1, max_length=200)

    def __str__(self) -> str:
        return self.value


class Description(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: str = Field(..., min_length=1, max_length=2000)

    def __str__(self) -> str:
        return self.value


class Address(BaseModel):
    """Почтовый адрес апартаментов."""

    model_config = ConfigDict(frozen=True)

    street: str
    state: str
    zip_code: str
    city: str
    country: str


class Amenity(str, Enum):
    """Удобства в апартаментах."""

    WIFI = "wifi"
    AIR_CONDITIONING = "air_conditioning"
    PARKING = "parking"
    PET_FRIENDLY = "pet_friendly"
    SWIMMING_POOL = "swimming_pool"
    GYM = "gym"
    SPA = "spa"
    TERRACE = "terrace"
    MOUNTAIN_VIEW = "mountain_view"
    GARDEN_VIEW = "garden_view"
