"""Geocoding request, result and response models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class GeocodeSource(str, Enum):
    """Provider slot that produced a geocoding result."""

    PRIMARY = "primary"
    SECONDARY = "secondary"


class GeoPoint(BaseModel):
    """Geographic point coordinates."""

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(
        ...,
        title="Latitude",
        description="Latitude coordinate",
        examples=[33.749],
    )
    longitude: float = Field(
        ...,
        title="Longitude",
        description="Longitude coordinate",
        examples=[-84.388],
    )

    @model_validator(mode="after")
    def validate_coordinates(self) -> "GeoPoint":
        """Validate coordinate ranges."""
        if not -90 <= self.latitude <= 90:
            raise ValueError("Latitude must be between -90 and 90 degrees")
        if not -180 <= self.longitude <= 180:
            raise ValueError("Longitude must be between -180 and 180 degrees")
        return self


class GeocodeResult(BaseModel):
    """Normalized location record shared by every provider."""

    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float
    formatted_address: str = ""
    city: str = ""
    county: str = ""
    state: str = ""
    source: GeocodeSource = GeocodeSource.PRIMARY

    @property
    def point(self) -> GeoPoint:
        return GeoPoint(latitude=self.latitude, longitude=self.longitude)


class GeocodeRequest(BaseModel):
    """Body of a geocode request.

    ``address`` is optional at the schema level so that a missing address is
    reported as a client error by the endpoint instead of a validation error.
    """

    address: str | None = Field(
        default=None,
        description="Free-text street address",
        examples=["55 Trinity Ave SW, Atlanta, GA 30303"],
    )


class GeocodeResponse(BaseModel):
    """Successful geocode response."""

    success: bool = True
    source: GeocodeSource
    latitude: float
    longitude: float
    formatted_address: str
    city: str
    county: str
    state: str

    @classmethod
    def from_result(cls, result: GeocodeResult) -> "GeocodeResponse":
        return cls(success=True, **result.model_dump())
