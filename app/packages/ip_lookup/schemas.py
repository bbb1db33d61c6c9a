"""Pydantic schemas for the IP lookup route."""

from pydantic import BaseModel, ConfigDict, Field


class IpInfoResponse(BaseModel):
    """Caller address with its country, empty strings when unknown."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "ip": "203.0.113.5",
                "country": "Testland",
                "countryCode": "TT",
            }
        },
    )

    ip: str = Field(..., description="Displayed client address")
    country: str = Field("", description="Country name")
    country_code: str = Field("", alias="countryCode", description="ISO country code")
