"""
Service information response schema.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ServiceInfoResponse(BaseModel):
    """Non-secret part of the resolved configuration."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    public_url: str = Field(
        ...,
        description="URL under which the service is reachable",
        examples=["https://camus.example.com"],
    )
    time_zone: str = Field(
        ...,
        description="IANA time zone the service works in",
        examples=["Europe/Prague"],
    )
    server_time: datetime = Field(
        ...,
        description="Current server time in the configured time zone",
    )
