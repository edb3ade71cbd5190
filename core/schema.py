"""
Shared base for config file models.

Config files use camelCase keys; Python code uses snake_case attributes.
Unknown keys are ignored so older binaries accept newer config files.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Base model for every block of the JSON config file."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )
