"""Base model for request and response bodies.

Fields are declared in snake_case and exchanged on the wire in camelCase.
Either name is accepted when validating.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base for all API payload models."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
