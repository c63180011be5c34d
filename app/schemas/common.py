"""
Common schemas and enums used across the application.
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from enum import Enum


class SortOrder(str, Enum):
    """Sort direction accepted by listing endpoints."""
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def direction(cls, value: str) -> int:
        """Map a caller-supplied order to a MongoDB sort direction."""
        return 1 if value == cls.ASC.value else -1


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys, matching stored documents."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
