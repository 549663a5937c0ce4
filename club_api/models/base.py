"""
Shared base for request and response models.
"""

from typing import Any

from pydantic import BaseModel, model_validator
from pydantic.alias_generators import to_camel


def fold_key(key: str) -> str:
    """Normalize a JSON key so BirthDate, birthDate and birth_date compare equal."""
    return key.replace("_", "").lower()


class ClubModel(BaseModel):
    """
    Base model with camelCase JSON names.

    Incoming keys are matched without regard to case or underscores.
    """

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True

    @model_validator(mode="before")
    @classmethod
    def match_keys(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        lookup = {fold_key(name): field.alias or name for name, field in cls.model_fields.items()}
        return {
            (lookup.get(fold_key(key), key) if isinstance(key, str) else key): value
            for key, value in data.items()
        }
