"""Shared pydantic base for analysis contracts.

Attributes are snake_case in Python; JSON uses camelCase so stored reports
keep the field names the presentation layer reads (overallScore, wordCount...).
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_json(self) -> str:
        """Serialize with camelCase keys."""
        return self.model_dump_json(by_alias=True)
