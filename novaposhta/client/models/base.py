"""Base class for request models sent as ``methodProperties``."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class MethodProperties(BaseModel):
    """Request model with snake_case attributes and PascalCase wire names.

    Construct with either spelling; ``to_properties()`` produces the dict the
    API expects, leaving out unset optional fields.
    """

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)

    def to_properties(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")
