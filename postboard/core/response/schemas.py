from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class ApiResponse(BaseModel, Generic[T]):
    """Uniform envelope: {success, message, data, statusCode}.

    ``status_code`` is informational; the HTTP status is set by whoever sends
    the response.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    success: bool = True
    message: str = Field(default="Success")
    data: Optional[T] = None
    status_code: int = Field(default=200)

    def to_content(self) -> dict:
        """Serialize with wire (camelCase) field names."""
        return self.model_dump(mode="json", by_alias=True)


def success(data: Any, message: str = "Success", status_code: int = 200) -> ApiResponse:
    return ApiResponse(success=True, message=message, data=data, status_code=status_code)


def error(message: str = "Error", status_code: int = 500, data: Any = None) -> ApiResponse:
    return ApiResponse(success=False, message=message, data=data, status_code=status_code)
