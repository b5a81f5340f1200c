import base64
from datetime import datetime
from typing import Annotated, Generic, List, Optional, TypeVar

from pydantic import (
    AfterValidator,
    BaseModel,
    ConfigDict,
    HttpUrl,
    PlainSerializer,
    StringConstraints,
)
from pydantic.alias_generators import to_camel

from portfolio.utils.clock import as_utc

T = TypeVar("T")


NonEmptyStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
TrimmedStr = Annotated[str, StringConstraints(strip_whitespace=True)]
UrlStr = Annotated[HttpUrl, PlainSerializer(str, return_type=str)]
# aware UTC both ways, serialized with a Z suffix
UtcDatetime = Annotated[datetime, AfterValidator(as_utc)]


def encode_image(value):
    if isinstance(value, (bytes, bytearray, memoryview)):
        return base64.b64encode(bytes(value)).decode("ascii")
    return value


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class Page(CamelModel, Generic[T]):
    items: List[T]
    total: int
    page: int
    total_pages: int


class OkResponse(BaseModel):
    ok: bool = True
    id: Optional[str] = None
