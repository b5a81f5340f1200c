from typing import List, Optional

from pydantic import field_validator, model_validator

from portfolio.models.project import (
    StatusFlag,
    CollabMode,
    AffiliationType,
    SourceCodeAvailability,
)
from portfolio.schemas.common import (
    CamelModel,
    NonEmptyStr,
    TrimmedStr,
    UrlStr,
    UtcDatetime,
    encode_image,
)
from portfolio.utils.tags import split_tags


class ProjectInput(CamelModel):
    name: NonEmptyStr
    short_desc: NonEmptyStr
    long_desc: Optional[TrimmedStr] = None
    status_flag: StatusFlag
    start_date: UtcDatetime
    end_date: Optional[UtcDatetime] = None
    collab_mode: CollabMode
    affiliation: NonEmptyStr
    affiliation_type: AffiliationType
    source_code_availability: SourceCodeAvailability
    tech_stacks: NonEmptyStr
    project_url: Optional[UrlStr] = None
    live_url: Optional[UrlStr] = None

    # base64 payload, replaced only when sent
    image: Optional[str] = None
    image_type: Optional[str] = None

    @model_validator(mode="after")
    def planning_has_no_end_date(self):
        if self.status_flag == StatusFlag.PLANNING and self.end_date is not None:
            raise ValueError("A project in PLANNING cannot have an end date")
        return self


class ProjectSummary(CamelModel):
    id: str
    name: str
    short_desc: str
    long_desc: Optional[str]
    status_flag: StatusFlag
    start_date: UtcDatetime
    end_date: Optional[UtcDatetime]
    collab_mode: CollabMode
    affiliation: str
    affiliation_type: AffiliationType
    source_code_availability: SourceCodeAvailability
    tech_stacks: str
    project_url: Optional[str]
    live_url: Optional[str]
    image_type: Optional[str]
    created_at: UtcDatetime
    updated_at: UtcDatetime

    has_image: bool = False
    tech_stack_list: List[str] = []

    @model_validator(mode="after")
    def derive_fields(self):
        self.has_image = self.image_type is not None
        self.tech_stack_list = split_tags(self.tech_stacks)
        return self


class ProjectRead(ProjectSummary):
    image: Optional[str] = None

    @field_validator("image", mode="before")
    @classmethod
    def encode_image_bytes(cls, value):
        return encode_image(value)
