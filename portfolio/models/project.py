from typing import Optional
from sqlmodel import SQLModel, Field
from enum import Enum
from sqlalchemy import Column, DateTime, LargeBinary, Text
from datetime import datetime

from portfolio.utils.clock import utc_now
from portfolio.utils.ids import new_id


class StatusFlag(str, Enum):
    PLANNING = "PLANNING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    MAINTAINED = "MAINTAINED"
    ARCHIVED = "ARCHIVED"


class CollabMode(str, Enum):
    SOLO = "SOLO"
    GROUP = "GROUP"


class AffiliationType(str, Enum):
    INDEPENDENT = "INDEPENDENT"
    UNIVERSITY = "UNIVERSITY"
    ORGANIZATION = "ORGANIZATION"
    CLUB = "CLUB"


class SourceCodeAvailability(str, Enum):
    OPEN_SOURCE = "OPEN_SOURCE"
    CLOSED_SOURCE = "CLOSED_SOURCE"
    UNDER_NDA = "UNDER_NDA"


class Project(SQLModel, table=True):
    id: str = Field(default_factory=new_id, primary_key=True, max_length=32)
    name: str = Field(index=True)
    short_desc: str
    long_desc: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    status_flag: StatusFlag = Field(default=StatusFlag.PLANNING)
    start_date: datetime = Field(sa_type=DateTime(timezone=True), index=True)
    end_date: Optional[datetime] = Field(default=None, sa_type=DateTime(timezone=True))
    collab_mode: CollabMode
    affiliation: str
    affiliation_type: AffiliationType
    source_code_availability: SourceCodeAvailability
    # comma-joined, see portfolio.utils.tags
    tech_stacks: str
    project_url: Optional[str] = None
    live_url: Optional[str] = None

    image: Optional[bytes] = Field(default=None, sa_column=Column(LargeBinary, nullable=True))
    image_type: Optional[str] = None

    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
    updated_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
