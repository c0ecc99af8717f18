"""Pydantic contracts between the extraction and rendering stages."""

from models.schemas.document import Alignment, Block, BlockKind, TextRun
from models.schemas.resume_record import (
    EducationEntry,
    ExperienceEntry,
    PersonalDetails,
    ResumeRecord,
    Skills,
)

__all__ = [
    "Alignment",
    "Block",
    "BlockKind",
    "TextRun",
    "EducationEntry",
    "ExperienceEntry",
    "PersonalDetails",
    "ResumeRecord",
    "Skills",
]
