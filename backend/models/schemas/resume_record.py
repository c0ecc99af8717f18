"""Canonical structured resume record produced by the extraction step."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from services.errors import RenderFailure


class _RecordModel(BaseModel):
    """Frozen base: unknown keys are ignored, JSON nulls fall back to defaults.

    A null item inside a list is dropped.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data
        return {
            k: [item for item in v if item is not None] if isinstance(v, (list, tuple)) else v
            for k, v in data.items()
            if v is not None
        }


class ExperienceEntry(_RecordModel):
    """A single job, most recent first by convention."""

    title: str = ""
    dates: str = ""  # free-form range, e.g. "Jan 2020 – Present"
    company: str = ""
    responsibilities: tuple[str, ...] = ()


class EducationEntry(_RecordModel):
    degree: str = ""
    institution: str = ""
    year: str = ""


class Skills(_RecordModel):
    technical: str = ""  # comma-joined
    core: str = ""


class PersonalDetails(_RecordModel):
    nationality: str = ""
    languages: str = ""
    visa_status: str = Field(default="", alias="visaStatus")
    other: tuple[str, ...] = ()


class ResumeRecord(_RecordModel):
    """Structured resume as returned by the text-understanding service.

    Every field is always present; an absent section is an empty string or
    an empty tuple. Sequence order is document order when rendered.
    """

    name: str = ""
    location: str = ""
    phone: str = ""
    email: str = ""
    summary: tuple[str, ...] = ()
    experience: tuple[ExperienceEntry, ...] = ()
    education: tuple[EducationEntry, ...] = ()
    certifications: tuple[str, ...] = ()
    skills: Skills = Skills()
    achievements: tuple[str, ...] = ()
    personal: PersonalDetails = PersonalDetails()

    @classmethod
    def from_payload(cls, payload: Any) -> "ResumeRecord":
        """Validate a decoded JSON payload, raising RenderFailure on a shape violation."""
        if isinstance(payload, cls):
            return payload
        try:
            return cls.model_validate(payload)
        except ValidationError as e:
            fields = ", ".join(
                ".".join(str(p) for p in err["loc"]) or "<root>" for err in e.errors()
            )
            raise RenderFailure(
                f"Resume record does not match the expected structure: {fields}"
            ) from e
