"""Fixed resume template: ResumeRecord -> ordered list of formatted blocks.

Pure and deterministic. Empty fields get a placeholder or drop their block;
they never raise. Spacing values are twips and keep one rhythm throughout:
the last item of a repeated group carries more trailing space than the
items before it.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from models.schemas.document import Alignment, Block, BlockKind, TextRun
from models.schemas.resume_record import (
    EducationEntry,
    ExperienceEntry,
    PersonalDetails,
    ResumeRecord,
    Skills,
)

# Font sizes (half-points)
NAME_SIZE = 32
HEADING_SIZE = 24
BODY_SIZE = 22

# Spacing (twips)
SECTION_GAP = 120
ITEM_GAP = 60
GROUP_GAP = 120
LAST_GAP = 180

PLACEHOLDER_NAME = "NAME"
PLACEHOLDER_LOCATION = "Location"
PLACEHOLDER_PHONE = "Phone"
PLACEHOLDER_EMAIL = "email@example.com"
PLACEHOLDER_TITLE = "Job Title"
PLACEHOLDER_DATES = "Dates"
PLACEHOLDER_COMPANY = "Company Name"
PLACEHOLDER_DEGREE = "Degree"
PLACEHOLDER_INSTITUTION = "Institution"
PLACEHOLDER_YEAR = "Year"
PLACEHOLDER_TECHNICAL = "Skills to be added"
PLACEHOLDER_CORE = "Competencies to be added"
PLACEHOLDER_NATIONALITY = "To be added"


def _run(
    text: str,
    bold: bool = False,
    underline: bool = False,
    size: int = BODY_SIZE,
    tab: bool = False,
) -> TextRun:
    return TextRun(text=text, bold=bold, underline=underline, size=size, tab=tab)


def _paragraph(*runs: TextRun, after: int, alignment: Alignment = Alignment.LEFT) -> Block:
    return Block(kind=BlockKind.PARAGRAPH, runs=runs, alignment=alignment, space_after=after)


def _bullet(text: str, after: int = ITEM_GAP) -> Block:
    return Block(kind=BlockKind.LIST_ITEM, runs=(_run(text),), space_after=after)


def _section_heading(title: str) -> Block:
    return Block(
        kind=BlockKind.HEADING,
        runs=(_run(title, bold=True, size=HEADING_SIZE),),
        space_before=SECTION_GAP,
        space_after=SECTION_GAP,
    )


def _trailing(index: int, count: int, interior: int, last: int) -> int:
    return last if index == count - 1 else interior


def _header(record: ResumeRecord) -> list[Block]:
    return [
        Block(
            kind=BlockKind.HEADING,
            runs=(_run(record.name or PLACEHOLDER_NAME, bold=True, size=NAME_SIZE),),
            alignment=Alignment.CENTER,
            space_after=100,
        ),
        _paragraph(
            _run(f"{record.location or PLACEHOLDER_LOCATION}|{record.phone or PLACEHOLDER_PHONE}"),
            alignment=Alignment.CENTER,
            after=50,
        ),
        _paragraph(
            _run(record.email or PLACEHOLDER_EMAIL, underline=True),
            alignment=Alignment.CENTER,
            after=200,
        ),
    ]


def _summary(paragraphs: Sequence[str]) -> list[Block]:
    count = len(paragraphs)
    return [
        _paragraph(
            _run(text),
            alignment=Alignment.JUSTIFIED,
            after=_trailing(i, count, GROUP_GAP, 240),
        )
        for i, text in enumerate(paragraphs)
    ]


def _job(job: ExperienceEntry, is_last_job: bool) -> list[Block]:
    blocks = [
        _paragraph(
            _run(job.title or PLACEHOLDER_TITLE, bold=True),
            _run(job.dates or PLACEHOLDER_DATES, tab=True),
            after=ITEM_GAP,
        ),
        _paragraph(_run(job.company or PLACEHOLDER_COMPANY), after=80),
    ]
    # Only a job followed by another one gets the wider gap after its last bullet
    count = len(job.responsibilities)
    last_gap = ITEM_GAP if is_last_job else GROUP_GAP
    blocks.extend(
        _bullet(resp, _trailing(i, count, ITEM_GAP, last_gap))
        for i, resp in enumerate(job.responsibilities)
    )
    return blocks


def _experience(jobs: Sequence[ExperienceEntry]) -> list[Block]:
    blocks = [_section_heading("EXPERIENCE")]
    for i, job in enumerate(jobs):
        blocks.extend(_job(job, is_last_job=i == len(jobs) - 1))
    return blocks


def _education(entries: Sequence[EducationEntry]) -> list[Block]:
    blocks = [_section_heading("EDUCATION")]
    count = len(entries)
    for i, edu in enumerate(entries):
        blocks.append(_paragraph(_run(edu.degree or PLACEHOLDER_DEGREE, bold=True), after=ITEM_GAP))
        blocks.append(
            _paragraph(
                _run(f"{edu.institution or PLACEHOLDER_INSTITUTION} | {edu.year or PLACEHOLDER_YEAR}"),
                after=_trailing(i, count, GROUP_GAP, LAST_GAP),
            )
        )
    return blocks


def _bulleted_section(title: str, items: Sequence[str]) -> list[Block]:
    """Heading plus one bullet per item; nothing at all when items is empty."""
    if not items:
        return []
    count = len(items)
    return [_section_heading(title)] + [
        _bullet(item, _trailing(i, count, ITEM_GAP, LAST_GAP)) for i, item in enumerate(items)
    ]


def _skills(skills: Skills) -> list[Block]:
    return [
        _section_heading("SKILLS"),
        _paragraph(
            _run("Technical skills: ", bold=True),
            _run(skills.technical or PLACEHOLDER_TECHNICAL),
            alignment=Alignment.JUSTIFIED,
            after=100,
        ),
        _paragraph(
            _run("Core competencies: ", bold=True),
            _run(skills.core or PLACEHOLDER_CORE),
            alignment=Alignment.JUSTIFIED,
            after=LAST_GAP,
        ),
    ]


def _personal(personal: PersonalDetails) -> list[Block]:
    blocks = [
        _section_heading("PERSONAL DETAILS"),
        _bullet(f"Nationality: {personal.nationality or PLACEHOLDER_NATIONALITY}"),
    ]
    if personal.languages:
        blocks.append(_bullet(f"Languages: {personal.languages}"))
    if personal.visa_status:
        blocks.append(_bullet(f"Visa Status: {personal.visa_status}"))
    blocks.extend(_bullet(detail) for detail in personal.other)
    return blocks


def render_blocks(record: ResumeRecord | Mapping[str, Any]) -> list[Block]:
    """Lay out a record in template order.

    A mapping is validated first; a structurally invalid one raises
    RenderFailure.
    """
    record = ResumeRecord.from_payload(record)
    return [
        *_header(record),
        *_summary(record.summary),
        *_experience(record.experience),
        *_education(record.education),
        *_bulleted_section("CERTIFICATIONS", record.certifications),
        *_bulleted_section("KEY ACHIEVEMENTS", record.achievements),
        *_skills(record.skills),
        *_personal(record.personal),
    ]
