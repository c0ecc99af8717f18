import pytest
from pydantic import ValidationError

from models.schemas.resume_record import (
    EducationEntry,
    ExperienceEntry,
    PersonalDetails,
    ResumeRecord,
)
from services.errors import RenderFailure


class TestDefaults:
    def test_every_field_present_when_empty(self):
        r = ResumeRecord()
        assert r.name == ""
        assert r.summary == ()
        assert r.experience == ()
        assert r.certifications == ()
        assert r.skills.technical == ""
        assert r.skills.core == ""
        assert r.personal.visa_status == ""
        assert r.personal.other == ()

    def test_partial_payload_is_filled(self):
        r = ResumeRecord.from_payload({"name": "A", "personal": {"nationality": "Omani"}})
        assert r.name == "A"
        assert r.personal.nationality == "Omani"
        assert r.personal.languages == ""
        assert r.achievements == ()

    def test_nulls_read_as_absent(self):
        r = ResumeRecord.from_payload({
            "name": None,
            "summary": None,
            "skills": None,
            "experience": [{"title": "Dev", "dates": None, "responsibilities": None}],
            "personal": {"visaStatus": None, "other": None},
        })
        assert r.name == ""
        assert r.summary == ()
        assert r.skills.technical == ""
        assert r.experience[0].dates == ""
        assert r.experience[0].responsibilities == ()
        assert r.personal.visa_status == ""

    def test_null_list_items_dropped(self):
        r = ResumeRecord.from_payload({
            "summary": ["a", None],
            "experience": [{"title": "Dev", "responsibilities": [None, "Shipped"]}],
            "personal": {"other": [None]},
        })
        assert r.summary == ("a",)
        assert r.experience[0].responsibilities == ("Shipped",)
        assert r.personal.other == ()

    def test_entry_models(self):
        assert ExperienceEntry(title="SWE").responsibilities == ()
        assert EducationEntry(degree="BSc").year == ""


class TestShape:
    def test_visa_status_alias(self):
        p = PersonalDetails.model_validate({"visaStatus": "Resident"})
        assert p.visa_status == "Resident"
        assert p.model_dump(by_alias=True)["visaStatus"] == "Resident"

    def test_unknown_keys_ignored(self):
        r = ResumeRecord.from_payload({"name": "A", "projects": ["x"]})
        assert not hasattr(r, "projects")

    def test_numbers_become_strings(self):
        r = ResumeRecord.from_payload({"phone": 971500000000, "education": [{"year": 2016}]})
        assert r.phone == "971500000000"
        assert r.education[0].year == "2016"

    def test_order_is_preserved(self):
        r = ResumeRecord.from_payload({"certifications": ["z", "a", "m", "a"]})
        assert r.certifications == ("z", "a", "m", "a")

    def test_frozen(self):
        r = ResumeRecord(name="A")
        with pytest.raises(ValidationError):
            r.name = "B"

    def test_sequences_are_immutable(self):
        r = ResumeRecord.from_payload({"summary": ["a"], "experience": [{"title": "Dev"}]})
        assert isinstance(r.summary, tuple)
        assert isinstance(r.experience, tuple)
        with pytest.raises(AttributeError):
            r.summary.append("b")

    def test_from_payload_passes_records_through(self):
        r = ResumeRecord(name="A")
        assert ResumeRecord.from_payload(r) is r


class TestInvalid:
    def test_experience_not_a_list(self):
        with pytest.raises(RenderFailure, match="experience"):
            ResumeRecord.from_payload({"experience": "ten years"})

    def test_summary_not_a_list(self):
        with pytest.raises(RenderFailure, match="summary"):
            ResumeRecord.from_payload({"summary": "One paragraph only"})

    def test_payload_not_an_object(self):
        with pytest.raises(RenderFailure):
            ResumeRecord.from_payload(["JANE DOE"])
