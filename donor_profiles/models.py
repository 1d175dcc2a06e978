"""
Data models for the donor profile flattener.

This module defines the Pydantic models for donor profile documents as they
arrive from the source file, and the flat output record written to the sink.
"""

from typing import Annotated, Any, Dict, List, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator


# =============================================================================
# Input Models
# =============================================================================


class InputModel(BaseModel):
    """Base for input documents; unknown keys are ignored."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


def _none_to_empty(v: Any) -> Any:
    return "" if v is None else v


# A JSON null decodes to the empty string, like a missing key
NullableStr = Annotated[str, BeforeValidator(_none_to_empty)]


class AnswerValue(InputModel):
    """The raw answer; its value may be any JSON scalar or missing."""

    value: Any = None


class Question(InputModel):
    """The question an answer responds to."""

    label: NullableStr = ""


class AnswerEntry(InputModel):
    """A single answer keyed by question in a donor's answer map."""

    answer: AnswerValue = Field(default_factory=AnswerValue)
    question: Question = Field(default_factory=Question)

    @field_validator("answer", "question", mode="before")
    @classmethod
    def default_missing_blocks(cls, v: Any) -> Any:
        """Treat a null block like an absent one."""
        return {} if v is None else v


class FreezeMember(InputModel):
    """Freeze-program membership details."""

    profile_bio: NullableStr = ""


class DonorUser(InputModel):
    """Identity block of a donor profile."""

    id: NullableStr = ""
    donor_code: NullableStr = Field("", alias="donorCode")
    date_of_birth: NullableStr = Field("", alias="dateOfBirth")
    freeze_member: FreezeMember = Field(default_factory=FreezeMember)

    @field_validator("freeze_member", mode="before")
    @classmethod
    def default_freeze_member(cls, v: Any) -> Any:
        return {} if v is None else v


class Photo(InputModel):
    """A donor photo."""

    cropped_source: NullableStr = ""


class DonorProfile(InputModel):
    """A donor profile document with its free-form answer map."""

    answers: Dict[str, Optional[AnswerEntry]] = Field(default_factory=dict)
    user: DonorUser = Field(default_factory=DonorUser)
    photos: List[Photo] = Field(default_factory=list)
    program: Any = None

    @field_validator("answers", "user", mode="before")
    @classmethod
    def default_missing_mappings(cls, v: Any) -> Any:
        return {} if v is None else v

    @field_validator("photos", mode="before")
    @classmethod
    def default_missing_photos(cls, v: Any) -> Any:
        if v is None:
            return []
        if isinstance(v, list):
            return [{} if photo is None else photo for photo in v]
        return v

    def answer_value(self, key: str) -> Any:
        """Return the raw answer value for a key, or None if absent."""
        entry = self.answers.get(key)
        if entry is None:
            return None
        return entry.answer.value


# =============================================================================
# Output Models
# =============================================================================


class OutputRecord(BaseModel):
    """Flat, normalized donor record.

    Field order is the serialized key order.
    """

    model_config = ConfigDict(populate_by_name=True)

    user: str = ""
    user_image: str = ""
    text: str = ""
    job_title: str = ""
    artistic_ability: int = 0
    athletic_ability: int = 0
    mathematical_ability: int = 0
    scientific_ability: int = 0
    singing_ability: int = 0
    hair_type: str = ""
    hair_color: str = ""
    education_level: str = ""
    jewish_ancestry: str = ""
    height_ft: int = 0
    height_in: int = 0
    logical_creative: str = ""
    serious_silly: str = ""
    introvert_extrovert: str = ""
    relationship_preferences: str = ""
    passions: str = ""
    goals_in_life: str = ""
    greatest_strengths: str = ""
    perfect_day: str = ""
    dinner_party: str = ""
    motivation: str = ""
    message_to_ips: str = ""
    book: str = ""
    movie: str = ""
    food: str = ""
    allergies: str = ""
    dental_work: str = ""
    dimples: str = ""
    egg_retrieval: str = ""
    freckles: str = ""
    siblings: str = ""
    complexion: str = ""
    diet: str = ""
    dominant_hand: str = ""
    eye_color: str = ""
    hair_texture: str = ""
    marital_status: str = ""
    vision_quality: str = ""
    weight: int = 0
    donor_code: str = Field("", alias="donorCode")
    profile_bio: str = ""
    age: int = 0
