"""
Declarative field table for donor answers.

Every answer-backed output field is described once here: its answer key, the
type it is extracted as, and (for summary fields) an optional label override.
The transformer drives both flat-field population and summary assembly from
these tables.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple


class FieldKind(str, Enum):
    """How an answer value is coerced into an output field."""

    STRING = "string"
    INTEGER = "integer"


@dataclass(frozen=True)
class FieldSpec:
    """One answer-backed output field."""

    key: str
    kind: FieldKind = FieldKind.STRING
    label_override: Optional[str] = None


SUMMARY_INTRO = "the following is a question and answer profile of an egg donor:"

BIO_LABEL = "Donor Information"


# Output order of the answer-backed fields
ANSWER_FIELDS: Tuple[FieldSpec, ...] = (
    FieldSpec("job_title"),
    FieldSpec("artistic_ability", FieldKind.INTEGER),
    FieldSpec("athletic_ability", FieldKind.INTEGER),
    FieldSpec("mathematical_ability", FieldKind.INTEGER),
    FieldSpec("scientific_ability", FieldKind.INTEGER),
    FieldSpec("singing_ability", FieldKind.INTEGER),
    FieldSpec("hair_type"),
    FieldSpec("hair_color"),
    FieldSpec("education_level"),
    FieldSpec("jewish_ancestry"),
    FieldSpec("height_ft", FieldKind.INTEGER),
    FieldSpec("height_in", FieldKind.INTEGER),
    FieldSpec("logical_creative"),
    FieldSpec("serious_silly"),
    FieldSpec("introvert_extrovert"),
    FieldSpec("relationship_preferences"),
    FieldSpec("passions"),
    FieldSpec("goals_in_life"),
    FieldSpec("greatest_strengths"),
    FieldSpec("perfect_day"),
    FieldSpec("dinner_party"),
    FieldSpec("motivation"),
    FieldSpec("message_to_ips"),
    FieldSpec("book", label_override="What are your favorite books"),
    FieldSpec("movie", label_override="What is your favorite movie"),
    FieldSpec("food", label_override="What is your favorite food"),
    FieldSpec("allergies"),
    FieldSpec("dental_work"),
    FieldSpec("dimples"),
    FieldSpec("egg_retrieval"),
    FieldSpec("freckles"),
    FieldSpec("siblings"),
    FieldSpec("complexion"),
    FieldSpec("diet"),
    FieldSpec("dominant_hand"),
    FieldSpec("eye_color"),
    FieldSpec("hair_texture"),
    FieldSpec("marital_status"),
    FieldSpec("vision_quality"),
    FieldSpec("weight", FieldKind.INTEGER),
)

FIELDS_BY_KEY: Dict[str, FieldSpec] = {spec.key: spec for spec in ANSWER_FIELDS}

# Order in which answers appear in the summary text
SUMMARY_KEYS: Tuple[str, ...] = (
    "passions",
    "goals_in_life",
    "greatest_strengths",
    "perfect_day",
    "dinner_party",
    "motivation",
    "message_to_ips",
    "book",
    "movie",
    "food",
)

LABEL_OVERRIDES: Dict[str, str] = {
    spec.key: spec.label_override for spec in ANSWER_FIELDS if spec.label_override
}
