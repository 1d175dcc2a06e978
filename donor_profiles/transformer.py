"""
Record transformer for donor profiles.

This module turns one donor profile document into one flat output record:
typed extraction from the dynamic answer map, ordered assembly of the
summary text, and age derivation from the date of birth. Every function here
is pure apart from logging; field-level problems resolve to defaults and
never raise.
"""

import calendar
import json
import math
import re
from datetime import date, datetime, timedelta, timezone
from typing import Any, Iterable, List, Optional

from donor_profiles.fields import (
    ANSWER_FIELDS,
    BIO_LABEL,
    LABEL_OVERRIDES,
    SUMMARY_INTRO,
    SUMMARY_KEYS,
    FieldKind,
)
from donor_profiles.models import DonorProfile, OutputRecord
from donor_profiles.utils.errors import MissingPhotoError
from donor_profiles.utils.logging import LogContext, get_logger, log_performance

logger = get_logger(__name__)

# Birth dates that cannot be parsed fall back to the zero instant
ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)

_RFC3339_RE = re.compile(
    r"^(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})(\.\d+)?(Z|[+-]\d{2}:\d{2})$"
)


# =============================================================================
# Typed answer extraction
# =============================================================================


def _is_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and math.isfinite(value)


def extract_string(donor: DonorProfile, key: str) -> str:
    """Return the answer for ``key`` if it is a string, else ``""``."""
    value = donor.answer_value(key)
    if isinstance(value, str):
        return value
    return ""


def extract_int(donor: DonorProfile, key: str) -> int:
    """Return the answer for ``key`` truncated to an int if it is a number, else 0.

    Numeric-looking strings are not parsed.
    """
    value = donor.answer_value(key)
    if _is_number(value):
        return int(value)
    return 0


# =============================================================================
# Summary text
# =============================================================================


def format_answer_value(value: Any) -> str:
    """Render an answer value for the summary text."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
        return repr(value)
    if isinstance(value, int):
        return str(value)
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def normalize_text(text: str) -> str:
    """Replace underscores with spaces and lowercase."""
    return text.replace("_", " ").lower()


def build_summary_text(donor: DonorProfile) -> str:
    """
    Assemble the natural-language summary for a donor.

    Answers are taken in ``SUMMARY_KEYS`` order, never in the order of the
    donor's answer map. Absent, null, and empty answers are skipped.

    Args:
        donor: Donor profile document

    Returns:
        Normalized summary paragraph
    """
    parts = [SUMMARY_INTRO]

    for key in SUMMARY_KEYS:
        entry = donor.answers.get(key)
        if entry is None or entry.answer.value is None:
            continue

        rendered = format_answer_value(entry.answer.value)
        if rendered == "":
            continue

        label = LABEL_OVERRIDES.get(key, entry.question.label.strip())
        parts.append(f"{label}: {rendered}.")

    bio = donor.user.freeze_member.profile_bio
    if bio.strip():
        parts.append(f"{BIO_LABEL}: {bio}.")

    return normalize_text(" ".join(parts))


# =============================================================================
# Age
# =============================================================================


def parse_birth_date(value: str) -> datetime:
    """
    Parse an RFC 3339 timestamp.

    Anything else (including a bare date) yields ``ZERO_TIME`` so that one bad
    record never aborts the batch.
    """
    match = _RFC3339_RE.fullmatch(value or "")
    if match:
        year, month, day, hour, minute, second = (int(g) for g in match.groups()[:6])
        fraction, offset = match.group(7), match.group(8)
        microsecond = int((fraction[1:] + "000000")[:6]) if fraction else 0

        try:
            if offset == "Z":
                tzinfo = timezone.utc
            else:
                sign = -1 if offset[0] == "-" else 1
                delta = timedelta(hours=int(offset[1:3]), minutes=int(offset[4:6]))
                tzinfo = timezone(sign * delta)
            return datetime(year, month, day, hour, minute, second, microsecond, tzinfo=tzinfo)
        except ValueError:
            pass

    logger.debug(f"Unparseable birth date {value!r}, using zero time")
    return ZERO_TIME


def _adjusted_birth_day(birth: date, today: date) -> int:
    """Birth day-of-year shifted so it lines up with the current year's calendar."""
    birth_day = birth.timetuple().tm_yday
    current_day = today.timetuple().tm_yday
    birth_leap = calendar.isleap(birth.year)
    today_leap = calendar.isleap(today.year)

    if birth_leap and not today_leap and birth_day >= 60:
        return birth_day - 1
    if today_leap and not birth_leap and current_day >= 60:
        return birth_day + 1
    return birth_day


def calculate_age(birth: datetime, today: Optional[date] = None) -> int:
    """
    Whole years between ``birth`` and ``today``.

    Birthdays are compared by day of year, adjusted across leap and non-leap
    years, so a Feb 29 birthday is reached on Feb 28 in non-leap years.
    """
    today = today or date.today()
    years = today.year - birth.year
    if today.timetuple().tm_yday < _adjusted_birth_day(birth.date(), today):
        years -= 1
    return years


# =============================================================================
# Record transformation
# =============================================================================


def resolve_user_image(donor: DonorProfile, require_photo: bool = False) -> str:
    """Return the first photo's cropped source URL."""
    if donor.photos:
        return donor.photos[0].cropped_source

    if require_photo:
        raise MissingPhotoError(donor.user.id)

    logger.warning(f"Donor {donor.user.id!r} has no photos, leaving user_image empty")
    return ""


def transform(
    donor: DonorProfile,
    today: Optional[date] = None,
    require_photo: bool = False,
) -> OutputRecord:
    """
    Flatten one donor profile into an output record.

    Args:
        donor: Donor profile document
        today: Processing date for the age calculation (defaults to today)
        require_photo: Raise ``MissingPhotoError`` instead of defaulting
            ``user_image`` when the donor has no photos

    Returns:
        Flat output record
    """
    with LogContext(user_id=donor.user.id):
        values = {}
        for spec in ANSWER_FIELDS:
            if spec.kind is FieldKind.INTEGER:
                values[spec.key] = extract_int(donor, spec.key)
            else:
                values[spec.key] = extract_string(donor, spec.key)

        return OutputRecord(
            user=donor.user.id,
            user_image=resolve_user_image(donor, require_photo),
            text=build_summary_text(donor),
            donor_code=donor.user.donor_code,
            profile_bio=donor.user.freeze_member.profile_bio,
            age=calculate_age(parse_birth_date(donor.user.date_of_birth), today),
            **values,
        )


@log_performance
def transform_batch(
    donors: Iterable[DonorProfile],
    today: Optional[date] = None,
    require_photo: bool = False,
) -> List[OutputRecord]:
    """Transform every donor, in order, against a single processing date."""
    today = today or date.today()
    records = [transform(donor, today=today, require_photo=require_photo) for donor in donors]
    logger.info(f"Transformed {len(records)} donor profiles")
    return records
