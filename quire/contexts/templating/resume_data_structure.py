"""
Resume Data Structure

Defines the structured resume record shared by every renderer, and the
validation that turns raw input (tool arguments, YAML/JSON files) into it.

Optional fields are None when absent. Renderers check presence explicitly and
omit the corresponding line or section entirely. Accepted text is copied to
plain str, so str subclasses such as markupsafe.Markup lose any "already
escaped" marking at this boundary.
"""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple

from omegaconf import OmegaConf

from quire.contexts.templating.exceptions import ResumeValidationError
from quire.contexts.templating.logger import _log_debug, log_validation_failure

EMAIL_PATTERN = re.compile(r"[^@\s]+@[^@\s]+\.[^@\s.]+")

RESUME_FIELDS = {"name", "email", "headline", "summary", "skills", "experience"}
EXPERIENCE_FIELDS = {"company", "role", "startDate", "endDate", "achievements"}


@dataclass(frozen=True)
class Experience:
    """
    One work experience entry.

    Attributes:
        company: Employer name
        role: Job title held at the company
        start_date: Free-text start token (e.g., "1833", "Jan 2020")
        end_date: Free-text end token (e.g., "1843", "Present")
        achievements: Ordered achievement bullets
    """

    company: str
    role: str
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    achievements: Tuple[str, ...] = ()

    def date_range(self, separator: str = " -- ") -> Optional[str]:
        """
        Join whichever date bounds are present.

        Returns:
            "start<sep>end", a single bound, or None when neither bound exists
        """
        bounds = [bound for bound in (self.start_date, self.end_date) if bound is not None]
        if not bounds:
            return None
        return separator.join(bounds)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"company": self.company, "role": self.role}
        if self.start_date is not None:
            data["startDate"] = self.start_date
        if self.end_date is not None:
            data["endDate"] = self.end_date
        if self.achievements:
            data["achievements"] = list(self.achievements)
        return data


@dataclass(frozen=True)
class ResumeData:
    """
    Validated resume record.

    Attributes:
        name: Full name for the resume header (always non-empty)
        email: Contact email, syntactically valid when present
        headline: Short title shown under the name
        summary: Professional summary paragraph
        skills: Ordered skill names
        experience: Ordered work experience entries
    """

    name: str
    email: Optional[str] = None
    headline: Optional[str] = None
    summary: Optional[str] = None
    skills: Tuple[str, ...] = ()
    experience: Tuple[Experience, ...] = ()

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "ResumeData":
        """
        Validate raw input and build a ResumeData.

        Keys follow the external interface (camelCase: startDate, endDate).
        Every problem is collected before raising, so the caller receives one
        aggregated rejection. Empty optional strings count as absent.

        Args:
            raw: Mapping with resume fields

        Returns:
            Validated ResumeData

        Raises:
            ResumeValidationError: If any field is missing or malformed
        """
        errors: List[str] = []

        if not isinstance(raw, Mapping):
            raise ResumeValidationError([f"resume: expected a mapping, got {type(raw).__name__}"])

        unknown = set(raw) - RESUME_FIELDS
        if unknown:
            _log_debug(f"Ignoring unknown resume fields: {sorted(unknown)}")

        name = raw.get("name")
        if not isinstance(name, str) or not name.strip():
            errors.append("name: must be a non-empty string")

        email = _optional_text(raw, "email", "email", errors)
        if email is not None and not EMAIL_PATTERN.fullmatch(email):
            errors.append(f"email: {email!r} is not a valid email address")

        headline = _optional_text(raw, "headline", "headline", errors)
        summary = _optional_text(raw, "summary", "summary", errors)
        skills = _string_list(raw, "skills", "skills", errors)

        experience: List[Experience] = []
        raw_experience = raw.get("experience")
        if raw_experience is not None:
            if not isinstance(raw_experience, (list, tuple)):
                errors.append("experience: must be a list")
            else:
                for index, entry in enumerate(raw_experience):
                    parsed = _parse_experience(entry, f"experience[{index}]", errors)
                    if parsed is not None:
                        experience.append(parsed)

        if errors:
            log_validation_failure(errors)
            raise ResumeValidationError(errors)

        return cls(
            name=str(name),
            email=email,
            headline=headline,
            summary=summary,
            skills=tuple(skills),
            experience=tuple(experience),
        )

    @classmethod
    def from_file(cls, path: Path) -> "ResumeData":
        """
        Load and validate a resume from a YAML or JSON file.

        Unquoted YAML years (startDate: 1833) load as numbers and are read back
        as date text.

        Args:
            path: Path to the resume file

        Returns:
            Validated ResumeData
        """
        raw = OmegaConf.to_container(OmegaConf.load(Path(path)), resolve=True)
        if isinstance(raw, dict):
            _stringify_dates(raw)
        return cls.from_dict(raw)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the external camelCase mapping, dropping absent fields."""
        data: Dict[str, Any] = {"name": self.name}
        for key in ("email", "headline", "summary"):
            value = getattr(self, key)
            if value is not None:
                data[key] = value
        if self.skills:
            data["skills"] = list(self.skills)
        if self.experience:
            data["experience"] = [entry.to_dict() for entry in self.experience]
        return data


def _optional_text(
    raw: Mapping[str, Any], key: str, label: str, errors: List[str]
) -> Optional[str]:
    """Read an optional string field; blank strings are treated as absent."""
    value = raw.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        errors.append(f"{label}: must be a string")
        return None
    if not value.strip():
        return None
    return str(value)


def _string_list(raw: Mapping[str, Any], key: str, label: str, errors: List[str]) -> List[str]:
    """Read an optional list of strings, preserving order."""
    value = raw.get(key)
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        errors.append(f"{label}: must be a list of strings")
        return []

    items = []
    for index, item in enumerate(value):
        if not isinstance(item, str):
            errors.append(f"{label}[{index}]: must be a string")
            continue
        items.append(str(item))
    return items


def _parse_experience(entry: Any, label: str, errors: List[str]) -> Optional[Experience]:
    """Validate one experience mapping, recording problems under its label."""
    if not isinstance(entry, Mapping):
        errors.append(f"{label}: must be a mapping")
        return None

    unknown = set(entry) - EXPERIENCE_FIELDS
    if unknown:
        _log_debug(f"Ignoring unknown fields in {label}: {sorted(unknown)}")

    error_count = len(errors)

    for key in ("company", "role"):
        value = entry.get(key)
        if not isinstance(value, str) or not value.strip():
            errors.append(f"{label}.{key}: must be a non-empty string")

    start_date = _optional_text(entry, "startDate", f"{label}.startDate", errors)
    end_date = _optional_text(entry, "endDate", f"{label}.endDate", errors)
    achievements = _string_list(entry, "achievements", f"{label}.achievements", errors)

    if len(errors) > error_count:
        return None

    return Experience(
        company=str(entry["company"]),
        role=str(entry["role"]),
        start_date=start_date,
        end_date=end_date,
        achievements=tuple(achievements),
    )


def _stringify_dates(raw: Dict[str, Any]) -> None:
    """Turn numeric startDate/endDate scalars from a loaded file into text."""
    experience = raw.get("experience")
    if not isinstance(experience, list):
        return
    for entry in experience:
        if not isinstance(entry, dict):
            continue
        for key in ("startDate", "endDate"):
            value = entry.get(key)
            if isinstance(value, (int, float)) and not isinstance(value, bool):
                entry[key] = str(value)
