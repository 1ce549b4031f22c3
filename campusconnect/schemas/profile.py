"""
campusconnect/schemas/profile.py

Purpose: The profile built during one onboarding run

- Field types and defaults
- Write-once recording of fields by their owning step
- Completeness check used before rendering the summary
"""

from enum import Enum
from typing import List, Optional, Set

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from campusconnect.core.exceptions import ProfileFieldAlreadySetError


class Routine(str, Enum):
    """Daily routine choice."""

    EARLY_BIRD = "Early Bird"
    NIGHT_OWL = "Night Owl"


class UserProfile(BaseModel):
    """
    Mutable record filled field-by-field by the onboarding steps.
    Lives only for the duration of one run.
    """

    model_config = ConfigDict(validate_assignment=True)

    university: Optional[str] = Field(default=None, description="Selected university")
    student_id: Optional[str] = Field(default=None, description="Student ID as typed")
    major: Optional[str] = Field(default=None, description="Major/department, free text")
    routine: Optional[Routine] = None
    study_habits: List[str] = Field(default_factory=list)
    interests: List[str] = Field(default_factory=list)
    lifestyle: List[str] = Field(default_factory=list)
    premium: bool = False

    _recorded: Set[str] = PrivateAttr(default_factory=set)

    def record(self, **fields) -> None:
        """
        Writes profile fields, each at most once per run.

        Raises:
            ProfileFieldAlreadySetError: If any field was recorded before
            ValueError: If a name is not a profile field
        """
        unknown = [name for name in fields if name not in type(self).model_fields]
        if unknown:
            raise ValueError(f"Unknown profile field(s): {', '.join(unknown)}")

        repeated = [name for name in fields if name in self._recorded]
        if repeated:
            raise ProfileFieldAlreadySetError(
                f"Profile field(s) already set: {', '.join(repeated)}",
                details={"fields": repeated},
            )

        for name, value in fields.items():
            setattr(self, name, value)
            self._recorded.add(name)

    @property
    def is_complete(self) -> bool:
        """True once the required fields have all been collected."""
        return all(
            value is not None
            for value in (self.university, self.student_id, self.major, self.routine)
        )
