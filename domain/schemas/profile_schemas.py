from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class FamilyMember(BaseModel):
    """Family member as stored on the user document.

    ``email`` is kept as a raw string: invalid addresses must reach recipient
    resolution so they can be dropped with a warning instead of failing the
    whole profile.
    """

    name: Optional[str] = None
    first_name: Optional[str] = Field(default=None, alias="firstName")
    email: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class UserProfile(BaseModel):
    user_id: str = Field(..., alias="_id")
    name: Optional[str] = None
    email: Optional[str] = None
    family_members: List[FamilyMember] = Field(default_factory=list, alias="familyMembers")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @property
    def family_addresses(self) -> List[Optional[str]]:
        return [m.email for m in self.family_members]
