# nurturebox/features/characters/schemas.py
from datetime import datetime
from enum import Enum
from typing import List, Optional
from pydantic import BaseModel, Field

from nurturebox.schemas import Notification, ViewHeader

class Character(BaseModel):
    id: str = Field(..., description="Store-assigned identifier")
    character_name: str
    profile_text: str
    created_at: Optional[datetime] = Field(None, description="Server-assigned creation time")

class CharacterFields(BaseModel):
    # presence is checked (after trimming) in the service, not here
    character_name: str = Field("", description="Display name")
    profile_text: str = Field("", description="Free-text profile: background, traits, look")

class CharacterOrder(str, Enum):
    """
    Read-time sort projections over the one canonical listing query.

    Names compare case-insensitively (`casefold`) on every backend; the
    Supabase store re-applies `sort` to the ordered rows it receives.
    """
    created_at = "created_at"  # Character Library
    alphabetical = "name"      # Storyboard composer

    @property
    def column(self) -> str:
        return "character_name" if self is CharacterOrder.alphabetical else "created_at"

    def sort(self, characters: List[Character]) -> List[Character]:
        if self is CharacterOrder.alphabetical:
            return sorted(characters, key=lambda c: c.character_name.casefold())
        # stable sort keeps insertion order for equal (or missing) timestamps
        return sorted(characters, key=lambda c: c.created_at.timestamp() if c.created_at else 0.0)

class CharacterSaveRequest(CharacterFields):
    editing_id: Optional[str] = Field(None, description="Record being edited; absent for a new character")

class CharacterListResponse(BaseModel):
    characters: List[Character]

class CharacterMutationResponse(BaseModel):
    character: Optional[Character] = None
    characters: Optional[List[Character]] = Field(
        None, description="Listing refreshed after the mutation; null when the refresh failed"
    )
    notification: Notification

class CharacterForm(BaseModel):
    heading: str = "Add New Character"
    character_name: str = ""
    profile_text: str = ""
    editing_id: Optional[str] = None
    submit_label: str = "Save Character"
    can_cancel: bool = False

class CharacterLibraryView(BaseModel):
    header: ViewHeader
    form: CharacterForm
    characters: List[Character] = Field(default_factory=list, description="Creation order")
    empty_message: Optional[str] = None
    loading: bool = False
    notifications: List[Notification] = Field(default_factory=list)
