# nurturebox/schemas.py
from typing import List, Literal
from pydantic import BaseModel, Field

class Notification(BaseModel):
    """A transient user-facing message (the toast of a view)."""
    title: str
    description: str
    variant: Literal["default", "destructive"] = "default"

    @classmethod
    def success(cls, description: str) -> "Notification":
        return cls(title="Success", description=description)

    @classmethod
    def error(cls, description: str) -> "Notification":
        return cls(title="Error", description=description, variant="destructive")

    @classmethod
    def validation(cls, description: str) -> "Notification":
        return cls(title="Validation Error", description=description, variant="destructive")

class NavLink(BaseModel):
    label: str
    path: str
    active: bool = False

class ViewHeader(BaseModel):
    title: str
    path: str
    navigation: List[NavLink] = Field(default_factory=list)
