# nurturebox/features/storyboard/schemas.py
from typing import List, Literal, Optional, get_args
from pydantic import BaseModel, Field, field_validator

from nurturebox.features.characters.schemas import Character
from nurturebox.schemas import Notification, ViewHeader

CameraMovement = Literal[
    "Static Shot",
    "Close-up",
    "Medium Shot",
    "Wide Shot",
    "Low-angle Shot",
    "Travelling Shot / Dolly",
]

LightingStyle = Literal[
    "Natural Light",
    "Soft Light",
    "Golden Hour",
    "Volumetric Lighting",
    "Cinematic Shadow",
]

CAMERA_MOVEMENTS: List[str] = list(get_args(CameraMovement))
LIGHTING_STYLES: List[str] = list(get_args(LightingStyle))

DEFAULT_DURATION = 6
MIN_DURATION = 1
MAX_DURATION = 60

class SceneDraft(BaseModel):
    """Unpersisted scene input. Duration is carried verbatim."""
    scene_description: str = ""
    scene_duration: int = DEFAULT_DURATION
    camera_movement: Optional[CameraMovement] = None
    lighting_style: Optional[LightingStyle] = None

    @field_validator("camera_movement", "lighting_style", mode="before")
    @classmethod
    def blank_choice_is_none(cls, v):
        # an untouched select sends ""
        if isinstance(v, str) and not v.strip():
            return None
        return v

class StoryboardRequest(SceneDraft):
    # the composer's number input declares 1..60; the API holds callers to it
    scene_duration: int = Field(DEFAULT_DURATION, ge=MIN_DURATION, le=MAX_DURATION, description="Seconds")
    selected_character_ids: List[str] = Field(default_factory=list, description="Character ids to feature")

    def draft(self) -> SceneDraft:
        return SceneDraft(
            scene_description=self.scene_description,
            scene_duration=self.scene_duration,
            camera_movement=self.camera_movement,
            lighting_style=self.lighting_style,
        )

class StoryboardPrompt(BaseModel):
    id: int = Field(..., ge=1, le=4, description="Shot number within the run")
    text: str

class StoryboardResponse(BaseModel):
    prompts: List[StoryboardPrompt]
    notification: Notification

class StoryboardOptions(BaseModel):
    camera_movements: List[str] = Field(default_factory=lambda: list(CAMERA_MOVEMENTS))
    lighting_styles: List[str] = Field(default_factory=lambda: list(LIGHTING_STYLES))
    default_duration: int = DEFAULT_DURATION
    min_duration: int = MIN_DURATION
    max_duration: int = MAX_DURATION

class CharacterChoice(BaseModel):
    character: Character
    selected: bool = False

class StoryboardView(BaseModel):
    header: ViewHeader
    draft: SceneDraft
    characters: List[CharacterChoice] = Field(default_factory=list, description="Alphabetical by name")
    empty_message: Optional[str] = None
    options: StoryboardOptions = Field(default_factory=StoryboardOptions)
    prompts: List[StoryboardPrompt] = Field(default_factory=list)
    generate_label: str = "Generate Storyboard"
    loading: bool = False
    notifications: List[Notification] = Field(default_factory=list)
