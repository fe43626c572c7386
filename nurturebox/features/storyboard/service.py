# nurturebox/features/storyboard/service.py
from typing import Iterable, List, Sequence

from nurturebox.exceptions import ValidationFailure
from nurturebox.features.characters.schemas import Character
from nurturebox.logger import get_logger
from .prompt import SHOT_SUFFIXES, build_base_prompt, build_shot_prompt
from .schemas import SceneDraft, StoryboardPrompt

log = get_logger(__name__)

MISSING_DESCRIPTION = "Please provide a scene description"

def resolve_character_names(characters: Sequence[Character], selected_ids: Iterable[str]) -> List[str]:
    """
    Names of the selected characters, in the order of `characters`.
    Ids with no loaded character (deleted since they were picked) are dropped.
    """
    wanted = set(selected_ids)
    return [c.character_name for c in characters if c.id in wanted]

def validate_scene_draft(draft: SceneDraft) -> None:
    if not draft.scene_description.strip():
        raise ValidationFailure(MISSING_DESCRIPTION)

def generate_storyboard(draft: SceneDraft, characters: Sequence[Character],
                        selected_ids: Iterable[str] = ()) -> List[StoryboardPrompt]:
    """Four shot prompts for one scene. Pure; raises ValidationFailure on a blank description."""
    validate_scene_draft(draft)

    names = resolve_character_names(characters, selected_ids)
    base = build_base_prompt(
        scene_description=draft.scene_description,
        scene_duration=draft.scene_duration,
        character_names=names,
        camera_movement=draft.camera_movement,
        lighting_style=draft.lighting_style,
    )
    log.debug(f"storyboard base prompt: {base}")
    return [
        StoryboardPrompt(id=n, text=build_shot_prompt(base, n))
        for n in range(1, len(SHOT_SUFFIXES) + 1)
    ]
