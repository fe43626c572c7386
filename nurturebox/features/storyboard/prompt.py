# nurturebox/features/storyboard/prompt.py
from typing import Optional, Sequence

# shot order is fixed: prompt N always gets SHOT_SUFFIXES[N - 1]
SHOT_SUFFIXES = (
    "Opening establishing shot to set the mood and context.",
    "Main action sequence with character interactions and dialogue.",
    "Reaction shots and emotional beats to enhance storytelling.",
    "Closing shot that transitions to the next scene or provides resolution.",
)

def build_base_prompt(*, scene_description: str, scene_duration: int,
                      character_names: Sequence[str] = (),
                      camera_movement: Optional[str] = None,
                      lighting_style: Optional[str] = None) -> str:
    character_text = f"Featuring characters: {', '.join(character_names)}. " if character_names else ""
    camera_text = f"Camera: {camera_movement}. " if camera_movement else ""
    lighting_text = f"Lighting: {lighting_style}. " if lighting_style else ""
    duration_text = f"Duration: {scene_duration} seconds."
    return f"{character_text}Scene: {scene_description}. {camera_text}{lighting_text}{duration_text}"

def build_shot_prompt(base_prompt: str, shot_number: int) -> str:
    return f"{base_prompt} {SHOT_SUFFIXES[shot_number - 1]}"
