# nurturebox/features/storyboard/router.py
from fastapi import APIRouter, Depends, HTTPException

from nurturebox.dependencies import get_character_store
from nurturebox.exceptions import StoreError, ValidationFailure
from nurturebox.features.characters.schemas import CharacterOrder
from nurturebox.features.characters.service import list_characters
from nurturebox.logger import get_logger
from nurturebox.schemas import Notification
from .schemas import StoryboardOptions, StoryboardRequest, StoryboardResponse
from .service import generate_storyboard, validate_scene_draft

router = APIRouter(prefix="/api/v1", tags=["storyboard"])
log = get_logger(__name__)

@router.get("/storyboard/options", response_model=StoryboardOptions)
async def storyboard_options() -> StoryboardOptions:
    return StoryboardOptions()

@router.post("/storyboard/generate", response_model=StoryboardResponse)
async def generate_storyboard_endpoint(
    req: StoryboardRequest,
    store=Depends(get_character_store),
) -> StoryboardResponse:
    """
    Four shot prompts for the scene. Selected ids are resolved against the
    current character list; ids that no longer exist are skipped.
    """
    draft = req.draft()
    try:
        validate_scene_draft(draft)
    except ValidationFailure as e:
        raise HTTPException(400, str(e))

    characters = []
    if req.selected_character_ids:
        try:
            characters = await list_characters(store, CharacterOrder.alphabetical)
        except StoreError as e:
            raise HTTPException(502, str(e))

    prompts = generate_storyboard(draft, characters, req.selected_character_ids)
    log.info(f"generated {len(prompts)} storyboard prompts ({len(req.selected_character_ids)} characters selected)")
    return StoryboardResponse(
        prompts=prompts,
        notification=Notification.success("Storyboard prompts generated successfully!"),
    )
