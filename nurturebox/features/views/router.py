# nurturebox/features/views/router.py
"""
The two application views, rendered as JSON view models.

Each request builds its own state object, loads it from the store and
serialises it; no view state survives the request. Actions (generate,
save, delete) run against that fresh state and return the resulting view,
notifications included.
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import RedirectResponse

from nurturebox.dependencies import get_character_store
from nurturebox.features.characters.schemas import CharacterLibraryView, CharacterSaveRequest
from nurturebox.features.characters.state import CharacterLibrary
from nurturebox.features.storyboard.schemas import StoryboardRequest, StoryboardView
from nurturebox.features.storyboard.state import StoryboardComposer
from .navigation import CHARACTERS_PATH, DEFAULT_PATH, STORYBOARD_PATH

VIEW_PATHS = (STORYBOARD_PATH, CHARACTERS_PATH)

router = APIRouter(tags=["views"])
# registered after every other router so it only sees unmatched paths
fallback_router = APIRouter(tags=["views"])

@router.get("/", include_in_schema=False)
async def root() -> RedirectResponse:
    return RedirectResponse(DEFAULT_PATH)

@router.get(STORYBOARD_PATH, response_model=StoryboardView)
async def storyboard_view(store=Depends(get_character_store)) -> StoryboardView:
    composer = StoryboardComposer(store)
    await composer.load()
    return composer.view()

@router.post(STORYBOARD_PATH, response_model=StoryboardView)
async def storyboard_generate_view(req: StoryboardRequest, store=Depends(get_character_store)) -> StoryboardView:
    """Generate from the composer: validation problems come back as notifications, not errors."""
    composer = StoryboardComposer(store)
    await composer.load()
    composer.draft = req.draft()
    for character_id in req.selected_character_ids:
        if not composer.is_selected(character_id):
            composer.toggle(character_id)
    await composer.generate()
    return composer.view()

@router.get(CHARACTERS_PATH, response_model=CharacterLibraryView)
async def characters_view(
    edit: Optional[str] = None,
    store=Depends(get_character_store),
) -> CharacterLibraryView:
    """`edit` puts the form in edit mode for that record; an unknown id is ignored."""
    library = CharacterLibrary(store)
    await library.load()
    if edit:
        library.edit_by_id(edit)
    return library.view()

@router.post(CHARACTERS_PATH, response_model=CharacterLibraryView)
async def characters_save_view(
    req: CharacterSaveRequest,
    store=Depends(get_character_store),
) -> CharacterLibraryView:
    library = CharacterLibrary(store)
    await library.load()
    library.editing_id = req.editing_id or None
    library.character_name = req.character_name
    library.profile_text = req.profile_text
    await library.save()
    return library.view()

@router.delete(CHARACTERS_PATH + "/{character_id}", response_model=CharacterLibraryView)
async def characters_delete_view(
    character_id: str,
    editing_id: Optional[str] = None,
    store=Depends(get_character_store),
) -> CharacterLibraryView:
    library = CharacterLibrary(store)
    await library.load()
    if editing_id:
        library.edit_by_id(editing_id)
    await library.delete(character_id)
    return library.view()

@fallback_router.get("/{path:path}", include_in_schema=False)
async def unknown_view(path: str) -> RedirectResponse:
    if path == "api" or path.startswith("api/"):
        raise HTTPException(404, "Not Found")
    target = "/" + path.strip("/")
    return RedirectResponse(target if target in VIEW_PATHS else DEFAULT_PATH)
