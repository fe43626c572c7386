# nurturebox/features/storyboard/state.py
import asyncio
from typing import List, Optional, Set

from nurturebox.config import config
from nurturebox.exceptions import StoreError, ValidationFailure
from nurturebox.features.characters.schemas import Character, CharacterOrder
from nurturebox.features.characters.service import list_characters
from nurturebox.features.views.navigation import STORYBOARD_PATH, build_header
from nurturebox.lib.character_store import FETCH_FAILED
from nurturebox.schemas import Notification
from .schemas import CharacterChoice, SceneDraft, StoryboardPrompt, StoryboardView
from .service import generate_storyboard, validate_scene_draft

NO_CHARACTERS = "No characters available. Create characters in the Character Library first."


class StoryboardComposer:
    """
    State of one Storyboard composer view.

    Owns the scene draft, the set of selected character ids and the last
    generated prompts. Characters are re-read from the store on every
    `load()`; nothing is shared with other views.
    """

    path = STORYBOARD_PATH

    def __init__(self, store, *, delay: Optional[float] = None):
        self.store = store
        self.delay = config.generation_delay_seconds if delay is None else delay
        self.characters: List[Character] = []
        self.selected: Set[str] = set()
        self.draft = SceneDraft()
        self.prompts: List[StoryboardPrompt] = []
        self.loading = False
        self.notifications: List[Notification] = []

    def notify(self, notification: Notification) -> None:
        self.notifications.append(notification)

    async def load(self) -> bool:
        try:
            self.characters = await list_characters(self.store, CharacterOrder.alphabetical)
        except StoreError:
            self.notify(Notification.error(FETCH_FAILED))
            return False
        return True

    def toggle(self, character_id: str) -> bool:
        """Flip membership of `character_id`; returns whether it is now selected."""
        if character_id in self.selected:
            self.selected.discard(character_id)
            return False
        self.selected.add(character_id)
        return True

    def is_selected(self, character_id: str) -> bool:
        return character_id in self.selected

    def selected_characters(self) -> List[Character]:
        return [c for c in self.characters if c.id in self.selected]

    async def generate(self) -> bool:
        """Validate, wait out the simulated generation time, then replace `prompts`."""
        try:
            validate_scene_draft(self.draft)
        except ValidationFailure as e:
            self.notify(Notification.validation(str(e)))
            return False

        self.loading = True
        try:
            if self.delay > 0:
                await asyncio.sleep(self.delay)
            self.prompts = generate_storyboard(self.draft, self.characters, self.selected)
        finally:
            self.loading = False

        self.notify(Notification.success("Storyboard prompts generated successfully!"))
        return True

    def view(self) -> StoryboardView:
        return StoryboardView(
            header=build_header(self.path),
            draft=self.draft.model_copy(),
            characters=[CharacterChoice(character=c, selected=c.id in self.selected) for c in self.characters],
            empty_message=None if self.characters else NO_CHARACTERS,
            prompts=list(self.prompts),
            generate_label="Generating..." if self.loading else "Generate Storyboard",
            loading=self.loading,
            notifications=list(self.notifications),
        )
