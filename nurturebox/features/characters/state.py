# nurturebox/features/characters/state.py
from typing import List, Optional

from nurturebox.exceptions import CharacterNotFound, StoreError, ValidationFailure
from nurturebox.features.views.navigation import CHARACTERS_PATH, build_header
from nurturebox.lib.character_store import DELETE_FAILED, FETCH_FAILED, SAVE_FAILED
from nurturebox.schemas import Notification
from .schemas import Character, CharacterFields, CharacterForm, CharacterLibraryView, CharacterOrder
from .service import create_character, delete_character, list_characters, update_character

EMPTY_LIBRARY = "No characters yet. Add your first character above!"


class CharacterLibrary:
    """
    State of one Character Library view: the listing, the add/edit form and
    the notifications raised while handling actions.

    Every mutation goes straight to the store and is followed by a full
    re-fetch on success; nothing is cached optimistically. Failures leave
    the form and listing as they were.
    """

    path = CHARACTERS_PATH

    def __init__(self, store):
        self.store = store
        self.characters: List[Character] = []
        self.character_name = ""
        self.profile_text = ""
        self.editing_id: Optional[str] = None
        self.loading = False
        self.notifications: List[Notification] = []

    def notify(self, notification: Notification) -> None:
        self.notifications.append(notification)

    async def load(self) -> bool:
        try:
            self.characters = await list_characters(self.store, CharacterOrder.created_at)
        except StoreError:
            self.notify(Notification.error(FETCH_FAILED))
            return False
        return True

    def edit(self, character: Character) -> None:
        self.character_name = character.character_name
        self.profile_text = character.profile_text
        self.editing_id = character.id

    def edit_by_id(self, character_id: str) -> bool:
        for character in self.characters:
            if character.id == character_id:
                self.edit(character)
                return True
        return False

    def cancel(self) -> None:
        self.character_name = ""
        self.profile_text = ""
        self.editing_id = None

    async def save(self) -> bool:
        """Create, or update the character in edit mode. Returns True on success."""
        fields = CharacterFields(character_name=self.character_name, profile_text=self.profile_text)
        self.loading = True
        try:
            if self.editing_id:
                await update_character(self.store, self.editing_id, fields)
                self.notify(Notification.success("Character updated successfully"))
            else:
                await create_character(self.store, fields)
                self.notify(Notification.success("Character saved successfully"))
        except ValidationFailure as e:
            self.notify(Notification.validation(str(e)))
            return False
        except StoreError:
            self.notify(Notification.error(SAVE_FAILED))
            return False
        finally:
            self.loading = False

        self.cancel()
        await self.load()
        return True

    async def delete(self, character_id: str) -> bool:
        try:
            await delete_character(self.store, character_id)
        except CharacterNotFound:
            # already gone from the store; the reload drops the stale row
            pass
        except StoreError:
            self.notify(Notification.error(DELETE_FAILED))
            return False

        self.notify(Notification.success("Character deleted successfully"))
        if self.editing_id == character_id:
            # edit mode never points at a deleted record
            self.cancel()
        await self.load()
        return True

    def view(self) -> CharacterLibraryView:
        editing = self.editing_id is not None
        if self.loading:
            submit_label = "Saving..."
        else:
            submit_label = "Update Character" if editing else "Save Character"
        return CharacterLibraryView(
            header=build_header(self.path),
            form=CharacterForm(
                heading="Edit Character" if editing else "Add New Character",
                character_name=self.character_name,
                profile_text=self.profile_text,
                editing_id=self.editing_id,
                submit_label=submit_label,
                can_cancel=editing,
            ),
            characters=list(self.characters),
            empty_message=None if self.characters else EMPTY_LIBRARY,
            loading=self.loading,
            notifications=list(self.notifications),
        )
