# nurturebox/__init__.py
from .config import config
from .logger import get_logger
from .features.storyboard.service import generate_storyboard
from .features.storyboard.schemas import SceneDraft, StoryboardPrompt
from .features.characters.schemas import Character, CharacterFields, CharacterOrder
from .main import app


__all__ = ["app",
           "config",
           "get_logger",
           "generate_storyboard",
           "SceneDraft",
           "StoryboardPrompt",
           "Character",
           "CharacterFields",
           "CharacterOrder",
           ]
