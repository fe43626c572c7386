# nurturebox/features/views/navigation.py
from nurturebox.config import config
from nurturebox.schemas import NavLink, ViewHeader

STORYBOARD_PATH = "/storyboard"
CHARACTERS_PATH = "/characters"
DEFAULT_PATH = STORYBOARD_PATH

NAV_LINKS = (
    ("Storyboard Generator", STORYBOARD_PATH),
    ("Character Library", CHARACTERS_PATH),
)

def build_header(current_path: str) -> ViewHeader:
    """Title bar + nav links, with the link for `current_path` marked active."""
    return ViewHeader(
        title=config.app_title,
        path=current_path,
        navigation=[NavLink(label=label, path=path, active=(path == current_path)) for label, path in NAV_LINKS],
    )
