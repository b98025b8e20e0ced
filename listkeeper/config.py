# ListKeeper configuration
# -----------------------------------------------------------
# Constants shared by both apps plus a small Settings object that is built
# once from the environment and passed explicitly to the windows.
#
# Environment:
#   LISTKEEPER_DATA_DIR     where lists, theme and logs live
#   LISTKEEPER_LOG_LEVEL    console log level (INFO by default)
#   LISTKEEPER_APPEARANCE   CustomTkinter appearance mode (dark by default)

import os
from dataclasses import dataclass
from pathlib import Path

# -------------------------------
# CONFIG
# -------------------------------
TODO_APP_TITLE = "ToDo Reminder"
GROCERY_APP_TITLE = "Grocery List Manager"

DEFAULT_DATA_DIR = Path.home() / "Documents" / "ListKeeper"
TODO_FILE_NAME = "ToDoReminder.txt"
THEME_FILE_NAME = "listkeeper_purple_theme.json"
GROCERY_SETTINGS_FILE_NAME = "GroceryManagerSettings.txt"
GROCERY_TYPES_FILE_NAME = "groceryTypes.json"
GROCERY_LIST_FILE_NAME = "groceryList.txt"
LOG_FILE_NAME = "listkeeper.log"

# First line of every file we write; checked on load.
TODO_FILE_MARKER = "ToDoReminder.txt"
GROCERY_TYPES_MARKER = "GroceryTypeManager 2024"
GROCERY_ITEMS_MARKER = "GroceryItemManager 2024"
GROCERY_SETTINGS_MARKER = "GroceryManager Settings 2024"

DEADLINE_INPUT_FORMATS = (
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d %H:%M",
    "%d-%m-%Y %H:%M:%S",
    "%d-%m-%Y %H:%M",
    "%d/%m/%Y %H:%M:%S",
    "%d/%m/%Y %H:%M",
    "%d.%m.%Y %H:%M",
)
DISPLAY_DATE_FORMAT = "%d-%m-%Y"
DISPLAY_TIME_FORMAT = "%H:%M"

ENV_PREFIX = "LISTKEEPER"


def _k(suffix: str) -> str:
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None or v.strip() == "" else v.strip()


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    data_dir: Path
    log_level: str = "INFO"
    appearance: str = "dark"

    @property
    def todo_file(self) -> Path:
        return self.data_dir / TODO_FILE_NAME

    @property
    def theme_file(self) -> Path:
        return self.data_dir / THEME_FILE_NAME

    @property
    def grocery_settings_file(self) -> Path:
        return self.data_dir / GROCERY_SETTINGS_FILE_NAME

    @property
    def grocery_types_file(self) -> Path:
        return self.data_dir / GROCERY_TYPES_FILE_NAME

    @property
    def grocery_list_file(self) -> Path:
        return self.data_dir / GROCERY_LIST_FILE_NAME

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            data_dir=_env_path(_k("DATA_DIR"), DEFAULT_DATA_DIR),
            log_level=_env(_k("LOG_LEVEL"), "INFO").upper(),
            appearance=_env(_k("APPEARANCE"), "dark").lower(),
        )


def ensure_dirs(settings: Settings) -> None:
    os.makedirs(settings.data_dir, exist_ok=True)
