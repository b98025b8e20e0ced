import json
import logging
import os
import tkinter as tk
from pathlib import Path

import customtkinter as ctk
from tkcalendar import DateEntry

from .config import Settings

logger = logging.getLogger(__name__)

BASE_THEME = "dark-blue"

# Purple accent applied on top of the bundled dark-blue theme.
PURPLE_OVERRIDES = {
    "CTkButton": {
        "fg_color": ["#8B5CF6", "#6D28D9"],
        "hover_color": ["#7C3AED", "#5B21B6"],
        "text_color": ["#FFFFFF", "#FFFFFF"],
    },
    "CTkEntry": {
        "fg_color": ["#2C2C2C", "#2C2C2C"],
        "border_color": ["#3F3F46", "#3F3F46"],
        "text_color": ["#E5E7EB", "#E5E7EB"],
    },
    "CTkOptionMenu": {
        "fg_color": ["#3B3B3B", "#3B3B3B"],
        "button_color": ["#8B5CF6", "#6D28D9"],
        "button_hover_color": ["#7C3AED", "#5B21B6"],
    },
    "CTkCheckBox": {
        "border_color": ["#8B5CF6", "#6D28D9"],
        "fg_color": ["#8B5CF6", "#6D28D9"],
        "hover_color": ["#7C3AED", "#5B21B6"],
    },
    "CTkScrollableFrame": {
        "label_fg_color": ["#312E81", "#312E81"],
    },
}

OVERDUE_COLOR = "#F87171"
TEXT_COLOR = "#F9FAFB"
MUTED_COLOR = "#9CA3AF"
ROW_COLOR = "#0F172A"
ROW_BORDER = "#1E1B4B"
ROW_SELECTED_BORDER = "#7C3AED"


def _bundled_theme_path(name: str) -> Path:
    return Path(os.path.dirname(ctk.__file__)) / "assets" / "themes" / f"{name}.json"


def write_purple_theme_if_missing(theme_file: Path) -> bool:
    """Create the purple theme JSON next to the user's lists. Returns True if usable."""
    if theme_file.exists():
        return True
    try:
        with open(_bundled_theme_path(BASE_THEME), "r", encoding="utf-8") as f:
            theme = json.load(f)
    except (OSError, ValueError):
        logger.warning("Bundled %s theme not found; using it by name instead", BASE_THEME)
        return False
    for widget, values in PURPLE_OVERRIDES.items():
        theme.setdefault(widget, {}).update(values)
    theme_file.parent.mkdir(parents=True, exist_ok=True)
    with open(theme_file, "w", encoding="utf-8") as f:
        json.dump(theme, f, indent=2)
    return True


def apply_theme(settings: Settings) -> None:
    ctk.set_appearance_mode(settings.appearance)
    if not write_purple_theme_if_missing(settings.theme_file):
        ctk.set_default_color_theme(BASE_THEME)
        return
    try:
        ctk.set_default_color_theme(str(settings.theme_file))
    except (OSError, ValueError, KeyError):
        logger.warning("Theme %s could not be applied; falling back to %s", settings.theme_file, BASE_THEME)
        ctk.set_default_color_theme(BASE_THEME)


def create_dark_date_entry(master) -> DateEntry:
    """Return a DateEntry that matches the dark UI theme."""
    entry = DateEntry(
        master,
        date_pattern="dd-mm-yyyy",
        font=("Segoe UI", 13),
        background="#1E1B4B",
        foreground="#E5E7EB",
        borderwidth=0,
        width=14,
        selectbackground="#8B5CF6",
        selectforeground=TEXT_COLOR,
        normalbackground="#1E1B4B",
        normalforeground=TEXT_COLOR,
        headersbackground="#312E81",
        headersforeground="#E5E7EB",
    )
    try:
        cal = entry._top_cal  # type: ignore[attr-defined]
        cal.configure(
            background="#111827",
            foreground=TEXT_COLOR,
            weekendbackground="#1E1B4B",
            weekendforeground="#F3F4F6",
            othermonthbackground="#111827",
            othermonthforeground="#6B7280",
        )
    except (AttributeError, tk.TclError):
        # tkcalendar internals differ between releases; the entry still works.
        pass
    return entry
