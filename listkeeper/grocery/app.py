# Grocery List Manager — dark CustomTkinter front-end for grocery lists
# -----------------------------------------------------------
#   • Pick a grocery type, enter the number of units, add it to the list
#   • Units can be edited in place; the running total follows
#   • "Edit grocery types" opens a second window for the price list
#   • The last used list and types files are remembered between sessions
#
# Usage:
#   grocery-list-manager

import logging
import tkinter as tk
from pathlib import Path
from tkinter import filedialog, messagebox

import customtkinter as ctk

from ..config import GROCERY_APP_TITLE, Settings, ensure_dirs
from ..errors import FileLoadError
from ..logging_setup import level_from_name, setup_logging
from ..theme import MUTED_COLOR, ROW_BORDER, ROW_COLOR, ROW_SELECTED_BORDER, apply_theme
from .models import GroceryItem, GroceryType
from .settings import GroceryPaths, load_grocery_paths, save_grocery_paths
from .store import GroceryItemStore, GroceryTypeStore
from .validation import format_money, parse_non_negative

logger = logging.getLogger(__name__)

FILE_TYPES = [("Text files", "*.txt"), ("JSON files", "*.json"), ("All files", "*.*")]

ABOUT_TEXT = (
    "Use this program to keep track of your grocery lists!\n\n"
    "Edit your grocery list in this window, and edit the grocery types you can choose "
    "from with the 'Edit grocery types' button. Both grocery lists and grocery types "
    "can be saved and opened.\n\n"
    "Press Enter after changing the number of units of a row to update the total."
)


def type_option_label(grocery: GroceryType) -> str:
    return f"{grocery.description} ({grocery.cost:.2f} kr)"


# -------------------------------
# GUI Components
# -------------------------------
class SelectableRow(ctk.CTkFrame):
    def __init__(self, master, index: int, *, on_select=None, selected: bool = False):
        super().__init__(master)
        self.index = index
        self.on_select = on_select
        self.configure(fg_color=ROW_COLOR, corner_radius=12, border_width=1, border_color=ROW_BORDER)
        self.bind("<Button-1>", self._handle_click, add="+")
        self.set_selected(selected)

    def _clickable(self, widget):
        widget.bind("<Button-1>", self._handle_click, add="+")
        return widget

    def _handle_click(self, _event):
        if callable(self.on_select):
            self.on_select(self)

    def set_selected(self, selected: bool) -> None:
        self.configure(border_color=ROW_SELECTED_BORDER if selected else ROW_BORDER)


class GroceryItemRow(SelectableRow):
    def __init__(self, master, index: int, item: GroceryItem, *, on_units_changed, **kwargs):
        super().__init__(master, index, **kwargs)
        self.item = item
        self.on_units_changed = on_units_changed

        self._clickable(ctk.CTkLabel(self, text=item.description, anchor="w")).grid(
            row=0, column=0, sticky="ew", padx=(12, 4), pady=8
        )
        self._clickable(ctk.CTkLabel(self, text=f"{item.cost:.2f}", width=80, anchor="e")).grid(
            row=0, column=1, padx=4, pady=8
        )
        self.units_var = tk.StringVar(value=f"{item.units:g}")
        self.units_entry = ctk.CTkEntry(self, textvariable=self.units_var, width=80, justify="right")
        self.units_entry.grid(row=0, column=2, padx=4, pady=8)
        self.units_entry.bind("<Return>", self._commit_units)
        self.units_entry.bind("<FocusOut>", self._commit_units)
        self.total_label = ctk.CTkLabel(self, text=format_money(item.total_cost), width=110, anchor="e")
        self._clickable(self.total_label).grid(row=0, column=3, padx=(4, 12), pady=8)
        self.grid_columnconfigure(0, weight=1)

    def _commit_units(self, _event=None):
        try:
            units = parse_non_negative(self.units_var.get(), "No. of Units")
        except ValueError:
            self.units_entry.configure(border_color="#F87171")
            return
        self.units_entry.configure(border_color=ROW_BORDER)
        self.item.units = units
        self.total_label.configure(text=format_money(self.item.total_cost))
        self.on_units_changed()


class GroceryTypeRow(SelectableRow):
    def __init__(self, master, index: int, grocery: GroceryType, **kwargs):
        super().__init__(master, index, **kwargs)
        self._clickable(ctk.CTkLabel(self, text=grocery.description, anchor="w")).grid(
            row=0, column=0, sticky="ew", padx=(12, 4), pady=8
        )
        self._clickable(ctk.CTkLabel(self, text=format_money(grocery.cost), width=110, anchor="e")).grid(
            row=0, column=1, padx=(4, 12), pady=8
        )
        self.grid_columnconfigure(0, weight=1)


def _select_row(container, index: int):
    for child in container.winfo_children():
        if isinstance(child, SelectableRow):
            child.set_selected(child.index == index)


class GroceryTypesWindow(ctk.CTkToplevel):
    """Modal editor for the grocery types the main window can choose from."""

    def __init__(self, master, *, types_file: Path, default_file: Path):
        super().__init__(master)
        self.title("Available Groceries")
        self.geometry("620x520")
        self.transient(master)
        self.grab_set()
        self.types_file = Path(types_file)
        self.default_file = Path(default_file)
        self.store = GroceryTypeStore()
        self.selected_index: int | None = None
        self.saved = False

        self._build()
        self._load_cached()
        self.protocol("WM_DELETE_WINDOW", self._cancel)

    def _build(self):
        bar = ctk.CTkFrame(self, fg_color="transparent")
        bar.pack(fill="x", padx=12, pady=(12, 4))
        for text, command in (("New", self._new), ("Open", self._open), ("Save As", self._save_as), ("About", self._about)):
            ctk.CTkButton(bar, text=text, width=70, command=command).pack(side="left", padx=4)

        form = ctk.CTkFrame(self)
        form.pack(fill="x", padx=12, pady=8)
        form.columnconfigure(0, weight=1)
        ctk.CTkLabel(form, text="Description").grid(row=0, column=0, sticky="w", padx=8, pady=(8, 0))
        ctk.CTkLabel(form, text="Cost (kr)").grid(row=0, column=1, sticky="w", padx=8, pady=(8, 0))
        self.description_entry = ctk.CTkEntry(form)
        self.description_entry.grid(row=1, column=0, sticky="ew", padx=8, pady=(0, 8))
        self.cost_entry = ctk.CTkEntry(form, width=100)
        self.cost_entry.grid(row=1, column=1, padx=8, pady=(0, 8))
        ctk.CTkButton(form, text="Add", width=70, command=self._add).grid(row=1, column=2, padx=8, pady=(0, 8))

        self.list_frame = ctk.CTkScrollableFrame(self)
        self.list_frame.pack(fill="both", expand=True, padx=12, pady=4)

        btns = ctk.CTkFrame(self, fg_color="transparent")
        btns.pack(fill="x", padx=12, pady=(4, 12))
        ctk.CTkButton(btns, text="Remove selected", command=self._remove_selected).pack(side="left", padx=4)
        ctk.CTkButton(btns, text="Cancel", width=80, command=self._cancel).pack(side="right", padx=4)
        ctk.CTkButton(btns, text="Save", width=80, command=self._save).pack(side="right", padx=4)

    def _load_cached(self):
        try:
            self.store.load(self.types_file)
        except FileLoadError as exc:
            messagebox.showerror(
                "Error",
                f"The file located at {self.types_file} couldn't be read ({exc}); "
                "the default file will be opened instead.",
                parent=self,
            )
            self.types_file = self.default_file
            try:
                self.store.load_default(self.types_file)
            except (OSError, FileLoadError) as err:
                logger.exception("Default grocery types could not be loaded")
                messagebox.showerror("Error", f"The default grocery types could not be loaded: {err}", parent=self)
        self.refresh()

    def refresh(self):
        for w in self.list_frame.winfo_children():
            w.destroy()
        for index, grocery in enumerate(self.store.types):
            GroceryTypeRow(
                self.list_frame,
                index,
                grocery,
                on_select=self._on_select,
                selected=index == self.selected_index,
            ).pack(fill="x", padx=6, pady=3)

    def _on_select(self, row: SelectableRow):
        self.selected_index = row.index
        _select_row(self.list_frame, row.index)

    def _add(self):
        description = self.description_entry.get().strip()
        if not description:
            messagebox.showerror("Error", "The description is empty; a grocery needs a description.", parent=self)
            return
        try:
            cost = parse_non_negative(self.cost_entry.get(), "Cost")
        except ValueError as exc:
            messagebox.showerror("Error", str(exc), parent=self)
            return
        self.store.add_type(description, cost)
        self.description_entry.delete(0, tk.END)
        self.cost_entry.delete(0, tk.END)
        self.refresh()

    def _remove_selected(self):
        if self.selected_index is None:
            return
        self.store.remove_type(self.selected_index)
        self.selected_index = None
        self.refresh()

    def _write(self, path: Path) -> bool:
        try:
            self.store.save(path)
        except OSError as exc:
            logger.exception("Saving grocery types to %s failed", path)
            messagebox.showerror("Error", f"The file could not be saved: {exc}", parent=self)
            return False
        self.types_file = Path(path)
        self.saved = True
        return True

    def _save(self):
        if self._write(self.types_file):
            messagebox.showinfo(
                "Saving Available Groceries",
                "The data was saved successfully.\nThis window will now close.",
                parent=self,
            )
            self.destroy()

    def _save_as(self):
        path = filedialog.asksaveasfilename(
            parent=self,
            initialdir=str(self.types_file.parent),
            initialfile=self.types_file.name,
            defaultextension=".json",
            filetypes=FILE_TYPES,
        )
        if path and self._write(Path(path)):
            messagebox.showinfo(
                "Saving Available Groceries",
                "The data was saved successfully.\nThis window will now close.",
                parent=self,
            )
            self.destroy()

    def _open(self):
        while True:
            path = filedialog.askopenfilename(
                parent=self, initialdir=str(self.types_file.parent), filetypes=FILE_TYPES
            )
            if not path:
                return
            try:
                self.store.load(path)
            except FileLoadError:
                if messagebox.askyesno(
                    "Error",
                    "The file is not readable by the application.\nWould you like to try a different file?",
                    parent=self,
                ):
                    continue
                return
            self.types_file = Path(path)
            self.selected_index = None
            self.refresh()
            messagebox.showinfo("Open File", "The file has been opened.", parent=self)
            return

    def _new(self):
        answer = messagebox.askyesnocancel(
            "Create New File", "Do you want to quick-save before creating New?", parent=self
        )
        if answer is None:
            return
        if answer and not self._write(self.types_file):
            return
        self.store.clear()
        self.selected_index = None
        self.refresh()

    def _cancel(self):
        if messagebox.askyesno("Cancel", "Are you sure you want to cancel?", parent=self):
            self.destroy()

    def _about(self):
        messagebox.showinfo("About " + GROCERY_APP_TITLE, ABOUT_TEXT, parent=self)

    def show(self) -> Path | None:
        """Block until closed; return the saved types file or None if cancelled."""
        self.wait_window()
        return self.types_file if self.saved else None


class GroceryApp(ctk.CTk):
    """Main window for Grocery List Manager."""

    def __init__(self, settings: Settings):
        super().__init__()
        self.settings = settings
        self.paths = load_grocery_paths(settings.grocery_settings_file, GroceryPaths.defaults(settings))
        self.items = GroceryItemStore()
        self.types = GroceryTypeStore()
        self.selected_index: int | None = None
        self._type_labels: list[str] = []

        self.title(GROCERY_APP_TITLE)
        self.geometry("860x620")
        self.minsize(640, 460)

        self._build_header()
        self._build_form()
        self._build_list()

        self._load_types()
        self._load_cached_list()

    # ----------------------- UI Builders -----------------------
    def _build_header(self):
        header = ctk.CTkFrame(self)
        header.pack(fill="x", padx=16, pady=(16, 8))
        ctk.CTkLabel(header, text="🟣 " + GROCERY_APP_TITLE, font=("Segoe UI", 20, "bold")).pack(side="left", padx=8)
        for text, command in (
            ("New", self._new_list),
            ("Open", self._open_list),
            ("Save As", self._save_as),
            ("About", self._show_about),
        ):
            ctk.CTkButton(header, text=text, width=70, command=command).pack(side="left", padx=4)

    def _build_form(self):
        form = ctk.CTkFrame(self)
        form.pack(fill="x", padx=16, pady=8)
        form.columnconfigure(0, weight=1)
        ctk.CTkLabel(form, text="Type").grid(row=0, column=0, sticky="w", padx=8, pady=(8, 0))
        ctk.CTkLabel(form, text="No. of Units").grid(row=0, column=1, sticky="w", padx=8, pady=(8, 0))
        self.type_menu = ctk.CTkOptionMenu(form, values=[""])
        self.type_menu.grid(row=1, column=0, sticky="ew", padx=8, pady=(0, 8))
        self.units_entry = ctk.CTkEntry(form, width=100)
        self.units_entry.grid(row=1, column=1, padx=8, pady=(0, 8))
        self.units_entry.bind("<Return>", lambda _e: self._add_item())
        ctk.CTkButton(form, text="Add", width=70, command=self._add_item).grid(row=1, column=2, padx=8, pady=(0, 8))
        ctk.CTkButton(form, text="Edit grocery types", command=self._edit_types).grid(
            row=1, column=3, padx=8, pady=(0, 8)
        )

    def _build_list(self):
        self.list_frame = ctk.CTkScrollableFrame(self, label_text="Description · Cost · Units · Total")
        self.list_frame.pack(fill="both", expand=True, padx=16, pady=4)

        footer = ctk.CTkFrame(self, fg_color="transparent")
        footer.pack(fill="x", padx=16, pady=(4, 16))
        ctk.CTkButton(footer, text="Remove selected", command=self._remove_selected).pack(side="left", padx=4)
        self.total_label = ctk.CTkLabel(footer, text="", font=("Segoe UI", 16, "bold"))
        self.total_label.pack(side="right", padx=8)
        ctk.CTkLabel(footer, text="Total:", text_color=MUTED_COLOR).pack(side="right")

    # ----------------------- Helpers -----------------------
    def display_error(self, msg: str):
        messagebox.showerror("Error", msg, parent=self)

    def _remember_paths(self, paths: GroceryPaths):
        self.paths = paths
        try:
            save_grocery_paths(self.settings.grocery_settings_file, paths)
        except OSError:
            logger.warning("Could not update %s", self.settings.grocery_settings_file, exc_info=True)

    def update_total(self):
        self.total_label.configure(text=format_money(self.items.total_cost()))

    def refresh(self):
        for w in self.list_frame.winfo_children():
            w.destroy()
        for index, item in enumerate(self.items.items):
            GroceryItemRow(
                self.list_frame,
                index,
                item,
                on_units_changed=self.update_total,
                on_select=self._on_select,
                selected=index == self.selected_index,
            ).pack(fill="x", padx=6, pady=3)
        if not len(self.items):
            ctk.CTkLabel(self.list_frame, text="The grocery list is empty.").pack(pady=12)
        self.update_total()

    def _refresh_type_menu(self):
        self._type_labels = [type_option_label(g) for g in self.types.types]
        values = self._type_labels or [""]
        self.type_menu.configure(values=values)
        self.type_menu.set(values[0])

    def _selected_type_index(self) -> int:
        try:
            return self._type_labels.index(self.type_menu.get())
        except ValueError:
            return -1

    def _on_select(self, row: SelectableRow):
        self.selected_index = row.index
        _select_row(self.list_frame, row.index)

    # ----------------------- Loading -----------------------
    def _load_types(self):
        try:
            self.types.load(self.paths.types_file)
        except FileLoadError:
            logger.warning("Grocery types file %s unusable; using defaults", self.paths.types_file)
            default = self.settings.grocery_types_file
            try:
                self.types.load_default(default)
            except (OSError, FileLoadError) as exc:
                logger.exception("Default grocery types could not be loaded")
                self.display_error(f"The default grocery types could not be loaded: {exc}")
            self._remember_paths(GroceryPaths(types_file=default, list_file=self.paths.list_file))
        self._refresh_type_menu()

    def _try_load_list(self, path: str | Path) -> bool:
        path = Path(path)
        if not path.is_file():
            return False
        try:
            self.items.load(path)
        except FileLoadError:
            return False
        self._remember_paths(self.paths.with_list_file(path))
        self.selected_index = None
        self.refresh()
        return True

    def _load_cached_list(self):
        path = self.paths.list_file
        if self._try_load_list(path):
            return
        default = self.settings.grocery_list_file
        if path != default:
            self.display_error(
                f"The file located at {path} couldn't be read, the default file will be opened instead."
            )
        try:
            self.items.load_default(default)
        except (OSError, FileLoadError) as exc:
            logger.exception("Default grocery list could not be loaded")
            self.display_error(f"The default grocery list could not be loaded: {exc}")
        self._remember_paths(GroceryPaths(types_file=self.paths.types_file, list_file=default))
        self.refresh()

    # ----------------------- Actions -----------------------
    def _add_item(self):
        problems: list[str] = []
        index = self._selected_type_index()
        found = self.types.get_type(index)
        if not found:
            problems.append("The value of 'Type' is invalid. Make sure that you have selected a valid grocery.")
        try:
            units = parse_non_negative(self.units_entry.get(), "No. of Units")
        except ValueError as exc:
            problems.append(str(exc))
        if problems:
            self.display_error("\n".join(problems))
            return
        grocery = found.value
        self.items.add_item(grocery.description, grocery.cost, units)
        self.units_entry.delete(0, tk.END)
        self.refresh()

    def _remove_selected(self):
        if self.selected_index is None:
            return
        self.items.remove_item(self.selected_index)
        self.selected_index = None
        self.refresh()

    def _edit_types(self):
        window = GroceryTypesWindow(
            self, types_file=self.paths.types_file, default_file=self.settings.grocery_types_file
        )
        saved = window.show()
        if saved is not None:
            self._remember_paths(self.paths.with_types_file(saved))
        self._load_types()

    def _new_list(self):
        if messagebox.askyesno(
            "Create New",
            "Any changes will be lost, do you want to continue to create New?",
            parent=self,
        ):
            self.items.clear()
            self.selected_index = None
            self.refresh()

    def _open_list(self):
        while True:
            path = filedialog.askopenfilename(
                parent=self,
                initialdir=str(self.paths.list_file.parent),
                defaultextension=".txt",
                filetypes=FILE_TYPES,
            )
            if not path:
                return
            if self._try_load_list(path):
                return
            if not messagebox.askyesno(
                "File Not Readable",
                "The file is not readable by the application.\nWould you like to try a different file?",
                parent=self,
            ):
                return

    def _save_as(self):
        path = filedialog.asksaveasfilename(
            parent=self,
            initialdir=str(self.paths.list_file.parent),
            initialfile=self.paths.list_file.name,
            defaultextension=".txt",
            filetypes=FILE_TYPES,
        )
        if not path:
            return
        try:
            self.items.save(path)
        except OSError as exc:
            logger.exception("Saving grocery list to %s failed", path)
            self.display_error(f"The file could not be saved: {exc}")
            return
        self._remember_paths(self.paths.with_list_file(path))
        messagebox.showinfo("Saving Grocery List", "The data was saved successfully.", parent=self)

    def _show_about(self):
        messagebox.showinfo("About " + GROCERY_APP_TITLE, ABOUT_TEXT, parent=self)


# -------------------------------
# MAIN
# -------------------------------
def main() -> None:
    settings = Settings.from_env()
    ensure_dirs(settings)
    setup_logging(log_dir=settings.data_dir, console_level=level_from_name(settings.log_level))
    logger.info("Starting %s (data dir %s)", GROCERY_APP_TITLE, settings.data_dir)
    apply_theme(settings)
    app = GroceryApp(settings)
    app.mainloop()


if __name__ == "__main__":
    main()
