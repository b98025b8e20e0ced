# ToDo Reminder — dark CustomTkinter front-end for the task list
# -----------------------------------------------------------
#   • Form: deadline (tkcalendar DateEntry + hour/minute), priority, description
#   • Task list sorted by deadline; overdue tasks shown in red
#   • Edit moves the selected task back into the form, Delete asks first
#   • New / Open / Save / Exit ask to save unsaved changes first
#
# Usage:
#   todo-reminder

import logging
import tkinter as tk
from datetime import datetime, timedelta
from pathlib import Path
from tkinter import filedialog, messagebox

import customtkinter as ctk

from ..config import (
    DISPLAY_DATE_FORMAT,
    DISPLAY_TIME_FORMAT,
    TODO_APP_TITLE,
    TODO_FILE_NAME,
    Settings,
    ensure_dirs,
)
from ..errors import FileLoadError
from ..logging_setup import level_from_name, setup_logging
from ..lookup import Found
from ..theme import (
    MUTED_COLOR,
    OVERDUE_COLOR,
    ROW_BORDER,
    ROW_COLOR,
    ROW_SELECTED_BORDER,
    TEXT_COLOR,
    apply_theme,
    create_dark_date_entry,
)
from .models import Priority, Task
from .storage import create_default_task_file, load_tasks, save_tasks
from .store import TaskStore
from .validation import read_deadline, validate_task_input

logger = logging.getLogger(__name__)

HOURS = [f"{h:02d}" for h in range(24)]
MINUTES = [f"{m:02d}" for m in range(0, 60, 5)]
FILE_TYPES = [("ToDo Reminder files", "*.txt"), ("All files", "*.*")]

ABOUT_TEXT = (
    "ToDo Reminder keeps a list of things to do, ordered by deadline.\n\n"
    "Fill in a deadline, a priority and a description, then press Add.\n"
    "Select a task and press Edit to change it, or Delete to remove it.\n"
    "Use Save and Open to keep your list between sessions."
)


# -------------------------------
# GUI Components
# -------------------------------
class TaskRow(ctk.CTkFrame):
    def __init__(self, master, index: int, task: Task, *, on_select=None, selected: bool = False):
        super().__init__(master)
        self.index = index
        self.task = task
        self.on_select = on_select
        self.configure(fg_color=ROW_COLOR, corner_radius=12, border_width=1, border_color=ROW_BORDER)

        color = OVERDUE_COLOR if task.is_overdue() else TEXT_COLOR
        columns = (
            (task.deadline.strftime(DISPLAY_DATE_FORMAT), 110),
            (task.deadline.strftime(DISPLAY_TIME_FORMAT), 60),
            (task.priority.label, 130),
        )
        for col, (text, width) in enumerate(columns):
            label = ctk.CTkLabel(self, text=text, width=width, anchor="w", text_color=color)
            label.grid(row=0, column=col, sticky="w", padx=(12, 4), pady=8)
            label.bind("<Button-1>", self._handle_click, add="+")
        desc = ctk.CTkLabel(self, text=task.description, anchor="w", justify="left", text_color=color)
        desc.grid(row=0, column=len(columns), sticky="ew", padx=(4, 12), pady=8)
        desc.bind("<Button-1>", self._handle_click, add="+")
        self.grid_columnconfigure(len(columns), weight=1)

        self.bind("<Button-1>", self._handle_click, add="+")
        self.set_selected(selected)

    def _handle_click(self, _event):
        if callable(self.on_select):
            self.on_select(self)

    def set_selected(self, selected: bool) -> None:
        self.configure(border_color=ROW_SELECTED_BORDER if selected else ROW_BORDER)


class TaskForm(ctk.CTkFrame):
    def __init__(self, master, *, on_add):
        super().__init__(master)
        self.on_add = on_add
        self._build_form()
        self.clear()

    def _build_form(self):
        self.columnconfigure(3, weight=1)

        ctk.CTkLabel(self, text="Deadline").grid(row=0, column=0, sticky="w", padx=(12, 6), pady=(12, 0))
        self.date_entry = create_dark_date_entry(self)
        self.date_entry.grid(row=1, column=0, sticky="w", padx=(12, 6), pady=(0, 12))

        ctk.CTkLabel(self, text="Time").grid(row=0, column=1, sticky="w", padx=6, pady=(12, 0))
        time_frame = ctk.CTkFrame(self, fg_color="transparent")
        time_frame.grid(row=1, column=1, sticky="w", padx=6, pady=(0, 12))
        self.hour_menu = ctk.CTkOptionMenu(time_frame, values=HOURS, width=70)
        self.hour_menu.pack(side="left")
        ctk.CTkLabel(time_frame, text=":").pack(side="left", padx=2)
        self.minute_menu = ctk.CTkOptionMenu(time_frame, values=MINUTES, width=70)
        self.minute_menu.pack(side="left")

        ctk.CTkLabel(self, text="Priority").grid(row=0, column=2, sticky="w", padx=6, pady=(12, 0))
        self.priority_menu = ctk.CTkOptionMenu(self, values=Priority.labels())
        self.priority_menu.grid(row=1, column=2, sticky="w", padx=6, pady=(0, 12))

        ctk.CTkLabel(self, text="Description").grid(row=0, column=3, sticky="w", padx=6, pady=(12, 0))
        self.description_entry = ctk.CTkEntry(self, placeholder_text="What needs to be done?")
        self.description_entry.grid(row=1, column=3, sticky="ew", padx=6, pady=(0, 12))
        self.description_entry.bind("<Return>", lambda _e: self.on_add())

        ctk.CTkButton(self, text="Add", width=90, command=self.on_add).grid(
            row=1, column=4, sticky="e", padx=(6, 12), pady=(0, 12)
        )

    def clear(self):
        next_hour = datetime.now() + timedelta(hours=1)
        self.date_entry.set_date(next_hour.date())
        self.hour_menu.set(HOURS[next_hour.hour])
        self.minute_menu.set(MINUTES[0])
        self.priority_menu.set(Priority.VERY_IMPORTANT.label)
        self.description_entry.delete(0, tk.END)

    def load_task(self, task: Task):
        self.date_entry.set_date(task.deadline.date())
        self.hour_menu.set(f"{task.deadline.hour:02d}")
        self.minute_menu.set(f"{task.deadline.minute:02d}")
        self.priority_menu.set(task.priority.label)
        self.description_entry.delete(0, tk.END)
        self.description_entry.insert(0, task.description)

    def get_payload(self) -> tuple[datetime, Priority, str]:
        deadline = read_deadline(self.date_entry.get_date(), self.hour_menu.get(), self.minute_menu.get())
        priority, description = validate_task_input(
            deadline, self.priority_menu.get(), self.description_entry.get()
        )
        return deadline, priority, description


class TodoApp(ctk.CTk):
    """Main window for ToDo Reminder."""

    def __init__(self, settings: Settings):
        super().__init__()
        self.settings = settings
        self.store = TaskStore()
        self.save_location: Path = settings.data_dir
        self.has_unsaved_changes = False
        self.selected_index: int | None = None

        self.title(TODO_APP_TITLE)
        self.geometry("960x640")
        self.minsize(720, 480)

        self._build_header()
        self.form = TaskForm(self, on_add=self._add_task_from_form)
        self.form.pack(fill="x", padx=16, pady=8)
        self._build_list()

        self.protocol("WM_DELETE_WINDOW", self._exit)
        self._tick()
        self.refresh_list()

    # ----------------------- UI Builders -----------------------
    def _build_header(self):
        header = ctk.CTkFrame(self)
        header.pack(fill="x", padx=16, pady=(16, 8))
        ctk.CTkLabel(header, text="🟣 " + TODO_APP_TITLE, font=("Segoe UI", 20, "bold")).pack(side="left", padx=8)
        for text, command in (
            ("New", self._new_list),
            ("Open", self._open_file),
            ("Save", self._save_to_file),
            ("Exit", self._exit),
            ("About", self._show_about),
        ):
            ctk.CTkButton(header, text=text, width=64, command=command).pack(side="left", padx=4)
        self.clock_label = ctk.CTkLabel(header, text="", font=("Segoe UI", 16, "bold"))
        self.clock_label.pack(side="right", padx=8)

    def _build_list(self):
        bar = ctk.CTkFrame(self, fg_color="transparent")
        bar.pack(fill="x", padx=16)
        ctk.CTkLabel(bar, text="Tasks (earliest deadline first)").pack(side="left", padx=6)
        ctk.CTkButton(bar, text="Delete", width=80, command=self._delete_selected).pack(side="right", padx=6)
        ctk.CTkButton(bar, text="Edit", width=80, command=self._edit_selected).pack(side="right", padx=6)
        self.status_label = ctk.CTkLabel(bar, text="", text_color=MUTED_COLOR)
        self.status_label.pack(side="right", padx=12)

        self.task_list = ctk.CTkScrollableFrame(self)
        self.task_list.pack(fill="both", expand=True, padx=16, pady=(8, 16))

    # ----------------------- Helpers -----------------------
    def display_error(self, msg: str):
        messagebox.showerror("Error", msg, parent=self)

    def _tick(self):
        self.clock_label.configure(text=datetime.now().strftime("%H:%M:%S"))
        self.after(1000, self._tick)

    def _mark_changed(self):
        self.has_unsaved_changes = True
        self.selected_index = None
        self.refresh_list()

    def refresh_list(self):
        for w in self.task_list.winfo_children():
            w.destroy()
        for index, task in enumerate(self.store.tasks):
            row = TaskRow(
                self.task_list,
                index,
                task,
                on_select=self._on_row_selected,
                selected=index == self.selected_index,
            )
            row.pack(fill="x", padx=8, pady=4)
        if not len(self.store):
            ctk.CTkLabel(self.task_list, text="No tasks yet.").pack(pady=12)
        suffix = " • unsaved changes" if self.has_unsaved_changes else ""
        self.status_label.configure(text=f"{len(self.store)} task(s){suffix}")

    def _on_row_selected(self, row: TaskRow):
        self.selected_index = row.index
        for child in self.task_list.winfo_children():
            if isinstance(child, TaskRow):
                child.set_selected(child.index == row.index)

    # ----------------------- Task actions -----------------------
    def _add_task_from_form(self):
        try:
            deadline, priority, description = self.form.get_payload()
        except ValueError as exc:
            self.display_error(str(exc))
            return
        self.store.add_task(deadline, priority, description)
        self.form.clear()
        self._mark_changed()

    def _edit_selected(self):
        if self.selected_index is None:
            return
        result = self.store.get_task(self.selected_index)
        if not isinstance(result, Found):
            return
        self.form.load_task(result.value)
        self.store.remove_task(self.selected_index)
        self._mark_changed()

    def _delete_selected(self):
        if self.selected_index is None:
            return
        if not messagebox.askokcancel("Delete Task", "Do you want to delete the task?", parent=self):
            return
        self.store.remove_task(self.selected_index)
        self._mark_changed()

    # ----------------------- File actions -----------------------
    def _save_to_file(self) -> bool:
        path = filedialog.asksaveasfilename(
            parent=self,
            initialdir=str(self.save_location),
            initialfile=TODO_FILE_NAME,
            defaultextension=".txt",
            filetypes=FILE_TYPES,
        )
        if not path:
            return False
        self.save_location = Path(path).parent
        try:
            save_tasks(self.store, path)
        except OSError as exc:
            logger.exception("Saving tasks to %s failed", path)
            self.display_error(f"Error saving data: {exc}")
            return False
        messagebox.showinfo("Save", "Data saved successfully.", parent=self)
        self.has_unsaved_changes = False
        self.refresh_list()
        return True

    def _open_default_file(self) -> TaskStore:
        path = self.settings.todo_file
        try:
            return load_tasks(path)
        except FileLoadError:
            return create_default_task_file(path)

    def _open_file(self):
        if self.has_unsaved_changes and not self._prompt_save_first("Open File"):
            return
        path = filedialog.askopenfilename(
            parent=self,
            initialdir=str(self.save_location),
            filetypes=FILE_TYPES,
        )
        if not path:
            return
        try:
            loaded = load_tasks(path)
        except FileLoadError as exc:
            self.display_error(f"The file could not be read: {exc}")
            if not messagebox.askyesno(
                "File Not Readable",
                "Would you like to open the default task file instead?",
                parent=self,
            ):
                return
            try:
                loaded = self._open_default_file()
            except OSError as err:
                logger.exception("Default task file could not be created")
                self.display_error(f"The default file could not be created: {err}")
                return
        else:
            self.save_location = Path(path).parent
        self.store = loaded
        self.selected_index = None
        self.has_unsaved_changes = False
        self.refresh_list()

    def _prompt_save_first(self, caption: str) -> bool:
        """Ask to save before a destructive action. False means the user cancelled."""
        answer = messagebox.askyesnocancel(caption, "Do you want to save first?", parent=self)
        if answer is None:
            return False
        if answer:
            return self._save_to_file()
        return True

    def _new_list(self):
        if self.has_unsaved_changes and not self._prompt_save_first("Create New"):
            return
        self.store.clear()
        self.form.clear()
        self.selected_index = None
        self.has_unsaved_changes = False
        self.refresh_list()

    def _exit(self):
        if self.has_unsaved_changes and not self._prompt_save_first("Exit Program"):
            return
        if messagebox.askokcancel("Exit", "Do you really want to exit the program?", parent=self):
            self.destroy()

    def _show_about(self):
        messagebox.showinfo("About " + TODO_APP_TITLE, ABOUT_TEXT, parent=self)


# -------------------------------
# MAIN
# -------------------------------
def main() -> None:
    settings = Settings.from_env()
    ensure_dirs(settings)
    setup_logging(log_dir=settings.data_dir, console_level=level_from_name(settings.log_level))
    logger.info("Starting %s (data dir %s)", TODO_APP_TITLE, settings.data_dir)
    apply_theme(settings)
    app = TodoApp(settings)
    app.mainloop()


if __name__ == "__main__":
    main()
