"""ListKeeper: ToDo Reminder and Grocery List Manager desktop apps."""

__version__ = "1.0.0"
