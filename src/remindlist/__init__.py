"""remindlist: single-user reminder list with a store-synchronized task list."""

__version__ = "0.1.0"
