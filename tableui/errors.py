# tableui/errors.py
from __future__ import annotations


class TableError(Exception): pass

class InvalidRenderer(TableError):
    def __init__(self, value: object = None):
        super().__init__("callable_not_provided")
        self.value = value

class ColumnConfigError(TableError):
    """
    Raised at construction time when a column cannot be configured:
    unknown argument shape, missing field, unknown option, bad direction.
    """
    def __init__(self, reason: str, details: dict | None = None):
        super().__init__(f"column_config: {reason}")
        self.reason = reason
        self.details = details or {}

class TableValidationError(TableError):
    def __init__(self, reason: str, errors: list | None = None):
        super().__init__(f"table_validation: {reason}")
        self.reason = reason
        self.errors = errors or []

class SettingsError(TableError):
    def __init__(self, path: str, reason: str):
        super().__init__(f"settings_error: {path}: {reason}")
        self.path = path
        self.reason = reason
