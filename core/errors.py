"""Exception hierarchy shared by the store, config and session layers."""


class TaskShelfError(Exception):
    """Base class for taskshelf failures."""


class StoreError(TaskShelfError):
    """A collaborator (state file, completion log) could not be read or written."""


class ConfigError(TaskShelfError):
    """Invalid configuration value (e.g. an unparsable hotkey)."""


__all__ = ["TaskShelfError", "StoreError", "ConfigError"]
