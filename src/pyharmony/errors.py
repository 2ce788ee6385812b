class HarmonyError(Exception):
    """Base class for pyharmony errors."""


class StoreError(HarmonyError):
    """Base class for key-value store failures."""


class StoreLoadError(StoreError):
    """Raised when a backing store fails to parse its file."""


class StoreWriteError(StoreError):
    """Raised when a value cannot be written to the store."""


class UnknownCategoryError(HarmonyError, ValueError):
    """Raised when a font category is not one of display/body/mono."""


class InvalidSettingsError(HarmonyError, ValueError):
    """Raised when a user supplied settings value cannot be parsed."""
