# ==============================================
# Error Taxonomy
# ==============================================
#
# - VaultError                 → base class for everything the vault raises
#   - ValidationError          → malformed input (empty name/value, bad sort option)
#   - StorageError             → persistence backend failure
#     - StorageUnavailable     → backend cannot be reached / read
#     - StorageWriteRejected   → backend refused the whole-collection write
#   - BackupError              → snapshot could not be written (logged, never fatal)
#   - ConfigurationError       → unknown storage backend name
#
# "Record not found" is NOT an error: update() and delete()
# return None for a missing id.
#
# ==============================================


class VaultError(Exception):
    """Base class for all record vault errors."""


class ValidationError(VaultError, ValueError):
    """Raised when input fails validation before touching storage."""


class StorageError(VaultError):
    """Raised when the persistence backend fails."""


class StorageUnavailable(StorageError):
    """The backend could not be reached or its contents could not be read."""


class StorageWriteRejected(StorageError):
    """The backend rejected a whole-collection write. Nothing was committed."""


class BackupError(VaultError):
    """A backup snapshot could not be written."""


class ConfigurationError(VaultError):
    """Raised for invalid configuration values."""
