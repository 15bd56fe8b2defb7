class VersyncError(Exception):
    """Base class for errors raised while synchronizing versions."""


class InvalidVersionError(VersyncError, ValueError):
    """The requested version is missing or not of the form MAJOR.MINOR.PATCH."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid version {value!r}: expected MAJOR.MINOR.PATCH, e.g. 0.2.0")


class VersionFieldNotFoundError(VersyncError):
    """A text manifest has no assignment line for the version field."""

    def __init__(self, path, field: str):
        self.path = path
        self.field = field
        super().__init__(f'No line of the form {field} = "..." found in {path}')


class ManifestFormatError(VersyncError):
    """A manifest parsed, but its structure cannot hold a version field."""


class ConfigurationError(VersyncError):
    """The versync configuration file is missing required fields or has invalid values."""
