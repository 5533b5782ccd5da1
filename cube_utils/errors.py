class CubeUtilsError(Exception):
    """Base class for all errors raised while generating code from the CubeMX database."""


class LoadError(CubeUtilsError):
    """An external database record could not be obtained."""

    def __init__(self, message: str, path: str = None):
        super().__init__(message)
        self.path = path


class RecordNotFoundError(LoadError):
    """The requested MCU, family file or GPIO descriptor is absent from the database."""


class RecordParseError(LoadError):
    """A database record exists but is malformed."""


class FamilyNotFoundError(CubeUtilsError, LookupError):
    """The requested MCU family has no entry in families.xml."""

    def __init__(self, family: str):
        super().__init__(f"Could not find family {family}")
        self.family = family


class FeatureNameError(CubeUtilsError, ValueError):
    """A derived identifier does not match the single supported naming pattern."""


class ConfigError(CubeUtilsError):
    """A family policy override file is unusable."""
