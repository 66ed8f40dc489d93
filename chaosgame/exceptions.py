class ChaosGameError(Exception):
    """Base class for errors raised by the chaos game."""


class FileFormatError(ChaosGameError, ValueError):
    """A description file is structurally invalid."""


class DescriptionFileError(ChaosGameError, OSError):
    """A description file could not be accessed."""


class CouldNotReadError(DescriptionFileError):
    pass


class CouldNotWriteError(DescriptionFileError):
    pass


class ConstructionError(ChaosGameError, ValueError):
    """Invalid arguments passed directly to a constructor."""


class EmptyTransformSetError(ChaosGameError, ValueError):
    pass
