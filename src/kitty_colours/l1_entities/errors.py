"""Domain error types."""


class KittyColoursError(Exception):
    """Base class for errors reported to the user as ``error: <message>``."""


class ThemeNotFoundError(KittyColoursError):
    """Raised when the theme name does not resolve to a regular file."""


class SessionNotFoundError(KittyColoursError):
    """Raised when the session name does not resolve to a regular file."""


class IncompletePaletteError(KittyColoursError):
    """Raised when a loaded palette does not hold every colour slot."""


class PaletteParseError(KittyColoursError):
    """Raised when a palette line matched the entry pattern but cannot be split."""
