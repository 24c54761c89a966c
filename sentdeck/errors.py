"""
Exception types raised by sentdeck.
"""


class SentDeckError(Exception):
    """Base class for every error sentdeck raises on purpose."""


class InvalidColourValue(SentDeckError, ValueError):
    """A colour option value is not a 6-digit hex code."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"invalid colour value: \"{value}\"")


class InvalidBooleanValue(SentDeckError, ValueError):
    """A boolean option value is neither ``true`` nor ``false``."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"invalid boolean value: \"{value}\"")


class PresentationLoadError(SentDeckError):
    """The presentation source could not be read."""

    def __init__(self, path, message: str = "unable to read the file"):
        self.path = str(path)
        super().__init__(f"{message} \"{self.path}\"")


class ImageLoadError(SentDeckError):
    """An image referenced by a slide could not be opened."""

    def __init__(self, path):
        self.path = str(path)
        super().__init__(f"unable to load \"{self.path}\"")
