"""Errors raised by the modular i18n toolkit."""


class MalformedInputError(ValueError):
    """Source translations are absent or not shaped as locale -> key -> value."""
