"""Exceptions raised at the data-file and markup boundaries."""


class ImplementorDataError(ValueError):
    """A generated implementor data file could not be parsed."""


class MarkupParseError(ValueError):
    """An implementor markup string has no ``Trait for Type`` shape."""
