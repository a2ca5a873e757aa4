"""Exceptions raised by the slugging services."""


class SluggableConfigError(ValueError):
    """Raised when a slug option cannot be used as configured."""

    def __init__(self, message: str, record_type: type, attribute: str, option: str):
        self.record_type = record_type
        self.attribute = attribute
        self.option = option
        super().__init__(message)


class SlugNotFoundError(LookupError):
    """Raised when no record matches a slug."""

    def __init__(self, record_type: type, slug: str):
        self.record_type = record_type
        self.slug = slug
        super().__init__(f"No {record_type.__name__} found for slug {slug!r}")
