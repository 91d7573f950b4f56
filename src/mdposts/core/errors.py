"""Per-document parse failures"""


class DocumentError(ValueError):
    """A single content file could not be turned into a Document."""


class MalformedDocument(DocumentError):
    """Missing or unbalanced delimiters, bad YAML, or missing required keys."""


class InvalidDate(DocumentError):
    """The date value is not a YYYY-MM-DD calendar date."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid date {value!r}: expected a YYYY-MM-DD calendar date")
