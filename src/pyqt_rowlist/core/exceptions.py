"""Row list exceptions."""


class RowListError(Exception):
    """Base class for errors raised by pyqt-rowlist."""


class RowPayloadError(RowListError):
    """Raised when a drag payload is malformed or does not describe a row."""
