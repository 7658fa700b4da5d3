"""Exceptions raised by the catalog services."""


class CatalogConsistencyError(RuntimeError):
    """
    Stored data doesn't match what validation already confirmed.

    Signals a data-integrity defect, never a user input problem, so it is
    raised instead of being reported in a result.
    """

    def __init__(self, message: str):
        super().__init__(message)
