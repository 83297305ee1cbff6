"""
Exceptions raised by the hospital records CLI.
"""


class HospitalRecordsError(Exception):
    """Base class for errors raised by this package."""
    pass


class RecordMappingError(HospitalRecordsError):
    """A result row could not be mapped onto its record."""

    def __init__(self, entity: str, detail: str):
        self.entity = entity
        super().__init__(f"Malformed {entity} row: {detail}")


class CommandNotFoundError(HospitalRecordsError):
    """No command is registered for the given selector."""

    def __init__(self, selector):
        self.selector = selector
        super().__init__(f"Command not found: {selector}")
