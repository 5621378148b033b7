"""TimeKeeper Exception Hierarchy.

All custom exceptions inherit from TimeKeeperError.

Form and date checks report problems as data (a list of messages or a
single message). These exceptions are for callers that want to raise.

Exception Hierarchy:
    TimeKeeperError (base)
    ├── ConfigurationError
    ├── ValidationError
    └── WorkbookError
"""

from typing import Iterable


class TimeKeeperError(Exception):
    """Base exception for all TimeKeeper errors.

    All custom exceptions in TimeKeeper inherit from this class,
    allowing for broad exception handling when needed.
    """

    pass


class ConfigurationError(TimeKeeperError):
    """Configuration is invalid or missing.

    Raised when:
        - Environment variable holds a malformed date or number
        - Log level label is unknown
    """

    pass


class ValidationError(TimeKeeperError):
    """User input failed validation.

    Carries the ordered list of human-readable messages so the caller
    can show every problem at once.

    Raised when:
        - A form snapshot is submitted with missing fields
        - A birth date is out of range
    """

    def __init__(self, errors: Iterable[str]):
        self.errors: list[str] = list(errors)
        super().__init__("; ".join(self.errors))


class WorkbookError(TimeKeeperError):
    """Workbook could not be read.

    Raised when:
        - Source file does not exist
        - Workbook format is not readable (xls, xlsb)
        - openpyxl fails to parse the file
    """

    pass
