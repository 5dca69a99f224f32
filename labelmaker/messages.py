"""User-visible status messages."""

EMPTY_ERROR = "Please enter some text to print"
PRINT_SUCCESS = "Label sent to printer"
PRINT_ERROR = "Could not print label"
HISTORY_CLEARED = "History cleared"
