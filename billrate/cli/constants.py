"""Process exit codes used by the CLI."""

SUCCESS_EXIT_CODE = 0
SYSTEM_EXIT_CODE = 1
PARSE_EXIT_CODE = 10
CALCULATION_EXIT_CODE = 11
IO_EXIT_CODE = 12

__all__ = [
    "SUCCESS_EXIT_CODE",
    "SYSTEM_EXIT_CODE",
    "PARSE_EXIT_CODE",
    "CALCULATION_EXIT_CODE",
    "IO_EXIT_CODE",
]
