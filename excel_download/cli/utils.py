"""
Excel Download - CLI Utility Functions

Terminal color codes and header formatting shared by the command-line
front end.
"""

# ANSI color and formatting codes
ORANGE = "\033[38;2;228;94;39m"  # Custom RGB orange (#e45e27) - primary theme color
WHITE = "\033[37m"
BOLD = "\033[1m"
RESET = "\033[0m"


def print_header(text):
    """
    Print a formatted header with the orange theme.

    Args:
        text (str): The header text to display

    Example:
        >>> print_header("Exporting to Excel")

        Exporting to Excel
        ------------------
    """
    print(f"\n{ORANGE}{BOLD}{text}{RESET}")
    print(f"{ORANGE}{'-' * len(text)}{RESET}")
