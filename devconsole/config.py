"""
Configuration constants.

Centralizes the layout widths, default strings and buffer sizes used by the
console. Hosts that need different values per console pass overrides to
``Console`` instead of editing this module.
"""

# =============================================================================
# OUTPUT
# =============================================================================

# Number of most recent output lines exposed to the presentation layer.
OUTPUT_DISPLAY_LINES = 120

# Embedded newlines are replaced with this so each entry renders as one line.
NEWLINE_SEPARATOR = " | "

# =============================================================================
# COMMANDS
# =============================================================================

DEFAULT_HELP_TEXT = "(no description)"

# Column widths for the built-in ``help`` and ``list`` commands.
HELP_NAME_WIDTH = 25
HELP_EXAMPLE_WIDTH = 35
LIST_NAME_WIDTH = 50

# Shown by the call stack commands before any stack was retained.
NO_CALL_STACK_YET = "(none yet)"

# =============================================================================
# AUTOCOMPLETE
# =============================================================================

# Value literals offered once the name portion of the line is complete.
# Order matters: the first literal whose prefix matches wins.
TAIL_COMPLETION_LITERALS = ("true", "false", "True", "False", "TRUE", "FALSE")

# =============================================================================
# LOGGING
# =============================================================================

LOG_PREFIXES = {
    "assert": "[Assert]:             ",
    "error": "[Error]:              ",
    "exception": "[Exception]:          ",
    "warning": "[Warning]:            ",
    "log": "[Log]:                ",
}

# =============================================================================
# FRAME RATE
# =============================================================================

# Number of frame time samples used for the ``show.fps`` readout.
FPS_SAMPLE_SIZE = 256
