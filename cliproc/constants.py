"""
Package-wide constants, resource limits and exit codes.
"""

# Resource limits for command registration
MAX_COMMAND_COUNT = 1000  # Maximum number of commands under one processor
MAX_COMMAND_NAME_LENGTH = 255  # Maximum length for command keywords
MAX_ALIAS_COUNT = 100  # Maximum number of aliases per command

# Keywords and aliases must be valid argparse subcommand names
COMMAND_NAME_PATTERN = r"^[a-z][a-z0-9_-]*$"

# Namespace attribute carrying the selected command (never user-declared)
COMMAND_DEST = "_cliproc_command"

# Exit codes
EXIT_OK = 0
EXIT_FAILURE = 1  # Command raised an exception
EXIT_USAGE = 2  # argparse usage error

# Environment variable prefix for ProcessorConfig overrides
ENV_PREFIX = "CLIPROC_"
