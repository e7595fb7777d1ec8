"""Configuration read from environment variables."""

import os

# Text encoding used for secret files.
FILE_ENCODING: str = os.getenv("ENVFILE_ENCODING", "utf-8")

# Separator placed between the lines of a secret file.
LINE_SEPARATOR: str = os.linesep

LOG_LEVEL: str = os.getenv("ENVFILE_LOG_LEVEL", "WARNING").upper()
