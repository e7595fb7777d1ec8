"""Load secrets from files named by environment variables."""

from envfile.errors import ConfigurationError, FileEmptyError, VariableNotSetError
from envfile.properties import PropertyStore, properties
from envfile.reader import EnvFileReader, read, read_and_set

__all__ = [
    "ConfigurationError",
    "EnvFileReader",
    "FileEmptyError",
    "PropertyStore",
    "VariableNotSetError",
    "properties",
    "read",
    "read_and_set",
]
