"""Secret-file resolution: env var -> file path -> file content.

The env var holds a *path* (``ENCRYPT_KEY_FILE=/run/secrets/encrypt_key``),
never the secret itself. Only names, paths and lengths are logged; file
contents are **never** logged.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Optional, Protocol

from envfile import config
from envfile.env_utils import EnvLookup, get_env, is_blank
from envfile.errors import FileEmptyError, VariableNotSetError
from envfile.models import SecretFileBinding
from envfile.properties import properties as default_properties

logger = logging.getLogger("envfile.reader")


class PropertySink(Protocol):
    def set(self, name: str, value: str) -> None: ...


def _read_lines(path: str) -> list[str]:
    # Universal newlines: \n, \r\n and \r all end a line.
    with open(path, "r", encoding=config.FILE_ENCODING) as handle:
        return [line.rstrip("\n") for line in handle]


class EnvFileReader:
    def __init__(
        self,
        env: Optional[EnvLookup] = None,
        properties: Optional[PropertySink] = None,
    ) -> None:
        self._env = env or get_env
        self._properties = properties if properties is not None else default_properties

    def read(self, env_name: str, required: bool = True) -> str:
        """Return the content of the file named by *env_name*.

        Lines are joined with ``config.LINE_SEPARATOR``; leading and embedded
        blank lines are kept. With ``required=False`` an unset variable or a
        blank file yields ``""`` instead of raising.

        Raises :class:`VariableNotSetError` or :class:`FileEmptyError`.
        ``OSError`` from opening or reading the file propagates as-is.
        """
        path = self._env(env_name)

        if is_blank(path):
            if required:
                logger.warning("Secret file env var %r is not set", env_name)
                raise VariableNotSetError(env_name)
            logger.debug("Optional secret file env var %r is not set", env_name)
            return ""

        content = config.LINE_SEPARATOR.join(_read_lines(path))
        if not is_blank(content):
            logger.debug("Read %d chars from %s (env %r)", len(content), path, env_name)
            return content

        if required:
            logger.warning("Secret file %s (env %r) has no non-blank line", path, env_name)
            raise FileEmptyError(path)
        logger.debug("Optional secret file %s (env %r) is blank", path, env_name)
        return ""

    def read_and_set(self, env_names_to_properties: Mapping[str, str]) -> None:
        """Read every env var as required and publish each result as a property.

        Stops at the first failure; properties already set stay set.
        """
        for env_name, property_name in env_names_to_properties.items():
            binding = SecretFileBinding(env_name=env_name, property_name=property_name)
            value = self.read(binding.env_name, required=True)
            self._properties.set(binding.property_name, value)
            logger.info("Loaded property %r from env %r", binding.property_name, binding.env_name)


def read(env_name: str, required: bool = True) -> str:
    return EnvFileReader().read(env_name, required)


def read_and_set(env_names_to_properties: Mapping[str, str]) -> None:
    EnvFileReader().read_and_set(env_names_to_properties)
