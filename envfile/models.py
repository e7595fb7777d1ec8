"""Models for batch secret-file bindings."""

from pydantic import BaseModel, field_validator


class SecretFileBinding(BaseModel):
    """Env var holding a secret file path, and the property that receives its content.

    A blank ``env_name`` is accepted here; resolving it raises
    :class:`~envfile.errors.VariableNotSetError` like any unset variable.
    """

    env_name: str
    property_name: str

    @field_validator("property_name")
    @classmethod
    def validate_property_name(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must be a non-blank name")
        return value
