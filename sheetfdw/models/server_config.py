"""Server-scoped connector configuration."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, SecretStr, ValidationError, field_validator

from sheetfdw.core.exceptions import ConfigError
from sheetfdw.core.options import Options


class ServerConfig(BaseModel):
    """Options declared on the foreign server."""

    model_config = ConfigDict(extra="ignore")

    source: str = Field(
        default="gsheets", description="Source profile name (e.g., 'gsheets', 'json_api')"
    )
    base_url: Optional[str] = Field(
        default=None, description="Base URL, defaults to the source profile's host"
    )
    access_token: Optional[SecretStr] = Field(
        default=None, description="Bearer token sent by profiles that authenticate"
    )

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.strip().rstrip("/")
        return value or None

    @classmethod
    def from_options(cls, options: Options) -> "ServerConfig":
        """Build from server options.

        Raises:
            ConfigError: If the options fail validation
        """
        values = {key: value for key, value in options.to_dict().items() if value != ""}
        try:
            return cls.model_validate(values)
        except ValidationError as e:
            raise ConfigError(
                f"Invalid server options: {e}",
                context={"scope": options.options_type.value},
            ) from e
