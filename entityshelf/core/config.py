"""Runtime configuration for entityshelf.

Defaults can be overridden through ``ENTITYSHELF_*`` environment variables,
e.g. ``ENTITYSHELF_SAFE_MODE=false``.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class EntityConfig(BaseSettings):
    """Process-wide defaults.

    Attributes:
        safe_mode: Run the relation safety check in ``represent`` and
            ``present`` unless a model or the call options say otherwise.
        auto_load: Load detected relations before presenting.
    """

    model_config = SettingsConfigDict(
        env_prefix="ENTITYSHELF_",
        frozen=True,
        extra="ignore",
    )

    safe_mode: bool = True
    auto_load: bool = True


_config = EntityConfig()


def get_config() -> EntityConfig:
    """Return the active configuration."""
    return _config


def configure(**overrides: bool) -> EntityConfig:
    """Install a new configuration with the given fields replaced.

    Raises:
        ValueError: If a key is not a configuration field.
    """
    global _config
    for key in overrides:
        if key not in EntityConfig.model_fields:
            raise ValueError(f"Unknown key: {key}")
    _config = EntityConfig(**{**_config.model_dump(), **overrides})
    return _config


def reset_config() -> EntityConfig:
    """Restore configuration from defaults and the environment."""
    global _config
    _config = EntityConfig()
    return _config
