from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Forwarded header parsing
    strict_forwarded_keys: bool = False  # True = key must be exactly "for"

    # Middleware
    state_attribute: str = "real_ip"  # request.state.<name>

    @field_validator("state_attribute")
    @classmethod
    def validate_state_attribute(cls, v: str) -> str:
        """Ensure the attribute can be set on request.state."""
        if not v.isidentifier():
            raise ValueError(
                f"REALIP_STATE_ATTRIBUTE must be a valid identifier, got {v!r}"
            )
        if v.startswith("_"):
            raise ValueError(
                "REALIP_STATE_ATTRIBUTE must not start with an underscore "
                "(reserved by starlette's State object)."
            )
        return v

    model_config = {
        "env_prefix": "REALIP_",
        "env_file": ".env",  # Relative to the working directory; optional
        "extra": "ignore",  # Ignore extra env vars not defined in model
    }


@lru_cache
def get_settings() -> Settings:
    return Settings()


# Lazy proxy so that `from realip.config import settings` still works,
# but construction is deferred until first attribute access.
class _SettingsProxy:
    def __getattr__(self, name: str):
        return getattr(get_settings(), name)


settings = _SettingsProxy()
