"""Runtime configuration for anilist-mcp, read from the environment (and .env)."""

from dotenv import load_dotenv
load_dotenv()

import os
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field, HttpUrl, ValidationError


class Settings(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # AniList GraphQL endpoint (public, no key)
    endpoint: HttpUrl = Field(default="https://graphql.anilist.co", alias="ANILIST_GQL_URL")

    # HTTP
    timeout_s: float = Field(default=15.0, gt=0, alias="ANILIST_TIMEOUT_S")
    user_agent: str = "anilist-mcp/1.0"

    # drop recommendations the user already has on their list
    dedupe_recommendations: bool = Field(default=True, alias="ANILIST_DEDUPE_RECOMMENDATIONS")

    log_level: str = Field(default="INFO", alias="ANILIST_LOG_LEVEL")


_ENV_KEYS = (
    "ANILIST_GQL_URL",
    "ANILIST_TIMEOUT_S",
    "ANILIST_DEDUPE_RECOMMENDATIONS",
    "ANILIST_LOG_LEVEL",
)


def load_settings() -> Settings:
    env = {k: os.getenv(k) for k in _ENV_KEYS if os.getenv(k) is not None}
    try:
        return Settings.model_validate(env)
    except ValidationError as e:
        raise RuntimeError(
            "Config error: check ANILIST_GQL_URL, ANILIST_TIMEOUT_S, "
            "ANILIST_DEDUPE_RECOMMENDATIONS and ANILIST_LOG_LEVEL."
        ) from e


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Process-wide settings, loaded once."""
    return load_settings()
