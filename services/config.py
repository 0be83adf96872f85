import os
from typing import Optional
from pydantic import BaseModel

GROQ_BASE_URL = "https://api.groq.com/openai/v1"
GROQ_CHAT_MODEL = "llama3-8b-8192"

# Only the first MAX_EXERCISES extracted names are looked up
MAX_EXERCISES = 12
# Upper bound on exercises being resolved at the same time
MAX_CONCURRENT_LOOKUPS = 4
HTTP_TIMEOUT_S = 30.0

VIDEO_SEARCH_BACKENDS = {"serper", "youtube"}


class Settings(BaseModel):
    groq_api_key: Optional[str] = None
    serper_api_key: Optional[str] = None
    youtube_api_key: Optional[str] = None
    groq_base_url: str = GROQ_BASE_URL
    groq_model: str = GROQ_CHAT_MODEL
    video_search_backend: str = "serper"
    max_exercises: int = MAX_EXERCISES
    max_concurrent_lookups: int = MAX_CONCURRENT_LOOKUPS
    http_timeout: float = HTTP_TIMEOUT_S

    def require(self, field: str) -> str:
        """Return a credential or fail the way the client getters always have."""
        value = getattr(self, field)
        if not value:
            raise ValueError(f"{field.upper()} environment variable not set")
        return value


# field name -> (environment variable, type)
_ENV_KEYS = {
    "groq_api_key": ("GROQ_API_KEY", str),
    "serper_api_key": ("SERPER_API_KEY", str),
    "youtube_api_key": ("YOUTUBE_API_KEY", str),
    "groq_base_url": ("GROQ_BASE_URL", str),
    "groq_model": ("GROQ_MODEL", str),
    "video_search_backend": ("VIDEO_SEARCH_BACKEND", str),
    "max_exercises": ("MAX_EXERCISES", int),
    "max_concurrent_lookups": ("MAX_CONCURRENT_LOOKUPS", int),
    "http_timeout": ("HTTP_TIMEOUT", float),
}


def load_settings(**overrides) -> Settings:
    """
    Build Settings from explicit overrides, then environment variables,
    then the defaults above. None overrides are treated as absent.
    """
    values = {}
    for field, (env_name, cast) in _ENV_KEYS.items():
        if overrides.get(field) is not None:
            values[field] = overrides[field]
            continue
        raw = os.getenv(env_name)
        if raw is None or raw.strip() == "":
            continue
        try:
            values[field] = cast(raw.strip())
        except ValueError:
            raise ValueError(f"Invalid value for {env_name}: {raw!r}")
    unknown = set(overrides) - set(_ENV_KEYS)
    if unknown:
        raise TypeError(f"Unknown settings: {', '.join(sorted(unknown))}")

    settings = Settings(**values)
    backend = settings.video_search_backend.strip().lower()
    if backend not in VIDEO_SEARCH_BACKENDS:
        raise ValueError(f"Unknown VIDEO_SEARCH_BACKEND '{settings.video_search_backend}'")
    if settings.max_exercises < 1 or settings.max_concurrent_lookups < 1:
        raise ValueError("MAX_EXERCISES and MAX_CONCURRENT_LOOKUPS must be at least 1")
    return settings.model_copy(update={"video_search_backend": backend})
