import os
from pydantic_settings import BaseSettings


def _parse_cors_origins() -> list[str] | None:
    """Parse CORS_ORIGINS env var as comma-separated string or JSON list."""
    raw = os.environ.get("CORS_ORIGINS")
    if not raw:
        return None
    if raw.startswith("["):
        import json
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseSettings):
    max_upload_size_mb: int = 5
    max_text_length: int = 50000
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
        "http://localhost:1337",
    ]
    debug: bool = False
    log_level: str = "INFO"

    # Binary-to-text conversion is the only slow step; the API bounds it
    extraction_timeout_seconds: float = 30.0

    # Fallbacks used when building an open-position draft
    default_title: str = "Untitled Position"
    default_resume_weightage: int = 50
    default_problem_solutioning_weightage: int = 50

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
