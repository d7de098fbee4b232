import os
from pydantic_settings import BaseSettings

from models.schemas.alignment import AlignmentWeights


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
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash"
    gemini_temperature: float = 0.3
    gemini_max_output_tokens: int = 4096
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:3002",
        "http://localhost:5173",
    ]
    debug: bool = False
    log_level: str = "INFO"

    # SQLAlchemy URL for users and assessments
    database_url: str = "sqlite:///./aitlas.db"

    # Applied to every endpoint that calls Gemini
    rate_limit: str = "10/minute"

    # Alignment scoring
    semantic_match_method: str = "tokens"  # "tokens" | "tfidf"
    alignment_weights: AlignmentWeights = AlignmentWeights()

    # rapidfuzz ratio (0-100) above which a generated functional skill
    # is treated as a duplicate of an existing one
    skill_dedupe_threshold: int = 85

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
