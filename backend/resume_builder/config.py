"""Application settings read from the environment (and ``.env`` via python-dotenv)."""
import os
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional

# Environment variables holding provider credentials and base URL overrides.
API_KEY_VARS = ("GROK_API_KEY", "GROQ_API_KEY", "OPENAI_API_KEY")
BASE_URL_VARS = ("GROK_BASE_URL", "GROQ_BASE_URL", "OPENAI_BASE_URL")


def _int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = (env.get(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


def _float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = (env.get(name) or "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}")


@dataclass(frozen=True)
class Settings:
    api_keys: Dict[str, Optional[str]] = field(default_factory=dict)
    base_urls: Dict[str, Optional[str]] = field(default_factory=dict)
    llm_model: Optional[str] = None
    llm_timeout: float = 60.0
    host: str = "0.0.0.0"
    port: int = 3000
    rate_limit_window_minutes: int = 15
    rate_limit_max: int = 100
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    max_body_bytes: int = 10 * 1024 * 1024
    upload_dir: str = "uploads"
    static_dir: str = "public"
    app_env: str = "production"
    log_level: str = "INFO"

    @property
    def debug(self) -> bool:
        return self.app_env == "development"

    @property
    def rate_limit(self) -> str:
        """Limit string understood by slowapi, e.g. ``100/15 minutes``."""
        return f"{self.rate_limit_max}/{self.rate_limit_window_minutes} minutes"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ

        origins = [o.strip() for o in (env.get("CORS_ORIGINS") or "").split(",") if o.strip()]
        model = (env.get("LLM_MODEL") or "").strip() or None

        return cls(
            api_keys={name: env.get(name) for name in API_KEY_VARS},
            base_urls={name: (env.get(name) or "").strip() or None for name in BASE_URL_VARS},
            llm_model=model,
            llm_timeout=_float(env, "LLM_TIMEOUT", 60.0),
            host=env.get("HOST") or "0.0.0.0",
            port=_int(env, "PORT", 3000),
            rate_limit_window_minutes=_int(env, "RATE_LIMIT_WINDOW_MINUTES", 15),
            rate_limit_max=_int(env, "RATE_LIMIT_MAX", 100),
            cors_origins=origins or ["*"],
            max_body_bytes=_int(env, "MAX_BODY_BYTES", 10 * 1024 * 1024),
            upload_dir=env.get("UPLOAD_DIR") or "uploads",
            static_dir=env.get("STATIC_DIR") or "public",
            app_env=(env.get("APP_ENV") or env.get("NODE_ENV") or "production").lower(),
            log_level=(env.get("LOG_LEVEL") or "INFO").upper(),
        )

    def key_lengths(self) -> Dict[str, int]:
        """Credential lengths for startup diagnostics; never the values."""
        return {name: len(self.api_keys.get(name) or "") for name in API_KEY_VARS}
