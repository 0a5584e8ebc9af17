"""
LLM provider selection.

Three OpenAI-compatible backends are supported. The first one with a
non-blank API key wins, in the fixed order below. The result is memoized
per ``ProviderSelector`` so credential resolution happens once per process.
"""
import logging
import threading
from dataclasses import dataclass
from typing import Optional, Tuple

from .config import Settings, API_KEY_VARS
from .errors import MissingCredentials

logger = logging.getLogger(__name__)

PRIMARY_FALLBACK_MODEL = "grok-2-latest"
GENERIC_FALLBACK_MODEL = "gpt-4"

# Used by the HTTP client when a provider has no base URL of its own.
DEFAULT_OPENAI_BASE_URL = "https://api.openai.com/v1"


@dataclass(frozen=True)
class ProviderSpec:
    name: str
    rank: str
    key_var: str
    base_url_var: str
    default_base_url: Optional[str]


PROVIDERS: Tuple[ProviderSpec, ...] = (
    ProviderSpec("grok", "primary", "GROK_API_KEY", "GROK_BASE_URL", "https://api.x.ai/v1"),
    ProviderSpec("groq", "secondary", "GROQ_API_KEY", "GROQ_BASE_URL", "https://api.groq.com/openai/v1"),
    # OpenAI keeps the client's built-in endpoint unless overridden
    ProviderSpec("openai", "tertiary", "OPENAI_API_KEY", "OPENAI_BASE_URL", None),
)


@dataclass(frozen=True)
class ProviderSelection:
    provider: ProviderSpec
    api_key: str
    base_url: Optional[str]
    model: str
    reason: str
    model_reason: str

    @property
    def endpoint(self) -> str:
        return (self.base_url or DEFAULT_OPENAI_BASE_URL).rstrip("/")


def missing_credentials_message() -> str:
    names = list(API_KEY_VARS)
    return f"Missing API key. Set {', '.join(names[:-1])} or {names[-1]} in .env"


def select_provider(settings: Settings) -> ProviderSelection:
    """Pick the first provider with a usable key. Raises MissingCredentials."""
    for spec in PROVIDERS:
        key = settings.api_keys.get(spec.key_var)
        if not key or not key.strip():
            continue

        base_url = settings.base_urls.get(spec.base_url_var) or spec.default_base_url

        if settings.llm_model:
            model, model_reason = settings.llm_model, "LLM_MODEL override"
        elif spec is PROVIDERS[0]:
            model, model_reason = PRIMARY_FALLBACK_MODEL, f"{spec.name} default"
        else:
            model, model_reason = GENERIC_FALLBACK_MODEL, "generic default"

        return ProviderSelection(
            provider=spec,
            api_key=key.strip(),
            base_url=base_url,
            model=model,
            reason=f"{spec.key_var} is set ({spec.rank})",
            model_reason=model_reason,
        )

    raise MissingCredentials(missing_credentials_message())


def describe_active_provider(settings: Settings) -> str:
    """Provider name for diagnostics, ``NONE`` when nothing is configured."""
    try:
        return select_provider(settings).provider.name.upper()
    except MissingCredentials:
        return "NONE"


class ProviderSelector:
    """Computes the provider selection once and serves the cached value after."""

    def __init__(self, settings: Settings):
        self._settings = settings
        self._selection: Optional[ProviderSelection] = None
        self._lock = threading.Lock()

    def get(self) -> ProviderSelection:
        selection = self._selection
        if selection is not None:
            return selection
        with self._lock:
            if self._selection is None:
                self._selection = select_provider(self._settings)
                logger.info(
                    "Selected LLM provider %s (%s), model %s (%s)",
                    self._selection.provider.name,
                    self._selection.reason,
                    self._selection.model,
                    self._selection.model_reason,
                )
            return self._selection
