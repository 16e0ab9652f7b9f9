"""
Centralized settings for the pricing gateway.

Values come from the process environment (optionally seeded from a `.env`
file) and are read once at startup into an immutable `Settings` instance that
is handed to the client and engines.
"""
import os
from pathlib import Path
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv


DEFAULT_DECISION_RULES_HOST = "https://api.decisionrules.io"


def get_project_root() -> Path:
    """Get the project root directory (where public/ lives)."""
    current = Path(__file__).resolve()
    for parent in current.parents:
        if (parent / 'public' / 'index.html').exists() or (parent / 'pyproject.toml').exists():
            return parent
    # Fallback to 4 levels up from this file
    return Path(__file__).resolve().parent.parent.parent.parent


def _env_flag(value: Optional[str]) -> bool:
    return str(value or "").strip().lower() == "true"


def _env_float(value: Optional[str], default: float) -> float:
    try:
        return float(value) if value else default
    except ValueError:
        return default


def _env_int(value: Optional[str], default: int) -> int:
    try:
        return int(value) if value else default
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    """Gateway settings with sensible defaults."""

    # DecisionRules credentials and endpoint
    solver_key: str = ""
    decision_rules_host: str = DEFAULT_DECISION_RULES_HOST

    # Remote rule / flow identifiers
    markup_rule_id: str = ""
    discount_rule_id: str = ""
    manufacturability_rule_id: str = ""
    pricing_flow_id: str = ""

    # Diagnostics
    log_responses: bool = False
    log_level: str = "INFO"

    # Static page served at GET /
    index_html: Optional[Path] = None

    # Transport
    request_timeout: float = 30.0
    port: int = 3000

    @classmethod
    def load(cls, env: Optional[Mapping[str, str]] = None, project_root: Optional[Path] = None) -> 'Settings':
        """
        Load settings from the environment.

        When `env` is omitted, `.env` is loaded into the process environment
        first and `os.environ` is used.
        """
        if env is None:
            load_dotenv()
            env = os.environ

        root = project_root or get_project_root()
        html_path = env.get("HTML_FILE_PATH")
        index_html = Path(html_path) if html_path else root / 'public' / 'index.html'
        if not index_html.is_absolute():
            index_html = root / index_html

        return cls(
            solver_key=env.get("SOLVER_KEY") or "",
            decision_rules_host=env.get("DECISION_RULES_HOST") or DEFAULT_DECISION_RULES_HOST,
            markup_rule_id=env.get("MARKUP_RULE_ID") or "",
            discount_rule_id=env.get("DISCOUNT_RULE_ID") or "",
            manufacturability_rule_id=env.get("MANUFACTUR_RULE_ID") or "",
            pricing_flow_id=env.get("PRICING_FLOW_ID") or "",
            log_responses=_env_flag(env.get("LOG_RESPONSE")),
            log_level=(env.get("LOG_LEVEL") or "INFO").upper(),
            index_html=index_html,
            request_timeout=_env_float(env.get("REQUEST_TIMEOUT"), 30.0),
            port=_env_int(env.get("PORT"), 3000),
        )


# Default settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the process-wide settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings
