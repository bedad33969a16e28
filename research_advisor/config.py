"""
Research Advisor Configuration

Settings are looked up in Streamlit secrets first (Streamlit Cloud),
then in environment variables (local runs, loaded from .env by app.py),
then fall back to a default.
"""

import os


def get_setting(name: str, default: str | None = None) -> str | None:
    """
    Resolve a setting by name.

    Args:
        name: Secret / environment variable name
        default: Value used when neither source defines it
    """
    value = None

    # 1. Streamlit secrets
    try:
        import streamlit as st
        value = st.secrets.get(name)
    except Exception:
        pass  # Not running in Streamlit context or no secrets file

    # 2. Environment
    if not value:
        value = os.getenv(name)

    return value or default


class ModelConfig:
    """Model and sampling settings per request kind."""
    MODEL = "gemini-2.5-pro"

    ANALYSIS_TEMPERATURE = 0.3
    INSPIRATION_TEMPERATURE = 0.7
    FEEDBACK_TEMPERATURE = 0.2  # Focused, critical feedback


class RateLimitConfig:
    """
    Client-side request limits.

    Gemini 2.5 Pro free tier: 5 RPM, 100 daily.
    """
    RPM = 5
    DAILY = 100


class DocumentLimits:
    MIN_TEXT_LENGTH = 50
    MAX_PROMPT_CHARS = 30_000


class HistoryLimits:
    MAX_ITEMS = 50


DEFAULT_DATABASE_URL = "sqlite:///research_advisor.db"


def get_database_url() -> str:
    return get_setting("DATABASE_URL", DEFAULT_DATABASE_URL)
