"""Configurações compartilhadas carregadas a partir de variáveis de ambiente."""
from __future__ import annotations

import os
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()

_DEFAULT_BASE_URL = "https://denuo.be"
_DEFAULT_FETCH_TIMEOUT = 30.0
_DEFAULT_SCRAPE_INTERVAL_HOURS = 6.0
_DEFAULT_API_BIND_HOST = "0.0.0.0"
_DEFAULT_API_PORT = 8000
_DEFAULT_LOG_LEVEL = "INFO"


@lru_cache(maxsize=None)
def get_base_url() -> str:
    """Retorna a origem do site coletado, sem barra ao final."""

    return os.getenv("DENUO_BASE_URL", _DEFAULT_BASE_URL).rstrip("/")


@lru_cache(maxsize=None)
def get_fetch_timeout() -> float:
    """Retorna o tempo máximo, em segundos, de cada requisição de página."""

    return float(os.getenv("DENUO_FETCH_TIMEOUT", _DEFAULT_FETCH_TIMEOUT))


@lru_cache(maxsize=None)
def get_scrape_interval_hours() -> float:
    """Retorna o intervalo do agendador; ``0`` desativa as coletas periódicas."""

    return float(
        os.getenv("DENUO_SCRAPE_INTERVAL_HOURS", _DEFAULT_SCRAPE_INTERVAL_HOURS)
    )


@lru_cache(maxsize=None)
def get_api_port() -> int:
    """Retorna a porta configurada para expor a API de coleta."""

    return int(os.getenv("DENUO_API_PORT", os.getenv("PORT", _DEFAULT_API_PORT)))


@lru_cache(maxsize=None)
def get_api_bind_host() -> str:
    """Retorna o host utilizado pelo Uvicorn para escutar conexões."""

    return os.getenv("DENUO_API_BIND_HOST", _DEFAULT_API_BIND_HOST)


@lru_cache(maxsize=None)
def get_log_level() -> str:
    return os.getenv("DENUO_LOG_LEVEL", _DEFAULT_LOG_LEVEL).upper()


__all__ = [
    "get_api_bind_host",
    "get_api_port",
    "get_base_url",
    "get_fetch_timeout",
    "get_log_level",
    "get_scrape_interval_hours",
]
