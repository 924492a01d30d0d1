"""Exceções compartilhadas entre as camadas do projeto."""
from __future__ import annotations


class FetchError(RuntimeError):
    """Falha ao obter uma página: status HTTP não-2xx, erro de rede ou timeout."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Failed to fetch {url}: {reason}")
        self.url = url
        self.reason = reason


class StoreError(RuntimeError):
    """O armazenamento rejeitou uma leitura ou escrita."""


class StoreUnavailableError(StoreError):
    """Nenhum armazenamento configurado no momento do disparo."""


__all__ = ["FetchError", "StoreError", "StoreUnavailableError"]
