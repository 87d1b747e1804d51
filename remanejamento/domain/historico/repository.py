# remanejamento/domain/historico/repository.py
from __future__ import annotations

from typing import Protocol

from .entities import RegistroHistorico


class HistoricoRepository(Protocol):
    """Sink write-only. Leitura e responsabilidade dos relatorios."""

    def registrar(self, registro: RegistroHistorico) -> None: ...
