# remanejamento/domain/observacao/repository.py
from __future__ import annotations

from typing import Protocol

from .entities import Observacao


class ObservacaoRepository(Protocol):
    def inserir(self, observacao: Observacao) -> Observacao: ...
    def listar_por_remanejamento(self, remanejamento_id: str) -> list[Observacao]: ...
    def ultima(self, remanejamento_id: str) -> Observacao | None: ...
