# remanejamento/domain/remanejamento/repository.py
from __future__ import annotations

from datetime import datetime
from typing import Protocol

from .entities import RemanejamentoFuncionario
from .value_objects import StatusTarefas


class RemanejamentoRepository(Protocol):
    """Leitura. Nao expoe escrita de status_tarefas (ver StatusTarefasWriter)."""

    def buscar_por_id(self, remanejamento_id: str) -> RemanejamentoFuncionario | None: ...
    def listar_por_solicitacao(self, solicitacao_id: int) -> list[RemanejamentoFuncionario]: ...


class StatusTarefasWriter(Protocol):
    """Unico caminho de escrita do campo derivado. Usado so pelo StatusEngine."""

    def gravar_status_tarefas(self, remanejamento_id: str, status: StatusTarefas) -> None: ...


class SolicitacaoRepository(Protocol):
    def marcar_concluida(self, solicitacao_id: int, data_conclusao: datetime) -> None: ...
