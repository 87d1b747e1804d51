# remanejamento/domain/tarefa/repository.py
from __future__ import annotations

from datetime import datetime
from typing import Protocol

from .entities import Tarefa
from .value_objects import StatusTarefa


class TarefaRepository(Protocol):
    def inserir(self, tarefa: Tarefa) -> Tarefa: ...
    def buscar_por_id(self, tarefa_id: str) -> Tarefa | None: ...
    def listar_ativas(
        self, remanejamento_id: str, status: StatusTarefa | None = None,
    ) -> list[Tarefa]: ...
    def atualizar_status(
        self,
        tarefa_id: str,
        status: StatusTarefa,
        data_conclusao: datetime | None,
        data_vencimento: datetime | None = None,
        data_limite: datetime | None = None,
    ) -> Tarefa: ...
