# remanejamento/domain/tarefa/entities.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from remanejamento.domain.setor.services import resolver_setor
from remanejamento.domain.setor.value_objects import SetorCodigo

from .value_objects import STATUS_CONCLUIDOS, Prioridade, StatusTarefa


@dataclass(frozen=True)
class NovaTarefa:
    """Entrada de criacao. Campos opcionais sao preenchidos pela TarefaService."""

    remanejamento_funcionario_id: str
    tipo: str
    responsavel: str
    descricao: str | None = None
    prioridade: str | None = None
    data_limite: datetime | None = None
    data_vencimento: datetime | None = None


@dataclass(frozen=True)
class Tarefa:
    id: str
    remanejamento_funcionario_id: str
    tipo: str
    responsavel: str
    status: StatusTarefa
    prioridade: Prioridade
    data_criacao: datetime
    descricao: str | None = None
    setor_id: int | None = None
    data_limite: datetime | None = None
    data_vencimento: datetime | None = None
    data_conclusao: datetime | None = None

    @property
    def setor(self) -> SetorCodigo | str:
        return resolver_setor(self.responsavel)

    @property
    def cancelada(self) -> bool:
        return self.status == StatusTarefa.CANCELADO

    @property
    def concluida(self) -> bool:
        return self.status in STATUS_CONCLUIDOS
