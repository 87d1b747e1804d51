# remanejamento/domain/remanejamento/entities.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from .value_objects import PRESTSERV_BLOQUEIA_TAREFAS, StatusTarefas


@dataclass(frozen=True)
class Funcionario:
    id: int
    nome: str
    matricula: str
    data_admissao: date | None = None


@dataclass(frozen=True)
class RemanejamentoFuncionario:
    """Participacao de um funcionario em uma solicitacao.

    status_tarefas e derivado das tarefas e so muda via StatusEngine.recalcular.
    Prestserv em avaliacao ou concluido nao aceita novas tarefas.
    """

    id: str
    solicitacao_id: int
    funcionario: Funcionario
    responsavel_atual: str
    status_tarefas: StatusTarefas | None
    status_prestserv: str
    prioridade_solicitacao: str | None = None

    @property
    def aceita_novas_tarefas(self) -> bool:
        return self.status_prestserv not in PRESTSERV_BLOQUEIA_TAREFAS
