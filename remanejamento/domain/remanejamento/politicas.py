# remanejamento/domain/remanejamento/politicas.py
#
# Functional core do status agregado. Zero IO.
#
# Design decisions:
#   - calcular_status_base aplica a regra de agregacao pura: tudo resolvido
#     (CONCLUIDO, CONCLUIDA ou CANCELADO) -> SUBMETER RASCUNHO.
#   - Overrides sao politicas nomeadas com a mesma assinatura, aplicadas em
#     ordem por aplicar_politicas. Uma nova regra de roteamento entra em
#     POLITICAS sem mexer no agregado.
#   - A politica recebe o snapshot (responsavel atual + tarefas ativas) e
#     devolve None quando nao se aplica.
#
# Invariant (apos aplicar_politicas):
#   status == SUBMETER RASCUNHO  <=>  todas resolvidas
#                                     AND NOT (dono == LOGISTICA AND sem treinamento ativo)
from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from remanejamento.domain.setor.services import normalizar_texto, resolver_setor
from remanejamento.domain.setor.value_objects import SetorCodigo
from remanejamento.domain.tarefa.entities import Tarefa
from remanejamento.domain.tarefa.value_objects import STATUS_RESOLVIDOS

from .value_objects import StatusTarefas

MOTIVO_DEVOLUCAO_TREINAMENTO = (
    "Devolvido para TREINAMENTO automaticamente: Nenhuma tarefa de treinamento "
    "ativa (Matriz inexistente ou vazia). Necessário criar matriz."
)


@dataclass(frozen=True)
class Override:
    """Decisao de uma politica: status forcado + devolucao para um setor."""

    nome: str
    status: StatusTarefas
    devolver_para: SetorCodigo
    motivo: str


Politica = Callable[[str, Sequence[Tarefa]], Override | None]


@dataclass(frozen=True)
class DecisaoStatus:
    status: StatusTarefas
    status_base: StatusTarefas
    override: Override | None = None

    @property
    def devolvido(self) -> bool:
        return self.override is not None


def todas_resolvidas(tarefas: Sequence[Tarefa]) -> bool:
    """Vacuamente verdadeiro para lista vazia."""
    return all(t.status in STATUS_RESOLVIDOS for t in tarefas)


def tem_treinamento_ativo(tarefas: Sequence[Tarefa]) -> bool:
    return any(not t.cancelada and resolver_setor(t.responsavel) == SetorCodigo.TREINAMENTO for t in tarefas)


def calcular_status_base(tarefas: Sequence[Tarefa]) -> StatusTarefas:
    if todas_resolvidas(tarefas):
        return StatusTarefas.SUBMETER_RASCUNHO
    return StatusTarefas.ATENDER_TAREFAS


def politica_devolucao_treinamento(responsavel_atual: str, tarefas: Sequence[Tarefa]) -> Override | None:
    """Logistica sem treinamento ativo volta para TREINAMENTO criar a matriz."""
    if normalizar_texto(responsavel_atual) != SetorCodigo.LOGISTICA:
        return None
    if tem_treinamento_ativo(tarefas):
        return None
    return Override(
        nome="devolucao_treinamento",
        status=StatusTarefas.ATENDER_TAREFAS,
        devolver_para=SetorCodigo.TREINAMENTO,
        motivo=MOTIVO_DEVOLUCAO_TREINAMENTO,
    )


POLITICAS: tuple[Politica, ...] = (politica_devolucao_treinamento,)


def aplicar_politicas(
    responsavel_atual: str,
    tarefas: Sequence[Tarefa],
    politicas: Sequence[Politica] = POLITICAS,
) -> DecisaoStatus:
    """Funcao pura. Primeira politica que se aplica vence."""
    base = calcular_status_base(tarefas)
    for politica in politicas:
        override = politica(responsavel_atual, tarefas)
        if override is not None:
            return DecisaoStatus(status=override.status, status_base=base, override=override)
    return DecisaoStatus(status=base, status_base=base)
