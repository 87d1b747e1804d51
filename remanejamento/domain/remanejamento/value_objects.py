# remanejamento/domain/remanejamento/value_objects.py
from enum import StrEnum


class StatusTarefas(StrEnum):
    """Status agregado das tarefas de um funcionario. Sempre derivado."""

    SUBMETER_RASCUNHO = "SUBMETER RASCUNHO"
    ATENDER_TAREFAS = "ATENDER TAREFAS"


# Prestserv em avaliacao ou concluido bloqueia novas tarefas.
PRESTSERV_EM_AVALIACAO = "EM_AVALIACAO"
PRESTSERV_CONCLUIDO = "CONCLUIDO"
PRESTSERV_APROVADO = "APROVADO"
PRESTSERV_BLOQUEIA_TAREFAS = frozenset({PRESTSERV_EM_AVALIACAO, PRESTSERV_CONCLUIDO})

SOLICITACAO_CONCLUIDA = "CONCLUIDO"
