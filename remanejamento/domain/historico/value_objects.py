# remanejamento/domain/historico/value_objects.py
from enum import StrEnum


class TipoAcao(StrEnum):
    CRIACAO = "CRIACAO"
    ATUALIZACAO_STATUS = "ATUALIZACAO_STATUS"
    DEVOLUCAO = "DEVOLUCAO"


class Entidade(StrEnum):
    TAREFA = "TAREFA"
    STATUS_TAREFAS = "STATUS_TAREFAS"
    RESPONSAVEL_ATUAL = "RESPONSAVEL_ATUAL"
    SOLICITACAO = "SOLICITACAO"


USUARIO_SISTEMA = "Sistema"
