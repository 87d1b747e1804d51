# remanejamento/domain/historico/entities.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .value_objects import Entidade, TipoAcao


@dataclass(frozen=True)
class RegistroHistorico:
    """Escrito uma vez por evento. O engine nunca le o historico."""

    id: str
    tipo_acao: TipoAcao
    entidade: Entidade
    descricao_acao: str
    usuario_responsavel: str
    data_acao: datetime
    solicitacao_id: int | None = None
    remanejamento_funcionario_id: str | None = None
    tarefa_id: str | None = None
    campo_alterado: str | None = None
    valor_anterior: str | None = None
    valor_novo: str | None = None
