# remanejamento/application/services/observacao_service.py
from __future__ import annotations

import uuid
from collections.abc import Callable
from datetime import UTC, datetime

from remanejamento.domain.erros import NaoEncontradoError, ValidacaoError
from remanejamento.domain.historico.value_objects import USUARIO_SISTEMA
from remanejamento.domain.observacao.entities import Observacao
from remanejamento.domain.observacao.repository import ObservacaoRepository
from remanejamento.domain.remanejamento.repository import RemanejamentoRepository


def _agora() -> datetime:
    return datetime.now(UTC)


class ObservacaoService:
    """Observacoes manuais. As automaticas sao escritas pelo StatusEngine."""

    def __init__(
        self,
        remanejamento_repo: RemanejamentoRepository,
        observacao_repo: ObservacaoRepository,
        relogio: Callable[[], datetime] = _agora,
    ) -> None:
        self._remanejamento_repo = remanejamento_repo
        self._observacao_repo = observacao_repo
        self._relogio = relogio

    def adicionar(self, remanejamento_id: str, texto: str, autor: str | None = None) -> Observacao:
        if not (texto or "").strip():
            raise ValidacaoError("texto", "Texto da observacao e obrigatorio")
        if self._remanejamento_repo.buscar_por_id(remanejamento_id) is None:
            raise NaoEncontradoError("RemanejamentoFuncionario", remanejamento_id)

        return self._observacao_repo.inserir(Observacao(
            id=str(uuid.uuid4()),
            remanejamento_funcionario_id=remanejamento_id,
            texto=texto.strip(),
            criado_por=autor or USUARIO_SISTEMA,
            data_criacao=self._relogio(),
        ))

    def listar(self, remanejamento_id: str) -> list[Observacao]:
        return self._observacao_repo.listar_por_remanejamento(remanejamento_id)
