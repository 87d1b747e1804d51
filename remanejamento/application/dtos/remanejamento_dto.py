# remanejamento/application/dtos/remanejamento_dto.py
from __future__ import annotations

from pydantic import BaseModel

from remanejamento.application.services.status_engine import ResultadoRecalculo
from remanejamento.domain.observacao.entities import Observacao


class RecalculoDTO(BaseModel):
    remanejamento_id: str
    status_anterior: str | None
    status_novo: str | None
    devolvido: bool
    solicitacao_concluida: bool
    avisos: list[str]

    @classmethod
    def from_domain(cls, resultado: ResultadoRecalculo) -> RecalculoDTO:
        return cls(
            remanejamento_id=resultado.remanejamento_id,
            status_anterior=resultado.status_anterior.value if resultado.status_anterior else None,
            status_novo=resultado.status_novo.value if resultado.status_novo else None,
            devolvido=resultado.devolvido,
            solicitacao_concluida=resultado.solicitacao_concluida,
            avisos=list(resultado.avisos),
        )


class NovaObservacaoRequest(BaseModel):
    texto: str = ""


class ObservacaoDTO(BaseModel):
    id: str
    texto: str
    criado_por: str
    data_criacao: str

    @classmethod
    def from_domain(cls, observacao: Observacao) -> ObservacaoDTO:
        return cls(
            id=observacao.id,
            texto=observacao.texto,
            criado_por=observacao.criado_por,
            data_criacao=observacao.data_criacao.isoformat(),
        )
