# remanejamento/application/dtos/tarefa_dto.py
from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel

from remanejamento.domain.resultado import Resultado
from remanejamento.domain.tarefa.entities import Tarefa


def _iso(valor: datetime | None) -> str | None:
    return valor.isoformat() if valor else None


class NovaTarefaRequest(BaseModel):
    tipo: str = ""
    responsavel: str = ""
    descricao: str | None = None
    prioridade: str | None = None
    data_limite: datetime | None = None
    data_vencimento: datetime | None = None


class AtualizarStatusRequest(BaseModel):
    """Ao menos um campo. Datas vao ao meio-dia UTC."""

    status: str | None = None
    data_limite: date | None = None
    data_vencimento: date | None = None


class ConcluirTarefaRequest(BaseModel):
    data_vencimento: date | None = None


class TarefaDTO(BaseModel):
    id: str
    remanejamento_funcionario_id: str
    tipo: str
    descricao: str | None
    responsavel: str
    setor: str
    setor_id: int | None
    status: str
    prioridade: str
    data_criacao: str
    data_limite: str | None  # datas ISO 8601 em UTC
    data_vencimento: str | None
    data_conclusao: str | None

    @classmethod
    def from_domain(cls, tarefa: Tarefa) -> TarefaDTO:
        return cls(
            id=tarefa.id,
            remanejamento_funcionario_id=tarefa.remanejamento_funcionario_id,
            tipo=tarefa.tipo,
            descricao=tarefa.descricao,
            responsavel=tarefa.responsavel,
            setor=str(tarefa.setor),
            setor_id=tarefa.setor_id,
            status=tarefa.status.value,
            prioridade=tarefa.prioridade.value,
            data_criacao=tarefa.data_criacao.isoformat(),
            data_limite=_iso(tarefa.data_limite),
            data_vencimento=_iso(tarefa.data_vencimento),
            data_conclusao=_iso(tarefa.data_conclusao),
        )


class TarefaResultadoDTO(BaseModel):
    tarefa: TarefaDTO
    avisos: list[str]

    @classmethod
    def from_domain(cls, resultado: Resultado[Tarefa]) -> TarefaResultadoDTO:
        return cls(tarefa=TarefaDTO.from_domain(resultado.valor), avisos=list(resultado.avisos))
