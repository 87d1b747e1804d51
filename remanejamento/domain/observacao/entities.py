# remanejamento/domain/observacao/entities.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from remanejamento.domain.remanejamento.politicas import MOTIVO_DEVOLUCAO_TREINAMENTO


@dataclass(frozen=True)
class Observacao:
    """Anotacao livre. Append-only: nunca editada depois de gravada."""

    id: str
    remanejamento_funcionario_id: str
    texto: str
    criado_por: str
    data_criacao: datetime

    def __post_init__(self) -> None:
        if not self.texto.strip():
            raise ValueError("Observacao exige texto nao-vazio")

    @property
    def automatica_devolucao(self) -> bool:
        return self.texto.startswith(MOTIVO_DEVOLUCAO_TREINAMENTO)
