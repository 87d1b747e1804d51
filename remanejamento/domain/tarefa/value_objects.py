# remanejamento/domain/tarefa/value_objects.py
from __future__ import annotations

from enum import StrEnum

from remanejamento.domain.setor.services import normalizar_texto


class StatusTarefa(StrEnum):
    PENDENTE = "PENDENTE"
    AGUARDANDO_APROVACAO = "AGUARDANDO_APROVACAO"
    CONCLUIDO = "CONCLUIDO"
    CONCLUIDA = "CONCLUIDA"  # sinonimo legado de CONCLUIDO
    REPROVADO = "REPROVADO"
    CANCELADO = "CANCELADO"


class Prioridade(StrEnum):
    BAIXA = "BAIXA"
    MEDIA = "MEDIA"
    ALTA = "ALTA"
    URGENTE = "URGENTE"


STATUS_CONCLUIDOS = frozenset({StatusTarefa.CONCLUIDO, StatusTarefa.CONCLUIDA})
# Cancelada conta como resolvida para o agregado, mesmo fora das listagens.
STATUS_RESOLVIDOS = STATUS_CONCLUIDOS | {StatusTarefa.CANCELADO}

_PRIORIDADES: dict[str, Prioridade] = {
    "BAIXA": Prioridade.BAIXA,
    "MEDIA": Prioridade.MEDIA,
    "NORMAL": Prioridade.MEDIA,
    "ALTA": Prioridade.ALTA,
    "URGENTE": Prioridade.URGENTE,
}


def normalizar_prioridade(texto: str | None) -> Prioridade:
    """Case/acento-insensitivo. Qualquer valor desconhecido vira MEDIA."""
    return _PRIORIDADES.get(normalizar_texto(texto), Prioridade.MEDIA)


def parse_status(texto: str) -> StatusTarefa:
    """Levanta ValueError para status desconhecido."""
    return StatusTarefa(texto.strip().upper())
