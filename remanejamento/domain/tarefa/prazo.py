# remanejamento/domain/tarefa/prazo.py
#
# Politica de prazo padrao (data_limite) de uma tarefa nova.
#
# Regra: admissao estritamente no futuro -> admissao + 48h; caso contrario
# (sem admissao, admissao passada ou igual a agora) -> agora + 48h.
#
# Invariant: prazo_padrao nunca levanta. Data de admissao ilegivel e logada e
# tratada como ausente.
from __future__ import annotations

from datetime import UTC, date, datetime, timedelta

from remanejamento.log import log

PRAZO_PADRAO_HORAS = 48


def prazo_padrao(
    agora: datetime,
    data_admissao: datetime | date | str | None,
    horas: int = PRAZO_PADRAO_HORAS,
) -> datetime:
    """Puro: recebe `agora` como parametro, nunca chama datetime.now()."""
    agora = _como_utc(agora)
    janela = timedelta(hours=horas)
    try:
        admissao = _parse_admissao(data_admissao)
    except (TypeError, ValueError) as err:
        log(f"data de admissao invalida ({data_admissao!r}): {err}; usando agora + {horas}h", "WARNING")
        admissao = None

    if admissao is not None and admissao > agora:
        return admissao + janela
    return agora + janela


def _parse_admissao(valor: datetime | date | str | None) -> datetime | None:
    if valor is None:
        return None
    if isinstance(valor, datetime):
        return _como_utc(valor)
    if isinstance(valor, date):
        return datetime(valor.year, valor.month, valor.day, tzinfo=UTC)
    if isinstance(valor, str):
        texto = valor.strip()
        if not texto:
            return None
        return _como_utc(datetime.fromisoformat(texto.replace("Z", "+00:00")))
    raise TypeError(f"tipo nao suportado: {type(valor).__name__}")


def _como_utc(valor: datetime) -> datetime:
    """Datetime ingenuo e interpretado como UTC."""
    if valor.tzinfo is None:
        return valor.replace(tzinfo=UTC)
    return valor.astimezone(UTC)
