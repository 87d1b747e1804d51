# remanejamento/infrastructure/repositories/_tempo.py
"""Conversao de timestamps na fronteira com o DuckDB (TIMESTAMP sem fuso, UTC)."""
from __future__ import annotations

from datetime import UTC, datetime


def para_banco(valor: datetime | None) -> datetime | None:
    if valor is None:
        return None
    if valor.tzinfo is None:
        return valor
    return valor.astimezone(UTC).replace(tzinfo=None)


def do_banco(valor: object) -> datetime | None:
    if not isinstance(valor, datetime):
        return None
    return valor.replace(tzinfo=UTC)
