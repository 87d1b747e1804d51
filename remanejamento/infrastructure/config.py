# remanejamento/infrastructure/config.py
from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


def _bool(nome: str, padrao: str) -> bool:
    return os.environ.get(nome, padrao).strip().lower() == "true"


@dataclass(frozen=True)
class Settings:
    duckdb_path: str
    prazo_horas: int
    auditar_sem_mudanca: bool
    dedup_observacao_devolucao: bool
    dias_minimos_vencimento: int
    tentativas_efeitos: int
    debug: bool


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings(
        duckdb_path=os.environ.get("DUCKDB_PATH", ":memory:"),
        prazo_horas=int(os.environ.get("REMANEJAMENTO_PRAZO_HORAS", "48")),
        auditar_sem_mudanca=_bool("REMANEJAMENTO_AUDITAR_SEM_MUDANCA", "true"),
        dedup_observacao_devolucao=_bool("REMANEJAMENTO_DEDUP_OBSERVACAO_DEVOLUCAO", "true"),
        dias_minimos_vencimento=int(os.environ.get("REMANEJAMENTO_DIAS_MINIMOS_VENCIMENTO", "30")),
        tentativas_efeitos=max(1, int(os.environ.get("REMANEJAMENTO_TENTATIVAS_EFEITOS", "2"))),
        debug=_bool("API_DEBUG", "false"),
    )
