# remanejamento/domain/equipe/repository.py
from __future__ import annotations

from typing import Protocol


class EquipeRepository(Protocol):
    def buscar_id_por_nome_contendo(self, termos: tuple[str, ...]) -> int | None: ...
    def buscar_id_por_nome(self, nome: str) -> int | None: ...
