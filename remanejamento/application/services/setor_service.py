# remanejamento/application/services/setor_service.py
from __future__ import annotations

import duckdb

from remanejamento.domain.equipe.repository import EquipeRepository
from remanejamento.domain.setor.services import padroes_equipe
from remanejamento.log import log


def encontrar_equipe_por_setor(setor: str | None, equipe_repo: EquipeRepository) -> int | None:
    """Equipe dona do setor, ou None. Nunca fatal: quem chama deixa setor_id vazio."""
    termos, por_substring = padroes_equipe(setor)
    if not termos:
        return None
    try:
        if por_substring:
            equipe_id = equipe_repo.buscar_id_por_nome_contendo(termos)
        else:
            equipe_id = equipe_repo.buscar_id_por_nome(termos[0])
    except duckdb.Error as err:
        log(f"falha ao buscar equipe do setor {setor!r}: {err}", "WARNING")
        return None
    if equipe_id is None:
        log(f"nenhuma equipe encontrada para o setor {setor!r}")
    return equipe_id
