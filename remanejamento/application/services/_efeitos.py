# remanejamento/application/services/_efeitos.py
"""Efeitos secundarios best effort (historico, observacao automatica)."""
from __future__ import annotations

from collections.abc import Callable

import duckdb

from remanejamento.log import log


def tentar(acao: Callable[[], object], descricao: str, tentativas: int = 1) -> list[str]:
    """Executa `acao` com retentativas. Falha final vira aviso, nunca excecao.

    Returns:
        [] em caso de sucesso, [mensagem] quando todas as tentativas falharam.
    """
    ultimo_erro: duckdb.Error | None = None
    for tentativa in range(1, tentativas + 1):
        try:
            acao()
            return []
        except duckdb.Error as err:
            ultimo_erro = err
            log(f"falha ao gravar {descricao} (tentativa {tentativa}/{tentativas}): {err}", "WARNING")
    mensagem = f"{descricao} nao gravado(a): {ultimo_erro}"
    log(mensagem, "ERROR")
    return [mensagem]
