# remanejamento/infrastructure/repositories/duckdb_remanejamento_repo.py
from __future__ import annotations

from datetime import date, datetime

import duckdb

from remanejamento.domain.remanejamento.entities import Funcionario, RemanejamentoFuncionario
from remanejamento.domain.remanejamento.value_objects import SOLICITACAO_CONCLUIDA, StatusTarefas

from ._tempo import para_banco

_SELECT = """
    SELECT rf.id, rf.solicitacao_id, rf.responsavel_atual, rf.status_tarefas,
           rf.status_prestserv, sr.prioridade,
           f.id, f.nome, f.matricula, f.data_admissao
    FROM remanejamento_funcionario rf
    JOIN funcionario f ON rf.funcionario_id = f.id
    LEFT JOIN solicitacao_remanejamento sr ON rf.solicitacao_id = sr.id
"""


class DuckDBRemanejamentoRepo:
    """Implementa RemanejamentoRepository e StatusTarefasWriter."""

    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def buscar_por_id(self, remanejamento_id: str) -> RemanejamentoFuncionario | None:
        row = self._conn.execute(_SELECT + " WHERE rf.id = ?", [remanejamento_id]).fetchone()
        return self._hidratar(row) if row else None

    def listar_por_solicitacao(self, solicitacao_id: int) -> list[RemanejamentoFuncionario]:
        rows = self._conn.execute(
            _SELECT + " WHERE rf.solicitacao_id = ? ORDER BY rf.id", [solicitacao_id],
        ).fetchall()
        return [self._hidratar(r) for r in rows]

    def gravar_status_tarefas(self, remanejamento_id: str, status: StatusTarefas) -> None:
        self._conn.execute(
            "UPDATE remanejamento_funcionario SET status_tarefas = ? WHERE id = ?",
            [status.value, remanejamento_id],
        )

    def _hidratar(self, row: tuple) -> RemanejamentoFuncionario:  # type: ignore[type-arg]
        return RemanejamentoFuncionario(
            id=str(row[0]),
            solicitacao_id=int(row[1]),
            responsavel_atual=str(row[2]),
            status_tarefas=StatusTarefas(row[3]) if row[3] else None,
            status_prestserv=str(row[4]),
            prioridade_solicitacao=str(row[5]) if row[5] else None,
            funcionario=Funcionario(
                id=int(row[6]),
                nome=str(row[7]),
                matricula=str(row[8]),
                data_admissao=row[9] if isinstance(row[9], date) else None,
            ),
        )


class DuckDBSolicitacaoRepo:
    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def marcar_concluida(self, solicitacao_id: int, data_conclusao: datetime) -> None:
        self._conn.execute(
            "UPDATE solicitacao_remanejamento SET status = ?, data_conclusao = ? WHERE id = ?",
            [SOLICITACAO_CONCLUIDA, para_banco(data_conclusao), solicitacao_id],
        )
