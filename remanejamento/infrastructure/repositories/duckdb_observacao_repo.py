# remanejamento/infrastructure/repositories/duckdb_observacao_repo.py
from __future__ import annotations

import duckdb

from remanejamento.domain.observacao.entities import Observacao

from ._tempo import do_banco, para_banco


class DuckDBObservacaoRepo:
    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def inserir(self, observacao: Observacao) -> Observacao:
        self._conn.execute(
            """
            INSERT INTO observacao_remanejamento_funcionario
                (id, remanejamento_funcionario_id, texto, criado_por, data_criacao)
            VALUES (?, ?, ?, ?, ?)
            """,
            [
                observacao.id,
                observacao.remanejamento_funcionario_id,
                observacao.texto,
                observacao.criado_por,
                para_banco(observacao.data_criacao),
            ],
        )
        return observacao

    def listar_por_remanejamento(self, remanejamento_id: str) -> list[Observacao]:
        """Mais recente primeiro."""
        rows = self._conn.execute(
            """
            SELECT id, remanejamento_funcionario_id, texto, criado_por, data_criacao
            FROM observacao_remanejamento_funcionario
            WHERE remanejamento_funcionario_id = ?
            ORDER BY ordem DESC
            """,
            [remanejamento_id],
        ).fetchall()
        return [self._hidratar(r) for r in rows]

    def ultima(self, remanejamento_id: str) -> Observacao | None:
        row = self._conn.execute(
            """
            SELECT id, remanejamento_funcionario_id, texto, criado_por, data_criacao
            FROM observacao_remanejamento_funcionario
            WHERE remanejamento_funcionario_id = ?
            ORDER BY ordem DESC
            LIMIT 1
            """,
            [remanejamento_id],
        ).fetchone()
        return self._hidratar(row) if row else None

    def _hidratar(self, row: tuple) -> Observacao:  # type: ignore[type-arg]
        data_criacao = do_banco(row[4])
        if data_criacao is None:
            raise ValueError(f"Observacao {row[0]} sem data_criacao")
        return Observacao(
            id=str(row[0]),
            remanejamento_funcionario_id=str(row[1]),
            texto=str(row[2]),
            criado_por=str(row[3]),
            data_criacao=data_criacao,
        )
