# remanejamento/infrastructure/repositories/duckdb_historico_repo.py
from __future__ import annotations

import duckdb

from remanejamento.domain.historico.entities import RegistroHistorico

from ._tempo import para_banco


class DuckDBHistoricoRepo:
    """Sink append-only. contar/listar existem para testes e relatorios."""

    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def registrar(self, registro: RegistroHistorico) -> None:
        self._conn.execute(
            """
            INSERT INTO historico_remanejamento
                (id, solicitacao_id, remanejamento_funcionario_id, tarefa_id,
                 tipo_acao, entidade, descricao_acao, campo_alterado,
                 valor_anterior, valor_novo, usuario_responsavel, data_acao)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            [
                registro.id,
                registro.solicitacao_id,
                registro.remanejamento_funcionario_id,
                registro.tarefa_id,
                registro.tipo_acao.value,
                registro.entidade.value,
                registro.descricao_acao,
                registro.campo_alterado,
                registro.valor_anterior,
                registro.valor_novo,
                registro.usuario_responsavel,
                para_banco(registro.data_acao),
            ],
        )

    def listar_por_remanejamento(self, remanejamento_id: str) -> list[dict[str, object]]:
        rows = self._conn.execute(
            """
            SELECT tipo_acao, entidade, descricao_acao, campo_alterado,
                   valor_anterior, valor_novo, usuario_responsavel, tarefa_id
            FROM historico_remanejamento
            WHERE remanejamento_funcionario_id = ?
            ORDER BY ordem
            """,
            [remanejamento_id],
        ).fetchall()
        return [
            {
                "tipo_acao": str(r[0]),
                "entidade": str(r[1]),
                "descricao_acao": str(r[2]),
                "campo_alterado": r[3],
                "valor_anterior": r[4],
                "valor_novo": r[5],
                "usuario_responsavel": str(r[6]),
                "tarefa_id": r[7],
            }
            for r in rows
        ]
