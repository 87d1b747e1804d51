# remanejamento/infrastructure/repositories/duckdb_equipe_repo.py
from __future__ import annotations

import duckdb


class DuckDBEquipeRepo:
    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def buscar_id_por_nome_contendo(self, termos: tuple[str, ...]) -> int | None:
        """Primeira equipe (menor id) cujo nome contem algum termo. Ignora caixa e acento."""
        if not termos:
            return None
        condicoes = " OR ".join("upper(strip_accents(nome)) LIKE ?" for _ in termos)
        params = [f"%{t.upper()}%" for t in termos]
        row = self._conn.execute(
            f"SELECT id FROM equipe WHERE {condicoes} ORDER BY id LIMIT 1",  # noqa: S608
            params,
        ).fetchone()
        return int(row[0]) if row else None

    def buscar_id_por_nome(self, nome: str) -> int | None:
        row = self._conn.execute(
            "SELECT id FROM equipe WHERE upper(strip_accents(nome)) = ? ORDER BY id LIMIT 1",
            [nome.upper()],
        ).fetchone()
        return int(row[0]) if row else None
