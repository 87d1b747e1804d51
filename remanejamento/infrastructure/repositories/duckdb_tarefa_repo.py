# remanejamento/infrastructure/repositories/duckdb_tarefa_repo.py
from __future__ import annotations

from datetime import datetime

import duckdb

from remanejamento.domain.tarefa.entities import Tarefa
from remanejamento.domain.tarefa.value_objects import STATUS_CONCLUIDOS, Prioridade, StatusTarefa

from ._tempo import do_banco, para_banco

_COLUNAS = """
    id, remanejamento_funcionario_id, tipo, descricao, responsavel, setor_id,
    status, prioridade, data_criacao, data_limite, data_vencimento, data_conclusao
"""


class DuckDBTarefaRepo:
    def __init__(self, conn: duckdb.DuckDBPyConnection) -> None:
        self._conn = conn

    def inserir(self, tarefa: Tarefa) -> Tarefa:
        self._conn.execute(
            f"INSERT INTO tarefa_remanejamento ({_COLUNAS}) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)",  # noqa: S608
            [
                tarefa.id,
                tarefa.remanejamento_funcionario_id,
                tarefa.tipo,
                tarefa.descricao,
                tarefa.responsavel,
                tarefa.setor_id,
                tarefa.status.value,
                tarefa.prioridade.value,
                para_banco(tarefa.data_criacao),
                para_banco(tarefa.data_limite),
                para_banco(tarefa.data_vencimento),
                para_banco(tarefa.data_conclusao),
            ],
        )
        return tarefa

    def buscar_por_id(self, tarefa_id: str) -> Tarefa | None:
        row = self._conn.execute(
            f"SELECT {_COLUNAS} FROM tarefa_remanejamento WHERE id = ?",  # noqa: S608
            [tarefa_id],
        ).fetchone()
        return self._hidratar(row) if row else None

    def listar_ativas(
        self, remanejamento_id: str, status: StatusTarefa | None = None,
    ) -> list[Tarefa]:
        """CANCELADO sempre fora. O filtro de status so estreita o resultado."""
        conditions = ["remanejamento_funcionario_id = ?", "status <> ?"]
        params: list[object] = [remanejamento_id, StatusTarefa.CANCELADO.value]
        if status in STATUS_CONCLUIDOS:
            # CONCLUIDO e CONCLUIDA sao sinonimos
            conditions.append("status IN (?, ?)")
            params.extend(sorted(s.value for s in STATUS_CONCLUIDOS))
        elif status is not None:
            conditions.append("status = ?")
            params.append(status.value)

        rows = self._conn.execute(
            f"""
            SELECT {_COLUNAS} FROM tarefa_remanejamento
            WHERE {" AND ".join(conditions)}
            ORDER BY data_criacao DESC, ordem DESC
            """,  # noqa: S608
            params,
        ).fetchall()
        return [self._hidratar(r) for r in rows]

    def atualizar_status(
        self,
        tarefa_id: str,
        status: StatusTarefa,
        data_conclusao: datetime | None,
        data_vencimento: datetime | None = None,
        data_limite: datetime | None = None,
    ) -> Tarefa:
        """data_vencimento e data_limite None preservam o valor gravado."""
        self._conn.execute(
            """
            UPDATE tarefa_remanejamento
            SET status = ?, data_conclusao = ?,
                data_vencimento = COALESCE(?, data_vencimento),
                data_limite = COALESCE(?, data_limite)
            WHERE id = ?
            """,
            [
                status.value,
                para_banco(data_conclusao),
                para_banco(data_vencimento),
                para_banco(data_limite),
                tarefa_id,
            ],
        )
        tarefa = self.buscar_por_id(tarefa_id)
        if tarefa is None:
            raise LookupError(f"Tarefa {tarefa_id} sumiu durante a atualizacao")
        return tarefa

    def _hidratar(self, row: tuple) -> Tarefa:  # type: ignore[type-arg]
        data_criacao = do_banco(row[8])
        if data_criacao is None:
            raise ValueError(f"Tarefa {row[0]} sem data_criacao")
        return Tarefa(
            id=str(row[0]),
            remanejamento_funcionario_id=str(row[1]),
            tipo=str(row[2]),
            descricao=str(row[3]) if row[3] is not None else None,
            responsavel=str(row[4]),
            setor_id=int(row[5]) if row[5] is not None else None,
            status=StatusTarefa(row[6]),
            prioridade=Prioridade(row[7]),
            data_criacao=data_criacao,
            data_limite=do_banco(row[9]),
            data_vencimento=do_banco(row[10]),
            data_conclusao=do_banco(row[11]),
        )
