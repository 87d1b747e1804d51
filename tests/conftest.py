# tests/conftest.py
from __future__ import annotations

from collections.abc import Callable, Generator
from dataclasses import dataclass
from datetime import UTC, datetime

import duckdb
import pytest

from remanejamento.application.services.observacao_service import ObservacaoService
from remanejamento.application.services.status_engine import StatusEngine
from remanejamento.application.services.tarefa_service import TarefaService
from remanejamento.infrastructure.duckdb_connection import aplicar_schema
from remanejamento.infrastructure.repositories.duckdb_equipe_repo import DuckDBEquipeRepo
from remanejamento.infrastructure.repositories.duckdb_historico_repo import DuckDBHistoricoRepo
from remanejamento.infrastructure.repositories.duckdb_observacao_repo import DuckDBObservacaoRepo
from remanejamento.infrastructure.repositories.duckdb_remanejamento_repo import (
    DuckDBRemanejamentoRepo,
    DuckDBSolicitacaoRepo,
)
from remanejamento.infrastructure.repositories.duckdb_tarefa_repo import DuckDBTarefaRepo

AGORA = datetime(2024, 1, 10, tzinfo=UTC)


def popular(conn: duckdb.DuckDBPyConnection) -> None:
    """Dados deterministicos compartilhados pelos testes de servico e de API."""
    conn.execute("""
        INSERT INTO solicitacao_remanejamento (id, contrato_origem_id, contrato_destino_id, prioridade) VALUES
        (1, 10, 20, 'Alta'),
        (2, 10, 30, 'normal'),
        (3, 20, 30, NULL)
    """)
    conn.execute("""
        INSERT INTO funcionario VALUES
        (1, 'Joao da Silva', 'M001', '2024-01-15'),
        (2, 'Maria Santos', 'M002', '2023-01-01'),
        (3, 'Pedro Souza', 'M003', NULL)
    """)
    conn.execute("""
        INSERT INTO equipe VALUES
        (1, 'Recursos Humanos'),
        (2, 'Medicina do Trabalho'),
        (3, 'Treinamento Operacional'),
        (4, 'Logística')
    """)
    conn.execute("""
        INSERT INTO remanejamento_funcionario VALUES
        ('rem-rh', 1, 1, 'RH', NULL, 'PENDENTE'),
        ('rem-log', 2, 2, 'LOGISTICA', NULL, 'PENDENTE'),
        ('rem-concluido', 2, 3, 'RH', 'SUBMETER RASCUNHO', 'CONCLUIDO'),
        ('rem-avaliacao', 2, 3, 'RH', 'ATENDER TAREFAS', 'EM_AVALIACAO'),
        ('rem-aprovado-a', 3, 1, 'RH', 'SUBMETER RASCUNHO', 'APROVADO'),
        ('rem-aprovado-b', 3, 2, 'RH', 'ATENDER TAREFAS', 'APROVADO')
    """)


@pytest.fixture
def db() -> Generator[duckdb.DuckDBPyConnection, None, None]:
    conn = duckdb.connect(":memory:")
    aplicar_schema(conn)
    popular(conn)
    yield conn
    conn.close()


@dataclass
class Ambiente:
    conn: duckdb.DuckDBPyConnection
    remanejamentos: DuckDBRemanejamentoRepo
    tarefa_repo: DuckDBTarefaRepo
    observacao_repo: DuckDBObservacaoRepo
    historico: DuckDBHistoricoRepo
    engine: StatusEngine
    tarefas: TarefaService
    observacoes: ObservacaoService

    def status_tarefas(self, remanejamento_id: str) -> str | None:
        row = self.conn.execute(
            "SELECT status_tarefas FROM remanejamento_funcionario WHERE id = ?", [remanejamento_id],
        ).fetchone()
        return row[0] if row else None


def montar_ambiente(conn: duckdb.DuckDBPyConnection, **engine_kwargs: object) -> Ambiente:
    remanejamentos = DuckDBRemanejamentoRepo(conn)
    tarefa_repo = DuckDBTarefaRepo(conn)
    observacao_repo = DuckDBObservacaoRepo(conn)
    historico = DuckDBHistoricoRepo(conn)
    engine = StatusEngine(
        remanejamento_repo=remanejamentos,
        status_writer=remanejamentos,
        tarefa_repo=tarefa_repo,
        observacao_repo=observacao_repo,
        historico_repo=historico,
        solicitacao_repo=DuckDBSolicitacaoRepo(conn),
        relogio=lambda: AGORA,
        **engine_kwargs,  # type: ignore[arg-type]
    )
    tarefas = TarefaService(
        remanejamento_repo=remanejamentos,
        tarefa_repo=tarefa_repo,
        historico_repo=historico,
        equipe_repo=DuckDBEquipeRepo(conn),
        status_engine=engine,
        relogio=lambda: AGORA,
    )
    return Ambiente(
        conn=conn,
        remanejamentos=remanejamentos,
        tarefa_repo=tarefa_repo,
        observacao_repo=observacao_repo,
        historico=historico,
        engine=engine,
        tarefas=tarefas,
        observacoes=ObservacaoService(remanejamentos, observacao_repo, relogio=lambda: AGORA),
    )


@pytest.fixture
def ambiente(db: duckdb.DuckDBPyConnection) -> Ambiente:
    return montar_ambiente(db)


@pytest.fixture
def agora() -> datetime:
    return AGORA


@pytest.fixture
def montar(db: duckdb.DuckDBPyConnection) -> Callable[..., Ambiente]:
    """Ambiente com opcoes do StatusEngine diferentes das padrao."""
    return lambda **engine_kwargs: montar_ambiente(db, **engine_kwargs)
