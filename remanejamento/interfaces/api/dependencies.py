# remanejamento/interfaces/api/dependencies.py
from collections.abc import Generator

import duckdb
from fastapi import Depends, Header

from remanejamento.application.services.observacao_service import ObservacaoService
from remanejamento.application.services.status_engine import StatusEngine
from remanejamento.application.services.tarefa_service import TarefaService
from remanejamento.application.services.trava import TravaPorRemanejamento
from remanejamento.domain.historico.value_objects import USUARIO_SISTEMA
from remanejamento.infrastructure.config import get_settings
from remanejamento.infrastructure.duckdb_connection import get_connection
from remanejamento.infrastructure.repositories.duckdb_equipe_repo import DuckDBEquipeRepo
from remanejamento.infrastructure.repositories.duckdb_historico_repo import DuckDBHistoricoRepo
from remanejamento.infrastructure.repositories.duckdb_observacao_repo import DuckDBObservacaoRepo
from remanejamento.infrastructure.repositories.duckdb_remanejamento_repo import (
    DuckDBRemanejamentoRepo,
    DuckDBSolicitacaoRepo,
)
from remanejamento.infrastructure.repositories.duckdb_tarefa_repo import DuckDBTarefaRepo

# Uma trava por remanejamento para o processo inteiro, compartilhada entre requests.
_TRAVAS = TravaPorRemanejamento()


def get_cursor() -> Generator[duckdb.DuckDBPyConnection, None, None]:
    """Cursor proprio por request: a conexao DuckDB nao e compartilhavel entre threads."""
    cursor = get_connection().cursor()
    try:
        yield cursor
    finally:
        cursor.close()


def get_ator(x_usuario: str | None = Header(default=None)) -> str:  # noqa: B008
    return (x_usuario or "").strip() or USUARIO_SISTEMA


def get_status_engine(
    conn: duckdb.DuckDBPyConnection = Depends(get_cursor),  # noqa: B008
) -> StatusEngine:
    settings = get_settings()
    remanejamento_repo = DuckDBRemanejamentoRepo(conn)
    return StatusEngine(
        remanejamento_repo=remanejamento_repo,
        status_writer=remanejamento_repo,
        tarefa_repo=DuckDBTarefaRepo(conn),
        observacao_repo=DuckDBObservacaoRepo(conn),
        historico_repo=DuckDBHistoricoRepo(conn),
        solicitacao_repo=DuckDBSolicitacaoRepo(conn),
        travas=_TRAVAS,
        auditar_sem_mudanca=settings.auditar_sem_mudanca,
        dedup_observacao=settings.dedup_observacao_devolucao,
        tentativas_efeitos=settings.tentativas_efeitos,
    )


def get_tarefa_service(
    conn: duckdb.DuckDBPyConnection = Depends(get_cursor),  # noqa: B008
    engine: StatusEngine = Depends(get_status_engine),  # noqa: B008
) -> TarefaService:
    settings = get_settings()
    return TarefaService(
        remanejamento_repo=DuckDBRemanejamentoRepo(conn),
        tarefa_repo=DuckDBTarefaRepo(conn),
        historico_repo=DuckDBHistoricoRepo(conn),
        equipe_repo=DuckDBEquipeRepo(conn),
        status_engine=engine,
        prazo_horas=settings.prazo_horas,
        dias_minimos_vencimento=settings.dias_minimos_vencimento,
        tentativas_efeitos=settings.tentativas_efeitos,
    )


def get_observacao_service(
    conn: duckdb.DuckDBPyConnection = Depends(get_cursor),  # noqa: B008
) -> ObservacaoService:
    return ObservacaoService(
        remanejamento_repo=DuckDBRemanejamentoRepo(conn),
        observacao_repo=DuckDBObservacaoRepo(conn),
    )
