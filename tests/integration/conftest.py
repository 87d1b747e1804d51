# tests/integration/conftest.py
from __future__ import annotations

import os
from collections.abc import Generator

import duckdb
import pytest
from fastapi.testclient import TestClient

# Defaults explicitos: o .env local nao deve influenciar os testes
os.environ["REMANEJAMENTO_PRAZO_HORAS"] = "48"
os.environ["REMANEJAMENTO_DIAS_MINIMOS_VENCIMENTO"] = "30"
os.environ["REMANEJAMENTO_AUDITAR_SEM_MUDANCA"] = "true"
os.environ["REMANEJAMENTO_DEDUP_OBSERVACAO_DEVOLUCAO"] = "true"


@pytest.fixture
def client(db: duckdb.DuckDBPyConnection) -> Generator[TestClient, None, None]:
    """TestClient do FastAPI com o DuckDB in-memory do teste injetado."""
    from remanejamento.infrastructure import duckdb_connection
    duckdb_connection.set_connection(db)

    from remanejamento.infrastructure.config import get_settings
    get_settings.cache_clear()

    from remanejamento.interfaces.api.main import app
    with TestClient(app) as c:
        yield c
    duckdb_connection.set_connection(None)
