# remanejamento/interfaces/api/main.py
from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from remanejamento.infrastructure.config import get_settings


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    from remanejamento.infrastructure.duckdb_connection import get_connection
    get_connection()  # valida conexao e aplica schema no startup
    yield


app = FastAPI(
    title="Remanejamento API",
    debug=get_settings().debug,
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url=None,
)


@app.middleware("http")
async def add_security_headers(request: Request, call_next: object) -> Response:
    response = await call_next(request)  # type: ignore[misc]
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    return response  # type: ignore[return-value]


app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000"],
    allow_methods=["GET", "POST", "PUT"],
    allow_headers=["*"],
)

from remanejamento.interfaces.api.routes.remanejamento_routes import router as remanejamento_router  # noqa: E402
from remanejamento.interfaces.api.routes.setor_routes import router as setor_router  # noqa: E402
from remanejamento.interfaces.api.routes.tarefa_routes import router as tarefa_router  # noqa: E402

app.include_router(tarefa_router, prefix="/api")
app.include_router(remanejamento_router, prefix="/api")
app.include_router(setor_router, prefix="/api")
