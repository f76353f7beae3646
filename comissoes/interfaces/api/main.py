# comissoes/interfaces/api/main.py
from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from comissoes.infrastructure.config import get_settings


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    from comissoes.infrastructure.duckdb_connection import get_connection, inicializar_schema
    from comissoes.infrastructure.log import log
    from comissoes.infrastructure.repositories.duckdb_proposta_repo import DuckDBPropostaRepo

    conn = get_connection()
    inicializar_schema(conn)
    log("Schema de propostas pronto")
    if get_settings().seed_dados_iniciais:
        DuckDBPropostaRepo(conn).semear_dados_iniciais()
    yield


app = FastAPI(
    title="Comissoes de Vendas API",
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
    allow_origins=list(get_settings().cors_origins),
    allow_methods=["GET", "POST", "PATCH", "DELETE"],
    allow_headers=["*"],
)

# Routers: totais/export ANTES de proposta (path conflict: /proposals/totais vs /proposals/{proposta_id})
from comissoes.interfaces.api.routes.export_routes import router as export_router  # noqa: E402
from comissoes.interfaces.api.routes.proposta_routes import router as proposta_router  # noqa: E402
from comissoes.interfaces.api.routes.totais_routes import router as totais_router  # noqa: E402

app.include_router(totais_router, prefix="/api")
app.include_router(export_router, prefix="/api")
app.include_router(proposta_router, prefix="/api")
