# comissoes/interfaces/api/routes/export_routes.py
from typing import Literal

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from comissoes.application.dtos.proposta_dto import PropostaDTO
from comissoes.application.dtos.totais_dto import TotaisDTO
from comissoes.application.services.derivacao_service import agregar
from comissoes.application.services.export_service import ExportService
from comissoes.application.services.proposta_service import PropostaService
from comissoes.interfaces.api.dependencies import get_export_service, get_proposta_service

router = APIRouter()


@router.get("/proposals/export")
def export_propostas(
    formato: Literal["csv", "json"] = Query(...),
    service: PropostaService = Depends(get_proposta_service),  # noqa: B008
    export_service: ExportService = Depends(get_export_service),  # noqa: B008
) -> Response:
    registros = service.listar()
    propostas = [PropostaDTO.from_domain(r) for r in registros]
    totais = TotaisDTO.from_domain(agregar(registros))

    if formato == "json":
        return Response(
            content=export_service.exportar_json(propostas, totais),
            media_type="application/json",
        )
    return Response(
        content=export_service.exportar_csv(propostas, totais),
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=propostas.csv"},
    )
