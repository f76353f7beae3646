# comissoes/interfaces/api/routes/totais_routes.py
from fastapi import APIRouter, Depends

from comissoes.application.dtos.totais_dto import TotaisDTO
from comissoes.application.services.proposta_service import PropostaService
from comissoes.interfaces.api.dependencies import get_proposta_service

router = APIRouter()


@router.get("/proposals/totais", response_model=TotaisDTO)
def get_totais(
    service: PropostaService = Depends(get_proposta_service),  # noqa: B008
) -> TotaisDTO:
    return TotaisDTO.from_domain(service.totais())
