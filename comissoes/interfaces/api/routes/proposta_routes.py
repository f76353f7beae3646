# comissoes/interfaces/api/routes/proposta_routes.py
from fastapi import APIRouter, Depends, HTTPException, Response

from comissoes.application.dtos.proposta_dto import (
    AtualizacaoPropostaDTO,
    NovaPropostaDTO,
    PropostaDTO,
)
from comissoes.application.services.proposta_service import PropostaService
from comissoes.interfaces.api.dependencies import get_proposta_service

router = APIRouter()

_NAO_ENCONTRADA = "Proposta nao encontrada"


@router.get("/proposals", response_model=list[PropostaDTO])
def listar_propostas(
    service: PropostaService = Depends(get_proposta_service),  # noqa: B008
) -> list[PropostaDTO]:
    return [PropostaDTO.from_domain(r) for r in service.listar()]


@router.get("/proposals/{proposta_id}", response_model=PropostaDTO)
def obter_proposta(
    proposta_id: int,
    service: PropostaService = Depends(get_proposta_service),  # noqa: B008
) -> PropostaDTO:
    registro = service.obter(proposta_id)
    if registro is None:
        raise HTTPException(status_code=404, detail=_NAO_ENCONTRADA)
    return PropostaDTO.from_domain(registro)


@router.post("/proposals", response_model=PropostaDTO, status_code=201)
def criar_proposta(
    payload: NovaPropostaDTO,
    service: PropostaService = Depends(get_proposta_service),  # noqa: B008
) -> PropostaDTO:
    try:
        dados = payload.to_domain()
    except ValueError as err:
        raise HTTPException(status_code=422, detail=str(err)) from err
    return PropostaDTO.from_domain(service.criar(dados))


@router.patch("/proposals/{proposta_id}", response_model=PropostaDTO)
def atualizar_proposta(
    proposta_id: int,
    payload: AtualizacaoPropostaDTO,
    service: PropostaService = Depends(get_proposta_service),  # noqa: B008
) -> PropostaDTO:
    try:
        registro = service.atualizar(proposta_id, payload.campos())
    except ValueError as err:
        raise HTTPException(status_code=422, detail=str(err)) from err
    if registro is None:
        raise HTTPException(status_code=404, detail=_NAO_ENCONTRADA)
    return PropostaDTO.from_domain(registro)


@router.delete("/proposals/{proposta_id}", status_code=204)
def remover_proposta(
    proposta_id: int,
    service: PropostaService = Depends(get_proposta_service),  # noqa: B008
) -> Response:
    if not service.remover(proposta_id):
        raise HTTPException(status_code=404, detail=_NAO_ENCONTRADA)
    return Response(status_code=204)
