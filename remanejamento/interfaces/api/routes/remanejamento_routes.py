# remanejamento/interfaces/api/routes/remanejamento_routes.py
from fastapi import APIRouter, Depends

from remanejamento.application.dtos.remanejamento_dto import NovaObservacaoRequest, ObservacaoDTO, RecalculoDTO
from remanejamento.application.services.observacao_service import ObservacaoService
from remanejamento.application.services.status_engine import StatusEngine
from remanejamento.domain.erros import ErroDominio
from remanejamento.interfaces.api.dependencies import get_ator, get_observacao_service, get_status_engine

from ._erros import para_http

router = APIRouter()


@router.post("/remanejamentos/{remanejamento_id}/recalcular", response_model=RecalculoDTO)
def post_recalcular(
    remanejamento_id: str,
    ator: str = Depends(get_ator),  # noqa: B008
    engine: StatusEngine = Depends(get_status_engine),  # noqa: B008
) -> RecalculoDTO:
    """Idempotente. Remanejamento inexistente volta 200 com aviso, sem escrita."""
    return RecalculoDTO.from_domain(engine.recalcular(remanejamento_id, ator))


@router.get("/remanejamentos/{remanejamento_id}/observacoes", response_model=list[ObservacaoDTO])
def get_observacoes(
    remanejamento_id: str,
    service: ObservacaoService = Depends(get_observacao_service),  # noqa: B008
) -> list[ObservacaoDTO]:
    return [ObservacaoDTO.from_domain(o) for o in service.listar(remanejamento_id)]


@router.post(
    "/remanejamentos/{remanejamento_id}/observacoes",
    response_model=ObservacaoDTO,
    status_code=201,
)
def post_observacao(
    remanejamento_id: str,
    body: NovaObservacaoRequest,
    ator: str = Depends(get_ator),  # noqa: B008
    service: ObservacaoService = Depends(get_observacao_service),  # noqa: B008
) -> ObservacaoDTO:
    try:
        observacao = service.adicionar(remanejamento_id, body.texto, ator)
    except ErroDominio as err:
        raise para_http(err) from err
    return ObservacaoDTO.from_domain(observacao)
