# remanejamento/interfaces/api/routes/tarefa_routes.py
from fastapi import APIRouter, Depends

from remanejamento.application.dtos.tarefa_dto import (
    AtualizarStatusRequest,
    ConcluirTarefaRequest,
    NovaTarefaRequest,
    TarefaDTO,
    TarefaResultadoDTO,
)
from remanejamento.application.services.tarefa_service import TarefaService
from remanejamento.domain.erros import ErroDominio
from remanejamento.domain.tarefa.entities import NovaTarefa
from remanejamento.interfaces.api.dependencies import get_ator, get_tarefa_service

from ._erros import para_http

router = APIRouter()


@router.post(
    "/remanejamentos/{remanejamento_id}/tarefas",
    response_model=TarefaResultadoDTO,
    status_code=201,
)
def post_tarefa(
    remanejamento_id: str,
    body: NovaTarefaRequest,
    ator: str = Depends(get_ator),  # noqa: B008
    service: TarefaService = Depends(get_tarefa_service),  # noqa: B008
) -> TarefaResultadoDTO:
    nova = NovaTarefa(
        remanejamento_funcionario_id=remanejamento_id,
        tipo=body.tipo,
        responsavel=body.responsavel,
        descricao=body.descricao,
        prioridade=body.prioridade,
        data_limite=body.data_limite,
        data_vencimento=body.data_vencimento,
    )
    try:
        resultado = service.criar_tarefa(nova, ator)
    except ErroDominio as err:
        raise para_http(err) from err
    return TarefaResultadoDTO.from_domain(resultado)


@router.get("/remanejamentos/{remanejamento_id}/tarefas", response_model=list[TarefaDTO])
def get_tarefas(
    remanejamento_id: str,
    status: str | None = None,
    service: TarefaService = Depends(get_tarefa_service),  # noqa: B008
) -> list[TarefaDTO]:
    try:
        tarefas = service.listar_tarefas(remanejamento_id, status)
    except ErroDominio as err:
        raise para_http(err) from err
    return [TarefaDTO.from_domain(t) for t in tarefas]


@router.put("/tarefas/{tarefa_id}", response_model=TarefaResultadoDTO)
@router.put("/tarefas/{tarefa_id}/status", response_model=TarefaResultadoDTO)
def put_status(
    tarefa_id: str,
    body: AtualizarStatusRequest,
    ator: str = Depends(get_ator),  # noqa: B008
    service: TarefaService = Depends(get_tarefa_service),  # noqa: B008
) -> TarefaResultadoDTO:
    try:
        resultado = service.atualizar_status_tarefa(
            tarefa_id,
            body.status,
            ator,
            data_vencimento=body.data_vencimento,
            data_limite=body.data_limite,
        )
    except ErroDominio as err:
        raise para_http(err) from err
    return TarefaResultadoDTO.from_domain(resultado)


@router.put("/tarefas/{tarefa_id}/concluir", response_model=TarefaResultadoDTO)
def put_concluir(
    tarefa_id: str,
    body: ConcluirTarefaRequest,
    ator: str = Depends(get_ator),  # noqa: B008
    service: TarefaService = Depends(get_tarefa_service),  # noqa: B008
) -> TarefaResultadoDTO:
    try:
        resultado = service.concluir_tarefa(tarefa_id, body.data_vencimento, ator)
    except ErroDominio as err:
        raise para_http(err) from err
    return TarefaResultadoDTO.from_domain(resultado)
