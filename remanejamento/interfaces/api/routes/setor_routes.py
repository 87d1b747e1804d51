# remanejamento/interfaces/api/routes/setor_routes.py
from datetime import UTC, datetime

from fastapi import APIRouter

from remanejamento.application.dtos.setor_dto import PrazoDTO, SetorDTO
from remanejamento.domain.setor.services import resolver_setor
from remanejamento.domain.tarefa.prazo import prazo_padrao
from remanejamento.infrastructure.config import get_settings

router = APIRouter()


@router.get("/setores/resolver", response_model=SetorDTO)
def get_setor(texto: str = "") -> SetorDTO:
    return SetorDTO(texto=texto, setor=str(resolver_setor(texto)))


@router.get("/prazos/padrao", response_model=PrazoDTO)
def get_prazo(agora: datetime | None = None, data_admissao: str | None = None) -> PrazoDTO:
    """data_admissao fica como texto: valor ilegivel cai no prazo a partir de agora."""
    referencia = agora or datetime.now(UTC)
    limite = prazo_padrao(referencia, data_admissao, get_settings().prazo_horas)
    return PrazoDTO(
        agora=referencia.isoformat(),
        data_admissao=data_admissao,
        data_limite=limite.isoformat(),
    )
