# remanejamento/application/dtos/setor_dto.py
from pydantic import BaseModel


class SetorDTO(BaseModel):
    texto: str
    setor: str


class PrazoDTO(BaseModel):
    agora: str
    data_admissao: str | None
    data_limite: str
