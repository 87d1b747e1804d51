# remanejamento/interfaces/api/routes/_erros.py
from fastapi import HTTPException

from remanejamento.domain.erros import ErroDominio, EstadoInvalidoError, NaoEncontradoError, ValidacaoError


def para_http(err: ErroDominio) -> HTTPException:
    if isinstance(err, ValidacaoError):
        return HTTPException(status_code=422, detail=str(err))
    if isinstance(err, NaoEncontradoError):
        return HTTPException(status_code=404, detail=str(err))
    if isinstance(err, EstadoInvalidoError):
        return HTTPException(status_code=409, detail=str(err))
    return HTTPException(status_code=400, detail=str(err))
