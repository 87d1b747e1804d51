# remanejamento/domain/setor/value_objects.py
from enum import StrEnum


class SetorCodigo(StrEnum):
    RH = "RH"
    MEDICINA = "MEDICINA"
    TREINAMENTO = "TREINAMENTO"
    LOGISTICA = "LOGISTICA"
