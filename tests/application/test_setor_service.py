# tests/application/test_setor_service.py
import duckdb
import pytest

from remanejamento.application.services.setor_service import encontrar_equipe_por_setor
from remanejamento.infrastructure.repositories.duckdb_equipe_repo import DuckDBEquipeRepo


@pytest.mark.parametrize(
    ("setor", "equipe_id"),
    [
        ("RH", 1),
        ("MEDICINA", 2),
        ("TREINAMENTO", 3),
        ("LOGISTICA", 4),
        ("PLANEJAMENTO", None),
        ("", None),
    ],
)
def test_encontrar_equipe_por_setor(db, setor, equipe_id):
    assert encontrar_equipe_por_setor(setor, DuckDBEquipeRepo(db)) == equipe_id


def test_empate_fica_com_menor_id(db):
    db.execute("INSERT INTO equipe VALUES (0, 'RH Corporativo')")
    assert encontrar_equipe_por_setor("RH", DuckDBEquipeRepo(db)) == 0


def test_falha_na_busca_nao_e_fatal():
    class EquipeQuebrada:
        def buscar_id_por_nome_contendo(self, termos):
            raise duckdb.Error("conexao perdida")

        def buscar_id_por_nome(self, nome):
            raise duckdb.Error("conexao perdida")

    assert encontrar_equipe_por_setor("RH", EquipeQuebrada()) is None
    assert encontrar_equipe_por_setor("PLANEJAMENTO", EquipeQuebrada()) is None
