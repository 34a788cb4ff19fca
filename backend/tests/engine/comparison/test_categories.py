# tests/engine/comparison/test_categories.py
"""
Tests unitaires pour engine.comparison.categories

Couverture :
    - Rangs des deux échelles (Gering/Selten=1, Mittel=2, Stark/Oft=3)
    - Insensibilité à la casse et aux espaces
    - Libellé vide, None ou inconnu → 0
    - category_label() : rang → libellé d'affichage, inconnu → "Keine Angabe"
"""
import pytest

from checkup.engine.comparison.categories import (
    NO_ANSWER_LABEL,
    category_label,
    category_rank,
)

pytestmark = pytest.mark.engine


class TestCategoryRank:
    @pytest.mark.parametrize("label,expected", [
        ("Gering", 1), ("Selten", 1),
        ("Mittel", 2),
        ("Stark", 3), ("Oft", 3),
    ])
    def test_rangs_connus(self, label, expected):
        assert category_rank(label) == expected

    def test_casse_et_espaces_ignores(self):
        assert category_rank("  sTaRk ") == 3

    @pytest.mark.parametrize("label", [None, "", "   ", "Manchmal", "#N/A"])
    def test_absent_ou_inconnu_donne_zero(self, label):
        assert category_rank(label) == 0


class TestCategoryLabel:
    def test_rangs_connus(self):
        assert category_label(1) == "Gering/Selten"
        assert category_label(2) == "Mittel"
        assert category_label(3) == "Stark/Oft"

    def test_rang_inconnu(self):
        assert category_label(0) == NO_ANSWER_LABEL
        assert category_label(7) == NO_ANSWER_LABEL
