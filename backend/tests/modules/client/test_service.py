# tests/modules/client/test_service.py
"""
Tests unitaires pour modules.client.service.ClientService

Couverture :
    list_clients() : filtres transmis au repository
    get_client_detail() :
        - Client inconnu → LookupError
        - Succès → fiche + assessments
    get_comparison() :
        - Client inconnu → LookupError
        - T0 + T4 → rapport complet, client_id ajouté
        - T0 seul → has_t4=False
    split_by_timepoint() : T0 / T4 séparés, timepoint inconnu ignoré
"""
import pytest
from unittest.mock import AsyncMock

from checkup.modules.client.service import ClientService, split_by_timepoint
from tests.conftest import make_assessment, make_async_db, make_client

pytestmark = pytest.mark.service

service = ClientService()


class TestListClients:
    @pytest.mark.asyncio
    async def test_filtres_transmis(self, mocker):
        list_mock = mocker.patch(
            "checkup.modules.client.service.repo.list_clients",
            AsyncMock(return_value=[make_client()]),
        )
        db = make_async_db()
        result = await service.list_clients(db, coach_name="Anna", include_deleted=True)
        assert len(result) == 1
        list_mock.assert_awaited_once_with(db, coach_name="Anna", include_deleted=True)

    @pytest.mark.asyncio
    async def test_coachs(self, mocker):
        mocker.patch(
            "checkup.modules.client.service.repo.list_coach_names",
            AsyncMock(return_value=["Anna", "Bernd"]),
        )
        assert await service.list_coaches(make_async_db()) == ["Anna", "Bernd"]


class TestGetClientDetail:
    @pytest.mark.asyncio
    async def test_client_inconnu(self, mocker):
        mocker.patch("checkup.modules.client.service.repo.get_client", AsyncMock(return_value=None))
        with pytest.raises(LookupError):
            await service.get_client_detail(make_async_db(), "inconnu")

    @pytest.mark.asyncio
    async def test_succes(self, mocker):
        mocker.patch("checkup.modules.client.service.repo.get_client", AsyncMock(return_value=make_client()))
        mocker.patch(
            "checkup.modules.client.service.repo.get_assessments",
            AsyncMock(return_value=[make_assessment("T0")]),
        )
        detail = await service.get_client_detail(make_async_db(), "abc123def456")
        assert detail["client"].client_id == "abc123def456"
        assert len(detail["assessments"]) == 1


class TestGetComparison:
    @pytest.mark.asyncio
    async def test_client_inconnu(self, mocker):
        mocker.patch("checkup.modules.client.service.repo.get_client", AsyncMock(return_value=None))
        with pytest.raises(LookupError):
            await service.get_comparison(make_async_db(), "inconnu")

    @pytest.mark.asyncio
    async def test_t0_et_t4(self, mocker):
        mocker.patch("checkup.modules.client.service.repo.get_client", AsyncMock(return_value=make_client()))
        mocker.patch(
            "checkup.modules.client.service.repo.get_assessments",
            AsyncMock(return_value=[
                make_assessment("T0", wellbeing=4),
                make_assessment("T4", wellbeing=8, trust="Stark"),
            ]),
        )
        report = await service.get_comparison(make_async_db(), "abc123def456")
        assert report["client_id"] == "abc123def456"
        assert report["has_t0"] and report["has_t4"]
        assert report["summary"]["wellbeing"]["avg_change"] == pytest.approx(100.0)

    @pytest.mark.asyncio
    async def test_t0_seul(self, mocker):
        mocker.patch("checkup.modules.client.service.repo.get_client", AsyncMock(return_value=make_client()))
        mocker.patch(
            "checkup.modules.client.service.repo.get_assessments",
            AsyncMock(return_value=[make_assessment("T0")]),
        )
        report = await service.get_comparison(make_async_db(), "abc123def456")
        assert report["has_t0"] is True
        assert report["has_t4"] is False
        assert report["coaching_evaluation"] == []


class TestSplitByTimepoint:
    def test_separation(self):
        t0, t4 = split_by_timepoint([make_assessment("T4", id=2), make_assessment("T0", id=1)])
        assert t0.id == 1
        assert t4.id == 2

    def test_timepoint_inconnu_ignore(self):
        t0, t4 = split_by_timepoint([make_assessment("T2")])
        assert t0 is None and t4 is None
