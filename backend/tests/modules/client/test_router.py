# tests/modules/client/test_router.py
"""
Tests HTTP pour modules.client.router

Couverture :
    GET /clients                          → 200 liste, filtres coach / include_deleted transmis
    GET /clients/coaches                  → 200 liste de noms
    GET /clients/{client_id}              → 200 fiche + assessments
    GET /clients/{client_id}              inconnu → 404
    GET /clients/{client_id}/comparison   → 200 rapport T0/T4 complet
    GET /clients/{client_id}/comparison   inconnu → 404
"""
import pytest
from unittest.mock import AsyncMock

from checkup.engine.comparison.report import build_comparison_report
from tests.conftest import make_assessment, make_client

pytestmark = pytest.mark.router


# ── GET /clients ──────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_list_clients_200(client, mocker):
    list_mock = mocker.patch(
        "checkup.modules.client.router.service.list_clients",
        AsyncMock(return_value=[make_client(), make_client(id=2, client_id="zweiter")]),
    )
    resp = await client.get("/clients")
    assert resp.status_code == 200
    assert [c["client_id"] for c in resp.json()] == ["abc123def456", "zweiter"]
    assert list_mock.call_args.kwargs == {"coach_name": None, "include_deleted": False}


@pytest.mark.asyncio
async def test_list_clients_filtres(client, mocker):
    list_mock = mocker.patch(
        "checkup.modules.client.router.service.list_clients",
        AsyncMock(return_value=[]),
    )
    resp = await client.get("/clients", params={"coach": "Anna", "include_deleted": "true"})
    assert resp.status_code == 200
    assert list_mock.call_args.kwargs == {"coach_name": "Anna", "include_deleted": True}


@pytest.mark.asyncio
async def test_list_coaches_200(client, mocker):
    mocker.patch(
        "checkup.modules.client.router.service.list_coaches",
        AsyncMock(return_value=["Anna", "Unbekannter Coach"]),
    )
    resp = await client.get("/clients/coaches")
    assert resp.status_code == 200
    assert resp.json() == ["Anna", "Unbekannter Coach"]


# ── GET /clients/{client_id} ──────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_get_client_200(client, mocker):
    mocker.patch(
        "checkup.modules.client.router.service.get_client_detail",
        AsyncMock(return_value={
            "client": make_client(),
            "assessments": [make_assessment("T0"), make_assessment("T4", id=2)],
        }),
    )
    resp = await client.get("/clients/abc123def456")
    assert resp.status_code == 200
    body = resp.json()
    assert body["client"]["coach_name"] == "Anna"
    assert [a["timepoint"] for a in body["assessments"]] == ["T0", "T4"]


@pytest.mark.asyncio
async def test_get_client_404(client, mocker):
    mocker.patch(
        "checkup.modules.client.router.service.get_client_detail",
        AsyncMock(side_effect=LookupError("CLIENT_NOT_FOUND")),
    )
    resp = await client.get("/clients/inconnu")
    assert resp.status_code == 404


# ── GET /clients/{client_id}/comparison ───────────────────────────────────────

@pytest.mark.asyncio
async def test_comparison_200(client, mocker):
    report = build_comparison_report(
        make_assessment("T0", wellbeing=4),
        make_assessment("T4", wellbeing=8, trust="Stark", general_satisfaction=9),
    )
    report["client_id"] = "abc123def456"
    mocker.patch(
        "checkup.modules.client.router.service.get_comparison",
        AsyncMock(return_value=report),
    )
    resp = await client.get("/clients/abc123def456/comparison")
    assert resp.status_code == 200
    body = resp.json()
    assert body["has_t0"] and body["has_t4"]
    assert body["metrics"]["wellbeing"][0]["indicator"] == "↑"
    assert len(body["radar"]["labels"]) == 8
    assert body["summary"]["overall_improvement"] > 0


@pytest.mark.asyncio
async def test_comparison_404(client, mocker):
    mocker.patch(
        "checkup.modules.client.router.service.get_comparison",
        AsyncMock(side_effect=LookupError("CLIENT_NOT_FOUND")),
    )
    resp = await client.get("/clients/inconnu/comparison")
    assert resp.status_code == 404
