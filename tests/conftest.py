"""Shared fixtures: settings in tmp_path and a fake FIO upstream."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import httpx
import pytest

from pruntools.config import Settings

MATERIALS = [
    {
        "MaterialID": "m-rat", "CategoryName": "consumables (basic)", "CategoryID": "c1",
        "Name": "basicRations", "Ticker": "RAT", "Weight": 0.21, "Volume": 0.1,
        "UserNameSubmitted": "FIO", "Timestamp": "2024-03-30T10:00:00",
    },
    {
        "MaterialID": "m-dw", "CategoryName": "consumables (basic)", "CategoryID": "c1",
        "Name": "drinkingWater", "Ticker": "DW", "Weight": 0.1, "Volume": 0.1,
        "UserNameSubmitted": "FIO", "Timestamp": "2024-03-30T10:00:00",
    },
    {
        "MaterialID": "m-fe", "CategoryName": "metals", "CategoryID": "c2",
        "Name": "iron", "Ticker": "FE", "Weight": 7.874, "Volume": 1.0,
        "UserNameSubmitted": "FIO", "Timestamp": "2024-03-30T10:00:00",
    },
]

EXCHANGES = [
    {
        "MaterialTicker": "RAT", "ExchangeCode": "NC1", "MMBuy": None, "MMSell": None,
        "PriceAverage": 102.5, "AskCount": 1200, "Ask": 110.0, "Supply": 50000,
        "BidCount": 900, "Bid": 95.0, "Demand": 42000,
    },
    {
        "MaterialTicker": "RAT", "ExchangeCode": "CI1", "MMBuy": 80.0, "MMSell": 150.0,
        "PriceAverage": 99.0, "AskCount": None, "Ask": None, "Supply": 10,
        "BidCount": None, "Bid": None, "Demand": 0,
    },
    {
        "MaterialTicker": "FE", "ExchangeCode": "NC1", "MMBuy": None, "MMSell": None,
        "PriceAverage": 250.0, "AskCount": 10, "Ask": 260.0, "Supply": 300,
        "BidCount": 5, "Bid": 240.0, "Demand": 200,
    },
]

SHIPS = [
    {
        "RepairMaterials": [
            {
                "ShipRepairMaterialId": "r1", "MaterialName": "lightweightHullPlate",
                "MaterialId": "m-lhp", "MaterialTicker": "LHP", "Amount": 3,
            },
        ],
        "AddressLines": [],
        "ShipId": "ship-1", "StoreId": "s1", "StlFuelStoreId": "s2", "FtlFuelStoreId": "s3",
        "Registration": "AVI-05XYZ", "Name": "Hauler", "CommissioningTimeEpochMs": 1700000000000,
        "BlueprintNaturalId": "BP-1", "FlightId": "flight-1", "Acceleration": 1.5,
        "Thrust": 1000.0, "Mass": 800.0, "OperatingEmptyMass": 600.0, "ReactorPower": 500.0,
        "EmitterPower": 300.0, "Volume": 900.0, "Condition": 0.97, "LastRepairEpochMs": None,
        "Location": "Promitor", "StlFuelFlowRate": 0.01,
        "UserNameSubmitted": "coolfeather", "Timestamp": "2024-03-30T10:00:00",
    },
]

FLIGHTS = [
    {
        "Segments": [
            {
                "OriginLines": [
                    {"Type": "SYSTEM", "LineId": "l1", "LineNaturalId": "OT-580", "LineName": "Benten"},
                ],
                "DestinationLines": [],
                "Type": "DEPARTURE",
                "DepartureTimeEpochMs": 1711792800000, "ArrivalTimeEpochMs": 1711796400000,
                "StlDistance": 12.5, "StlFuelConsumption": 3.2,
                "FtlDistance": None, "FtlFuelConsumption": None,
                "Origin": "Promitor", "Destination": "Benten orbit",
            },
        ],
        "FlightId": "flight-1", "ShipId": "ship-1", "Origin": "Promitor",
        "Destination": "Montem", "DepartureTimeEpochMs": 1711792800000,
        "ArrivalTimeEpochMs": 1711800000000, "CurrentSegmentIndex": 0,
        "StlDistance": 30.0, "FtlDistance": 2.0, "IsAborted": False,
        "UsernameSubmitted": "coolfeather", "Timestamp": "2024-03-30T10:00:00",
    },
]

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        base_url="https://fio.test",
        fio_api_key="",
        kawa_url="https://kawa.test/records",
        data_dir=tmp_path,
    )


@pytest.fixture
def fio_routes() -> dict[str, Any]:
    """Path -> JSON body, or an int status code to fail with. Tests may edit it."""
    return {
        "/material/allmaterials": MATERIALS,
        "/material/category/metals": [m for m in MATERIALS if m["CategoryName"] == "metals"],
        "/exchange/all": EXCHANGES,
        "/ship/ships/coolfeather": SHIPS,
        "/ship/flights/coolfeather": FLIGHTS,
    }


@pytest.fixture
def requests_seen() -> list[httpx.Request]:
    return []


@pytest.fixture
def fio_transport(
    fio_routes: dict[str, Any], requests_seen: list[httpx.Request],
) -> httpx.MockTransport:
    """Serves fio_routes for any host; unknown paths are 404."""

    def handler(request: httpx.Request) -> httpx.Response:
        requests_seen.append(request)
        body = fio_routes.get(request.url.path)
        if body is None:
            return httpx.Response(404)
        if isinstance(body, int):
            return httpx.Response(body)
        if callable(body):
            return body(request)
        return httpx.Response(200, json=body)

    return httpx.MockTransport(handler)
