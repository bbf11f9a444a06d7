"""Pydantic models for FIO REST API responses."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class FioModel(BaseModel):
    """Base for FIO payloads: PascalCase aliases, snake_case attributes."""

    model_config = ConfigDict(populate_by_name=True)


# --- Materials ---


class Material(FioModel):
    material_id: str = Field(alias="MaterialID")
    category_name: str = Field(alias="CategoryName")
    category_id: str = Field(alias="CategoryID")
    name: str = Field(alias="Name")
    ticker: str = Field(alias="Ticker")
    weight: float = Field(alias="Weight")
    volume: float = Field(alias="Volume")
    user_name_submitted: str = Field("", alias="UserNameSubmitted")
    timestamp: datetime | None = Field(None, alias="Timestamp")


# --- Exchange ---


class ExchangeQuote(FioModel):
    """Bid/ask/price figures for one material on one exchange."""

    material_ticker: str = Field(alias="MaterialTicker")
    exchange_code: str = Field(alias="ExchangeCode")
    mm_buy: float | None = Field(None, alias="MMBuy")
    mm_sell: float | None = Field(None, alias="MMSell")
    price_average: float = Field(0, alias="PriceAverage")
    ask_count: int | None = Field(None, alias="AskCount")
    ask: float | None = Field(None, alias="Ask")
    supply: int = Field(0, alias="Supply")
    bid_count: int | None = Field(None, alias="BidCount")
    bid: float | None = Field(None, alias="Bid")
    demand: int = Field(0, alias="Demand")


class MaterialListing(Material):
    """A material together with its quotes on every exchange."""

    exchanges: list[ExchangeQuote] = Field(default_factory=list)


# --- Ships ---


class ShipRepairMaterial(FioModel):
    ship_repair_material_id: str = Field(alias="ShipRepairMaterialId")
    material_name: str = Field(alias="MaterialName")
    material_id: str = Field(alias="MaterialId")
    material_ticker: str = Field(alias="MaterialTicker")
    amount: int = Field(alias="Amount")


class ShipAddressLine(FioModel):
    line_type: str = Field(alias="LineType")
    line_id: str = Field(alias="LineId")
    natural_id: str | None = Field(None, alias="NaturalId")
    line_name: str | None = Field(None, alias="LineName")


class Ship(FioModel):
    ship_id: str = Field(alias="ShipId")
    store_id: str = Field("", alias="StoreId")
    stl_fuel_store_id: str = Field("", alias="StlFuelStoreId")
    ftl_fuel_store_id: str = Field("", alias="FtlFuelStoreId")
    registration: str = Field(alias="Registration")
    name: str | None = Field(None, alias="Name")
    commissioning_time_epoch_ms: int = Field(0, alias="CommissioningTimeEpochMs")
    blueprint_natural_id: str = Field("", alias="BlueprintNaturalId")
    flight_id: str | None = Field(None, alias="FlightId")
    acceleration: float = Field(0, alias="Acceleration")
    thrust: float = Field(0, alias="Thrust")
    mass: float = Field(0, alias="Mass")
    operating_empty_mass: float = Field(0, alias="OperatingEmptyMass")
    reactor_power: float = Field(0, alias="ReactorPower")
    emitter_power: float = Field(0, alias="EmitterPower")
    volume: float = Field(0, alias="Volume")
    condition: float = Field(1.0, alias="Condition")
    last_repair_epoch_ms: int | None = Field(None, alias="LastRepairEpochMs")
    location: str = Field("", alias="Location")
    stl_fuel_flow_rate: float = Field(0, alias="StlFuelFlowRate")
    repair_materials: list[ShipRepairMaterial] = Field(
        default_factory=list, alias="RepairMaterials",
    )
    address_lines: list[ShipAddressLine] = Field(
        default_factory=list, alias="AddressLines",
    )
    user_name_submitted: str = Field("", alias="UserNameSubmitted")
    timestamp: datetime | None = Field(None, alias="Timestamp")

    @property
    def status(self) -> str:
        return "In Flight" if self.flight_id else "Stationary"


# --- Flights ---


class FlightLine(FioModel):
    type: str = Field(alias="Type")
    line_id: str = Field(alias="LineId")
    line_natural_id: str | None = Field(None, alias="LineNaturalId")
    line_name: str | None = Field(None, alias="LineName")


class FlightSegment(FioModel):
    type: str = Field(alias="Type")
    origin: str = Field(alias="Origin")
    destination: str = Field(alias="Destination")
    departure_time_epoch_ms: int = Field(alias="DepartureTimeEpochMs")
    arrival_time_epoch_ms: int = Field(alias="ArrivalTimeEpochMs")
    stl_distance: float | None = Field(None, alias="StlDistance")
    stl_fuel_consumption: float | None = Field(None, alias="StlFuelConsumption")
    ftl_distance: float | None = Field(None, alias="FtlDistance")
    ftl_fuel_consumption: float | None = Field(None, alias="FtlFuelConsumption")
    origin_lines: list[FlightLine] = Field(default_factory=list, alias="OriginLines")
    destination_lines: list[FlightLine] = Field(
        default_factory=list, alias="DestinationLines",
    )


class Flight(FioModel):
    flight_id: str = Field(alias="FlightId")
    ship_id: str = Field(alias="ShipId")
    origin: str = Field(alias="Origin")
    destination: str = Field(alias="Destination")
    departure_time_epoch_ms: int = Field(alias="DepartureTimeEpochMs")
    arrival_time_epoch_ms: int = Field(alias="ArrivalTimeEpochMs")
    current_segment_index: int = Field(0, alias="CurrentSegmentIndex")
    stl_distance: float = Field(0, alias="StlDistance")
    ftl_distance: float = Field(0, alias="FtlDistance")
    is_aborted: bool = Field(False, alias="IsAborted")
    segments: list[FlightSegment] = Field(default_factory=list, alias="Segments")
    username_submitted: str = Field("", alias="UsernameSubmitted")
    timestamp: datetime | None = Field(None, alias="Timestamp")


# --- KAWA ---


class KawaPrice(BaseModel):
    """One record of the KAWA community price list."""

    ticker: str
    price: float
    planet: str
