"""Asset models: doors and meters.

The meter kinds are independent siblings. ``Meter`` is a subtype of its own
and not a supertype of ``ElectricalMeter``, ``GasMeter`` and the others.
"""

from enum import Enum
from typing import Annotated, Literal

from pydantic import Field

from srenity.models.base import Category, Entity, Relation, Resource


class AssetType(str, Enum):
    DOOR = "door"
    METER = "meter"
    ELECTRICAL_METER = "electrical_meter"
    GAS_METER = "gas_meter"
    HOT_WATER_METER = "hot_water_meter"
    CHILLED_WATER_METER = "chilled_water_meter"


class _AssetFields(Resource):
    initial_cost: str | None = None
    # TODO: parse as datetime once the API documents the format
    installation_date: str | None = None
    ip_address: str | None = None
    mac_address: str | None = None
    maintenance_interval: int | None = Field(default=None, ge=0)
    model_number: str | None = None
    serial_number: str | None = None
    turnover_date: str | None = None
    weight: str | None = None
    located_in: list[Relation] | None = None


class _MeterFields(_AssetFields):
    operational_stage_count: str | None = None
    feeds: list[Relation] | None = None
    is_virtual_meter: bool | None = None


class Door(Entity, _AssetFields):
    type: Literal["door"] = "door"


class Meter(Entity, _MeterFields):
    type: Literal["meter"] = "meter"


class ElectricalMeter(Entity, _MeterFields):
    type: Literal["electrical_meter"] = "electrical_meter"


class GasMeter(Entity, _MeterFields):
    type: Literal["gas_meter"] = "gas_meter"


class HotWaterMeter(Entity, _MeterFields):
    type: Literal["hot_water_meter"] = "hot_water_meter"


class ChilledWaterMeter(Entity, _MeterFields):
    type: Literal["chilled_water_meter"] = "chilled_water_meter"


class NewDoor(_AssetFields):
    type: Literal["door"] = "door"


class NewMeter(_MeterFields):
    type: Literal["meter"] = "meter"


class NewElectricalMeter(_MeterFields):
    type: Literal["electrical_meter"] = "electrical_meter"


class NewGasMeter(_MeterFields):
    type: Literal["gas_meter"] = "gas_meter"


class NewHotWaterMeter(_MeterFields):
    type: Literal["hot_water_meter"] = "hot_water_meter"


class NewChilledWaterMeter(_MeterFields):
    type: Literal["chilled_water_meter"] = "chilled_water_meter"


Asset = Annotated[
    Door | Meter | ElectricalMeter | GasMeter | HotWaterMeter | ChilledWaterMeter,
    Field(discriminator="type"),
]
NewAsset = Annotated[
    NewDoor | NewMeter | NewElectricalMeter | NewGasMeter | NewHotWaterMeter | NewChilledWaterMeter,
    Field(discriminator="type"),
]

ASSET = Category(path="asset", kinds=AssetType, entity=Asset, new_entity=NewAsset)
