"""Srenity data model."""

from srenity.models.agent import (
    AGENT,
    AccessGroup,
    Agent,
    AgentType,
    Company,
    Department,
    Key,
    NewAccessGroup,
    NewAgent,
    NewCompany,
    NewDepartment,
    NewPerson,
    Person,
)
from srenity.models.asset import (
    ASSET,
    Asset,
    AssetType,
    ChilledWaterMeter,
    Door,
    ElectricalMeter,
    GasMeter,
    HotWaterMeter,
    Meter,
    NewAsset,
    NewChilledWaterMeter,
    NewDoor,
    NewElectricalMeter,
    NewGasMeter,
    NewHotWaterMeter,
    NewMeter,
)
from srenity.models.auth import Auth
from srenity.models.base import Category, Entity, Id, Identifier, Relation, Resource, SrenityModel
from srenity.models.collection import (
    COLLECTION,
    Apartment,
    Collection,
    CollectionType,
    NewApartment,
    NewCollection,
    NewPremises,
    NewRealEstate,
    Premises,
    RealEstate,
)
from srenity.models.event import EVENT, Booking, Event, EventType, Lease, NewBooking, NewEvent, NewLease
from srenity.models.information import (
    INFORMATION,
    ArchitectureArea,
    ArchitectureCapacity,
    Information,
    InformationType,
    NewArchitectureArea,
    NewArchitectureCapacity,
    NewInformation,
    NewPostalAddress,
    PostalAddress,
)
from srenity.models.space import (
    SPACE,
    AccessControlZone,
    Area,
    Building,
    Capacity,
    Entrance,
    Level,
    NewAccessControlZone,
    NewBuilding,
    NewEntrance,
    NewLevel,
    NewRoom,
    NewSpace,
    Room,
    Space,
    SpaceType,
)

CATEGORIES: dict[str, Category] = {
    category.path: category for category in (AGENT, ASSET, SPACE, EVENT, COLLECTION, INFORMATION)
}

__all__ = [
    "AGENT",
    "ASSET",
    "CATEGORIES",
    "COLLECTION",
    "EVENT",
    "INFORMATION",
    "SPACE",
    "AccessControlZone",
    "AccessGroup",
    "Agent",
    "AgentType",
    "Apartment",
    "ArchitectureArea",
    "ArchitectureCapacity",
    "Area",
    "Asset",
    "AssetType",
    "Auth",
    "Booking",
    "Building",
    "Capacity",
    "Category",
    "ChilledWaterMeter",
    "Collection",
    "CollectionType",
    "Company",
    "Department",
    "Door",
    "ElectricalMeter",
    "Entity",
    "Entrance",
    "Event",
    "EventType",
    "GasMeter",
    "HotWaterMeter",
    "Id",
    "Identifier",
    "Information",
    "InformationType",
    "Key",
    "Lease",
    "Level",
    "Meter",
    "NewAccessControlZone",
    "NewAccessGroup",
    "NewAgent",
    "NewApartment",
    "NewArchitectureArea",
    "NewArchitectureCapacity",
    "NewAsset",
    "NewBooking",
    "NewBuilding",
    "NewChilledWaterMeter",
    "NewCollection",
    "NewCompany",
    "NewDepartment",
    "NewDoor",
    "NewElectricalMeter",
    "NewEntrance",
    "NewEvent",
    "NewGasMeter",
    "NewHotWaterMeter",
    "NewInformation",
    "NewLease",
    "NewLevel",
    "NewMeter",
    "NewPerson",
    "NewPostalAddress",
    "NewPremises",
    "NewRealEstate",
    "NewRoom",
    "NewSpace",
    "Person",
    "PostalAddress",
    "Premises",
    "RealEstate",
    "Relation",
    "Resource",
    "Room",
    "Space",
    "SpaceType",
    "SrenityModel",
]
