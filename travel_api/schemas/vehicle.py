"""Vehicle schemas."""

from datetime import date, datetime
from decimal import Decimal
from typing import Literal
from uuid import UUID

from pydantic import Field, field_validator

from travel_api.schemas.common import CamelModel
from travel_api.schemas.hotel import Rating

Transmission = Literal["Automatic", "Manual"]
FuelType = Literal["Petrol", "Diesel", "Electric", "Hybrid"]
VehicleStatus = Literal["Available", "In Service", "Repairs Needed"]


class InsuranceOption(CamelModel):
    type: str = Field(..., min_length=1, max_length=50)
    coverage: str | None = None
    price_per_day: float = Field(..., ge=0)


def _default_insurance_options() -> list[InsuranceOption]:
    return [InsuranceOption(type="Basic", coverage="Third party liability", price_per_day=10)]


class RentalTerms(CamelModel):
    minimum_age: int = Field(default=18, ge=16, le=100)
    security_deposit: float = Field(default=0, ge=0)
    mileage_limit: int | None = Field(None, ge=0)
    additional_drivers: bool = False
    required_documents: list[str] = ["Driver's License"]
    insurance_options: list[InsuranceOption] = Field(default_factory=_default_insurance_options)


class MaintenanceRecord(CamelModel):
    service_date: date
    description: str
    cost: float = Field(default=0, ge=0)


class VehicleBase(CamelModel):
    vehicle_type: str = Field(..., min_length=1, max_length=50)
    make: str = Field(..., min_length=1, max_length=100)
    model: str = Field(..., min_length=1, max_length=100)
    year: int = Field(..., ge=1900, le=2100)
    description: str | None = None
    license_plate: str = Field(..., min_length=1, max_length=20)
    color: str | None = Field(None, max_length=50)
    transmission: Transmission = "Automatic"
    fuel_type: FuelType = "Petrol"
    mileage: int = Field(default=0, ge=0)
    features: list[str] = []
    images: list[str] = []
    capacity: int = Field(..., ge=1)
    price_per_day: Decimal = Field(..., ge=0)
    is_available: bool = True
    address: str | None = Field(None, max_length=500)
    city: str | None = Field(None, max_length=100)
    country: str | None = Field(None, max_length=100)
    latitude: float | None = Field(None, ge=-90, le=90)
    longitude: float | None = Field(None, ge=-180, le=180)
    maintenance_status: VehicleStatus = "Available"
    last_service: date | None = None
    next_service: date | None = None
    rental_terms: RentalTerms = Field(default_factory=RentalTerms)

    @field_validator("license_plate")
    @classmethod
    def normalize_plate(cls, v: str) -> str:
        return v.strip().upper()


class VehicleCreate(VehicleBase):
    """Schema for creating a vehicle."""


class VehicleUpdate(CamelModel):
    """Schema for updating a vehicle."""

    vehicle_type: str | None = Field(None, min_length=1, max_length=50)
    make: str | None = Field(None, min_length=1, max_length=100)
    model: str | None = Field(None, min_length=1, max_length=100)
    year: int | None = Field(None, ge=1900, le=2100)
    description: str | None = None
    license_plate: str | None = Field(None, min_length=1, max_length=20)
    color: str | None = Field(None, max_length=50)
    transmission: Transmission | None = None
    fuel_type: FuelType | None = None
    mileage: int | None = Field(None, ge=0)
    features: list[str] | None = None
    images: list[str] | None = None
    capacity: int | None = Field(None, ge=1)
    price_per_day: Decimal | None = Field(None, ge=0)
    is_available: bool | None = None
    address: str | None = Field(None, max_length=500)
    city: str | None = Field(None, max_length=100)
    country: str | None = Field(None, max_length=100)
    latitude: float | None = Field(None, ge=-90, le=90)
    longitude: float | None = Field(None, ge=-180, le=180)
    maintenance_status: VehicleStatus | None = None
    last_service: date | None = None
    next_service: date | None = None
    maintenance_history: list[MaintenanceRecord] | None = None
    rental_terms: RentalTerms | None = None

    @field_validator("license_plate")
    @classmethod
    def normalize_plate(cls, v: str | None) -> str | None:
        return v.strip().upper() if v else v


class VehicleResponse(CamelModel):
    id: UUID
    vehicle_type: str
    make: str
    model: str
    year: int
    description: str | None
    license_plate: str
    color: str | None
    transmission: str
    fuel_type: str
    mileage: int
    features: list[str]
    images: list[str]
    capacity: int
    price_per_day: float
    is_available: bool
    address: str | None
    city: str | None
    country: str | None
    latitude: float | None
    longitude: float | None
    maintenance_status: str
    last_service: date | None
    next_service: date | None
    maintenance_history: list[MaintenanceRecord]
    rental_terms: RentalTerms
    ratings: list[Rating]
    average_rating: float
    created_at: datetime
    updated_at: datetime


class NearbyVehicleResponse(VehicleResponse):
    distance_km: float


class Location(CamelModel):
    address: str
    city: str
    country: str


class DriverDetails(CamelModel):
    name: str
    license_number: str
    phone_number: str | None = None
    expiry_date: date | None = None


class VehicleBookingCreate(CamelModel):
    """Schema for booking a vehicle."""

    start_date: date
    end_date: date
    insurance_type: str | None = None
    pickup_location: Location | None = None
    dropoff_location: Location | None = None
    driver_details: DriverDetails | None = None
    special_requests: str | None = Field(None, max_length=1000)

    @field_validator("end_date")
    @classmethod
    def validate_end_date(cls, v: date, info) -> date:
        start_date = info.data.get("start_date")
        if start_date and v <= start_date:
            raise ValueError("end_date must be after start_date")
        return v


class VehiclePricing(CamelModel):
    days: int
    price_per_day: float
    base_price: float
    insurance_cost: float
    total_price: float


class VehicleAvailabilityResponse(CamelModel):
    is_available: bool
    reason: str | None = None
    pricing: VehiclePricing | None = None


class VehicleStatsResponse(CamelModel):
    total: int
    available: int
    in_maintenance: int
    by_type: dict[str, int]
    average_price: float
