from typing import Annotated, Literal, Optional

from pydantic import BeforeValidator, Field

from app.schemas.base import CamelModel, blank_to_none

# empty select boxes arrive as ""
BlankIsNone = BeforeValidator(blank_to_none)
PropertyType = Literal["apartment", "villa", "commercial", "open-plot", "farm-land"]
PropertyStatus = Literal["for-sale", "for-rent", "sold", "rented"]
Furnished = Literal["unfurnished", "semi-furnished", "furnished"]


class Video(CamelModel):
    video_url: str
    thumbnail_url: str


class Brochure(CamelModel):
    brochure_link: Optional[str] = None
    brochure_thumbnail1: Optional[str] = None
    brochure_thumbnail2: Optional[str] = None
    brochure_thumbnail3: Optional[str] = None


class Tower(CamelModel):
    name: Optional[str] = None
    floors: Optional[int] = None
    units: Optional[int] = None
    floor_plans: list[str] = []
    facing: Optional[str] = None


class Dimensions(CamelModel):
    length: Optional[float] = None
    width: Optional[float] = None


class ApartmentSpecifications(CamelModel):
    doors: Optional[str] = None
    windows: Optional[str] = None
    flooring: Optional[str] = None
    kitchen: Optional[str] = None
    bathroom: Optional[str] = None
    electrical: Optional[str] = None
    walls: Optional[str] = None


class ApartmentDetails(CamelModel):
    bhk_type: Annotated[Optional[Literal["studio", "1bhk", "2bhk", "3bhk", "4bhk", "5+bhk", "penthouse"]], BlankIsNone] = None
    bedrooms: Optional[int] = None
    bathrooms: Optional[int] = None
    balconies: Optional[int] = None
    towers: Optional[int] = None
    floors_per_tower: Optional[int] = None
    total_units: Optional[int] = None
    possession_date: Optional[str] = None
    specifications: Optional[ApartmentSpecifications] = None


class VillaSpecifications(CamelModel):
    structure: Optional[str] = None
    doors: Optional[str] = None
    windows: Optional[str] = None
    kitchen: Optional[str] = None
    bathroom: Optional[str] = None
    staircase: Optional[str] = None
    electrical: Optional[str] = None


class VillaDetails(CamelModel):
    villa_type: Annotated[Optional[Literal["independent", "row-house", "duplex", "triplex"]], BlankIsNone] = None
    plot_area: Optional[float] = None
    built_up_area: Optional[float] = None
    number_of_floors: Optional[int] = None
    garden_area: Optional[float] = None
    parking_spaces: Optional[int] = None
    gated_community: Optional[bool] = None
    balconies: Optional[int] = None
    bedrooms: Optional[int] = None
    bathrooms: Optional[int] = None
    specifications: Optional[VillaSpecifications] = None


class CommercialSpecifications(CamelModel):
    flooring: Optional[str] = None
    hvac: Optional[str] = None
    electrical: Optional[str] = None
    fire_safety: Optional[str] = None
    telecom: Optional[str] = None


class CommercialDetails(CamelModel):
    property_usage: Annotated[Optional[Literal["office", "shop", "showroom", "coworking"]], BlankIsNone] = None
    carpet_area: Optional[float] = None
    super_builtup_area: Optional[float] = None
    floor_number: Optional[int] = None
    parking_available: Optional[bool] = None
    ceiling_height: Optional[float] = None
    facing_road_width: Optional[float] = None
    specifications: Optional[CommercialSpecifications] = None


class PlotSpecifications(CamelModel):
    roads: Optional[str] = None
    drainage: Optional[str] = None
    electricity: Optional[str] = None
    water_lines: Optional[str] = None


class PlotDetails(CamelModel):
    plot_size: Optional[float] = None
    plot_dimensions: Optional[Dimensions] = None
    plot_type: Annotated[Optional[Literal["residential", "commercial", "industrial", "agricultural"]], BlankIsNone] = None
    soil_type: Optional[str] = None
    road_width: Optional[float] = None
    corner_plot: Optional[bool] = None
    approvals: list[str] = []
    layout_number: Optional[str] = None
    specifications: Optional[PlotSpecifications] = None


class FarmLandSpecifications(CamelModel):
    water_availability: Optional[str] = None
    electricity_connection: Optional[str] = None
    tree_count: Optional[str] = None
    plantation_age: Optional[str] = None
    crop_details: Optional[str] = None


class FarmLandDetails(CamelModel):
    total_area: Optional[float] = None
    land_dimensions: Optional[Dimensions] = None
    soil_type: Optional[str] = None
    water_source: Optional[str] = None
    irrigation: Optional[str] = None
    plantation_type: Optional[str] = None
    fencing: Optional[str] = None
    road_width: Optional[float] = None
    specifications: Optional[FarmLandSpecifications] = None


class NearbyLandmarks(CamelModel):
    hospitals: list[str] = []
    school_collage: list[str] = []
    it_hub: list[str] = []
    road_connectivity: list[str] = []


class LocationDetails(CamelModel):
    nearby_landmarks_url: Optional[str] = None
    nearby_landmarks: NearbyLandmarks = Field(default_factory=NearbyLandmarks)


class PropertyFields(CamelModel):
    """Everything a property carries besides the required basics."""
    subtitle: Optional[str] = None
    price_per_sqft: Optional[float] = None
    city: Optional[str] = None
    images: list[str] = []
    videos: list[Video] = []
    brochure: Optional[Brochure] = None
    facing: Optional[str] = None
    total_floors: Optional[int] = None
    furnished: Annotated[Optional[Furnished], BlankIsNone] = None
    possession: Optional[str] = None
    rera_number: Optional[str] = None
    developer_name: Optional[str] = None
    featured: bool = False
    highlights: list[str] = []
    amenities: list[int] = []
    supports_floor_plans: bool = False
    has_towers: bool = False
    towers: list[Tower] = []
    floor_plans: list[str] = []
    master_plan: Optional[str] = None
    location_map: Optional[str] = None
    apartment_details: Optional[ApartmentDetails] = None
    villa_details: Optional[VillaDetails] = None
    commercial_details: Optional[CommercialDetails] = None
    plot_details: Optional[PlotDetails] = None
    farm_land_details: Optional[FarmLandDetails] = None
    location_details: Optional[LocationDetails] = None
    gallery: list[str] = []
    construction_status: list[str] = []
    walkthrough_images: list[str] = []
    walkthrough_video: Optional[str] = None


class PropertyCreate(PropertyFields):
    title: str
    description: str
    price: float
    location: str
    area: float
    type: PropertyType
    status: PropertyStatus


class PropertyUpdate(PropertyFields):
    title: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None
    location: Optional[str] = None
    area: Optional[float] = None
    type: Optional[PropertyType] = None
    status: Optional[PropertyStatus] = None
    featured: Optional[bool] = None
    supports_floor_plans: Optional[bool] = None
    has_towers: Optional[bool] = None
