"""
Server side of the multi-step property form.

Steps: 1 Basic Info, 2 Property Details (shape depends on `type`),
3 Amenities, 4 Images. Data is the camelCase form payload.
"""
import copy

FORM_STEPS = ["Basic Info", "Property Details", "Amenities", "Images"]

DETAILS_KEYS = {
    "apartment": "apartmentDetails",
    "villa": "villaDetails",
    "commercial": "commercialDetails",
    "open-plot": "plotDetails",
    "farm-land": "farmLandDetails",
}

# field -> message, checked against the type's details object
REQUIRED_DETAILS = {
    "villa": [
        ("villaType", "Villa type required"),
        ("plotArea", "Plot area required"),
        ("builtUpArea", "Built-up area required"),
        ("bedrooms", "Bedrooms required"),
        ("bathrooms", "Bathrooms required"),
    ],
    "apartment": [
        ("bhkType", "BHK type required"),
        ("bedrooms", "Bedrooms required"),
    ],
    "open-plot": [
        ("plotSize", "Plot size required"),
        ("plotType", "Plot type required"),
    ],
    "commercial": [
        ("propertyUsage", "Property usage required"),
        ("carpetArea", "Carpet area required"),
    ],
    "farm-land": [
        ("totalArea", "Total area required"),
    ],
}

LIST_FIELDS = (
    "images", "videos", "gallery", "constructionStatus",
    "walkthroughImages", "towers", "floorPlans", "highlights", "amenities",
)

VILLA_DEFAULTS = {
    "villaType": "independent",
    "plotArea": 0,
    "builtUpArea": 0,
    "numberOfFloors": 0,
    "gardenArea": 0,
    "parkingSpaces": 0,
    "gatedCommunity": False,
    "balconies": 0,
    "bedrooms": 0,
    "bathrooms": 0,
    "specifications": {
        "structure": "",
        "doors": "",
        "windows": "",
        "kitchen": "",
        "bathroom": "",
        "staircase": "",
        "electrical": "",
    },
}


def details_key(property_type: str | None) -> str | None:
    return DETAILS_KEYS.get(property_type or "")


def _number(value) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def _validate_basic_info(data: dict) -> dict[str, str]:
    errors = {}
    if not str(data.get("title") or "").strip():
        errors["title"] = "Title is required"
    if not str(data.get("location") or "").strip():
        errors["location"] = "Location is required"
    if _number(data.get("price")) <= 0:
        errors["price"] = "Valid price is required"
    if _number(data.get("area")) <= 0:
        errors["area"] = "Valid area is required"
    return errors


def _validate_details(data: dict) -> dict[str, str]:
    ptype = data.get("type")
    details = data.get(details_key(ptype) or "") or {}
    errors = {}
    for field, message in REQUIRED_DETAILS.get(ptype, []):
        # 0, "" and missing all count as not filled in
        if not details.get(field):
            errors[field] = message
    return errors


def _validate_amenities(data: dict) -> dict[str, str]:
    if not data.get("amenities"):
        return {"amenities": "Please select at least one amenity"}
    return {}


def _validate_images(data: dict) -> dict[str, str]:
    if not data.get("images"):
        return {"images": "Upload at least one image"}
    return {}


_STEP_VALIDATORS = {
    1: _validate_basic_info,
    2: _validate_details,
    3: _validate_amenities,
    4: _validate_images,
}


def validate_step(step: int, data: dict) -> dict[str, str]:
    """Errors for one form step, empty when the step may be left."""
    try:
        validator = _STEP_VALIDATORS[step]
    except KeyError:
        raise ValueError(f"Unknown form step: {step}")
    return validator(data)


def validate_all(data: dict, steps=(1, 2, 3, 4)) -> dict[str, str]:
    errors = {}
    for step in steps:
        errors.update(validate_step(step, data))
    return errors


def default_details(property_type: str) -> dict | None:
    """Create-mode details object for a freshly picked type."""
    if property_type == "villa":
        return copy.deepcopy(VILLA_DEFAULTS)
    return None


def default_form(property_type: str) -> dict:
    form = {
        "title": "",
        "subtitle": "",
        "description": "",
        "price": 0,
        "pricePerSqft": 0,
        "location": "",
        "city": "",
        "area": 0,
        "type": property_type,
        "status": "for-sale",
        "facing": "",
        "totalFloors": 0,
        "furnished": "unfurnished",
        "possession": "",
        "reraNumber": "",
        "developerName": "",
        "featured": False,
        "supportsFloorPlans": False,
        "hasTowers": False,
        "locationMap": "",
        "masterPlan": "",
        "brochure": None,
        "locationDetails": {
            "nearbyLandmarksUrl": "",
            "nearbyLandmarks": {"hospitals": [], "schoolCollage": [], "itHub": [], "roadConnectivity": []},
        },
        "walkthroughVideo": "",
    }
    for field in LIST_FIELDS:
        form[field] = []
    for key in DETAILS_KEYS.values():
        form[key] = None
    key = details_key(property_type)
    if key:
        form[key] = default_details(property_type)
    return form


def merge_for_edit(existing: dict, patch: dict) -> dict:
    """Overlay `patch` on `existing`; detail objects merge key-wise, lists never end up None."""
    merged = {**existing, **patch}
    for key in DETAILS_KEYS.values():
        if key in patch and patch[key] is not None:
            merged[key] = {**(existing.get(key) or {}), **patch[key]}
    for field in LIST_FIELDS:
        if merged.get(field) is None:
            merged[field] = []
    return merged


def compute_price_per_sqft(price, area) -> int:
    price, area = _number(price), _number(area)
    if price and area:
        return round(price / area)
    return 0
