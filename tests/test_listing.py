from datetime import datetime

from app.services.listing import (
    construction_state,
    filter_properties,
    price_label,
    sort_properties,
    to_display,
)

TODAY = datetime(2026, 6, 1)


def _apartment(**overrides):
    p = {
        "id": 1,
        "title": "Skyline Residency",
        "location": "Gachibowli, Hyderabad",
        "price": 8500000,
        "area": 1700,
        "type": "apartment",
        "status": "for-sale",
        "images": ["/skyline.jpg"],
        "featured": True,
        "possession": "Ready to move",
        "facing": "East",
        "apartmentDetails": {"bhkType": "3bhk", "bedrooms": 3, "bathrooms": 2},
    }
    p.update(overrides)
    return p


def _villa(**overrides):
    p = {
        "id": 2,
        "title": "Garden Villa",
        "location": "Kokapet, Hyderabad",
        "price": 45000,
        "area": 2400,
        "type": "villa",
        "status": "for-rent",
        "images": [],
        "featured": False,
        "possession": "Dec 2030",
        "villaDetails": {"bedrooms": 4, "bathrooms": 4},
    }
    p.update(overrides)
    return p


def _plot(**overrides):
    p = {"id": 3, "title": "Corner Plot", "location": "Shadnagar", "price": 0, "area": 200,
         "type": "open-plot", "status": "for-sale", "possession": "2020"}
    p.update(overrides)
    return p


def _cards(*props):
    return [to_display(p) for p in props]


def test_apartment_card():
    card = to_display(_apartment())
    assert card["bhk"] == "3 BHK"
    assert card["beds"] == "3 BHK"
    assert card["bathrooms"] == "2 Bath"
    assert card["image"] == "/skyline.jpg"
    assert card["propertyType"] == "apartments"
    assert card["rentBuy"] == "buy"
    assert card["sqft"] == "1700 sq ft"
    assert card["avgPrice"] == "₹5000/sq ft"
    assert card["priceValue"] == 8500000


def test_villa_card_uses_placeholder_and_rent_label():
    card = to_display(_villa())
    assert card["image"] == "/placeholder.svg"
    assert card["propertyType"] == "residential"
    assert card["rentBuy"] == "rent"
    assert card["price"] == "₹45,000/month"
    assert card["bhk"] is None


def test_plot_card_has_no_rooms():
    card = to_display(_plot())
    assert card["beds"] is None and card["bathrooms"] is None
    assert card["avgPrice"] == "₹0/sq ft"


def test_price_label_for_sale():
    assert price_label(8500000, "for-sale") == "₹85.00 Cr"


def test_residential_category_includes_apartments():
    cards = _cards(_apartment(), _villa(), _plot())
    assert [c["id"] for c in filter_properties(cards, category="residential")] == [1, 2]
    assert [c["id"] for c in filter_properties(cards, category="open-plot")] == [3]


def test_location_and_name_are_case_insensitive_substrings():
    cards = _cards(_apartment(), _villa())
    assert [c["id"] for c in filter_properties(cards, location="KOKAPET")] == [2]
    assert [c["id"] for c in filter_properties(cards, name="skyline")] == [1]


def test_rent_buy_any_keeps_everything():
    cards = _cards(_apartment(), _villa())
    assert len(filter_properties(cards, rent_buy="any")) == 2
    assert [c["id"] for c in filter_properties(cards, rent_buy="rent")] == [2]


def test_property_type_all_keeps_everything():
    cards = _cards(_apartment(), _villa())
    assert len(filter_properties(cards, property_type="all")) == 2
    assert [c["id"] for c in filter_properties(cards, property_type="apartments")] == [1]


def test_bhk_facing_and_verified():
    cards = _cards(_apartment(), _villa())
    assert [c["id"] for c in filter_properties(cards, bhk=["3bhk", "2bhk"])] == [1]
    assert [c["id"] for c in filter_properties(cards, facing=["East"])] == [1]
    assert [c["id"] for c in filter_properties(cards, verified=True)] == [1]


def test_construction_state_from_possession_text():
    assert construction_state("Ready to move", TODAY) == (True, False)
    assert construction_state("Dec 2030", TODAY) == (False, True)
    assert construction_state("2020", TODAY) == (True, False)
    assert construction_state("Under construction", TODAY) == (False, True)
    assert construction_state(None, TODAY) == (False, False)


def test_construction_status_filter():
    cards = _cards(_apartment(), _villa(), _plot())
    ready = filter_properties(cards, construction_status=["Ready to move"], today=TODAY)
    under = filter_properties(cards, construction_status=["Under Construction"], today=TODAY)
    assert [c["id"] for c in ready] == [1, 3]
    assert [c["id"] for c in under] == [2]


def test_no_budget_keeps_unpriced_only():
    cards = _cards(_apartment(), _plot())
    assert [c["id"] for c in filter_properties(cards, budget="no-budget")] == [3]


def test_sorting_by_price():
    cards = _cards(_apartment(), _villa(), _plot())
    assert [c["id"] for c in sort_properties(cards, "price-low-high")] == [3, 2, 1]
    assert [c["id"] for c in sort_properties(cards, "price-high-low")] == [1, 2, 3]
    assert [c["id"] for c in sort_properties(cards, None)] == [1, 2, 3]


def test_possession_month_and_day_are_respected():
    assert construction_state("Dec 2026", TODAY) == (False, True)
    assert construction_state("2026-09-30", TODAY) == (False, True)
    assert construction_state("Jan 2026", TODAY) == (True, False)
    assert construction_state("Possession by Q4 2027", TODAY) == (False, True)


def test_whole_number_area_has_no_decimal():
    assert to_display(_apartment(area=1700.0))["sqft"] == "1700 sq ft"
    assert to_display(_apartment(area=1250.5))["sqft"] == "1250.5 sq ft"
