from decimal import Decimal

import pytest

from models.property import (
    PROPERTY_COLUMNS,
    Property,
    PropertyValidationError,
    validate_new_property,
)
from models.property_filter import PropertyFilter, parse_city_filter
from models.user import User


# PropertyFilter

def test_parse_city_filter_drops_first_character():
    assert parse_city_filter("#Vancouver") == "Vancouver"
    assert parse_city_filter("  #Van  ") == "Van"


@pytest.mark.parametrize("raw", [None, "", "#", "  "])
def test_parse_city_filter_returns_none_when_nothing_left(raw):
    assert parse_city_filter(raw) is None


def test_from_dict_coerces_numeric_strings():
    criteria = PropertyFilter.from_dict({
        "owner_id": "3",
        "minimum_price_per_night": "50",
        "maximum_price_per_night": "99.5",
        "minimum_rating": "",
    })
    assert criteria.owner_id == 3
    assert criteria.minimum_price_per_night == 50
    assert criteria.maximum_price_per_night == 99.5
    assert criteria.minimum_rating is None


def test_from_dict_ignores_unknown_keys():
    assert PropertyFilter.from_dict({"colour": "blue"}) == PropertyFilter()


def test_from_dict_rejects_non_numeric_price():
    with pytest.raises(ValueError):
        PropertyFilter.from_dict({"minimum_price_per_night": "cheap"})


# User

def test_user_email_is_normalized():
    user = User(name="Devin", email="  Devin@Example.COM ", password="hash")
    assert user.email == "devin@example.com"


def test_user_from_row():
    user = User.from_row({"id": 1, "name": "Eva", "email": "eva@example.com", "password": "hash"})
    assert user.id == 1
    assert str(user) == "#1 Eva <eva@example.com>"


# Property

def test_property_from_row_converts_rating_and_ignores_extra_columns(property_row):
    row = dict(property_row, average_rating=Decimal("4.25"), reservation_id=99)
    prop = Property.from_row(row)

    assert prop.id == 7
    assert prop.average_rating == 4.25
    assert isinstance(prop.average_rating, float)
    assert prop.price_per_night == 930.61


def test_validate_new_property_orders_columns(property_row):
    data = {k: v for k, v in reversed(list(property_row.items())) if k != "id"}
    record = validate_new_property(data)
    assert list(record) == [c for c in PROPERTY_COLUMNS if c in data]


def test_validate_new_property_allows_zero_counts(property_row):
    data = {k: v for k, v in property_row.items() if k != "id"}
    data["parking_spaces"] = 0
    assert validate_new_property(data)["parking_spaces"] == 0


@pytest.mark.parametrize("field", ["title", "city", "postal_code"])
def test_validate_new_property_rejects_empty_strings(property_row, field):
    data = {k: v for k, v in property_row.items() if k != "id"}
    data[field] = "  "
    with pytest.raises(PropertyValidationError, match=field):
        validate_new_property(data)


def test_validate_new_property_rejects_missing_fields(property_row):
    data = {k: v for k, v in property_row.items() if k not in ("id", "street")}
    with pytest.raises(PropertyValidationError, match="Missing property fields: street"):
        validate_new_property(data)


def test_validate_new_property_rejects_unknown_columns(property_row):
    data = {k: v for k, v in property_row.items() if k != "id"}
    data["owner_id; DROP TABLE users"] = 1
    with pytest.raises(PropertyValidationError, match="Unknown property fields"):
        validate_new_property(data)


@pytest.mark.parametrize("raw", ["inf", "-inf", "nan", "Infinity", float("inf"), float("nan")])
def test_from_dict_rejects_non_finite_numbers(raw):
    with pytest.raises(ValueError, match="finite"):
        PropertyFilter.from_dict({"minimum_price_per_night": raw})


def test_from_dict_rejects_fractional_owner_id():
    with pytest.raises(ValueError, match="owner_id must be a whole number"):
        PropertyFilter.from_dict({"owner_id": "3.7"})


@pytest.mark.parametrize("raw", ["3", " 3 ", 3, 3.0, "3.0"])
def test_from_dict_accepts_whole_owner_ids(raw):
    owner_id = PropertyFilter.from_dict({"ownerId": raw}).owner_id
    assert owner_id == 3
    assert isinstance(owner_id, int)
