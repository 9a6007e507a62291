import pytest

from models.domain import ProductType
from services.product_types import map_product_type


def test_unit_match():
    assert map_product_type("كرتونة", "") == ProductType.CARTON


def test_packaging_used_when_unit_unknown():
    assert map_product_type("", "دزينة") == ProductType.DOZEN


def test_unit_takes_precedence_over_packaging():
    assert map_product_type("علبة", "كرتونة") == ProductType.CAN


def test_unknown_pair():
    result = map_product_type("xyz", "abc")

    assert result == ProductType.UNKNOWN
    assert result.value == ""


def test_inputs_are_trimmed():
    assert map_product_type("  سطل ", None) == ProductType.BUCKET


def test_none_inputs():
    assert map_product_type(None, None) == ProductType.UNKNOWN


@pytest.mark.parametrize(
    "token,expected",
    [
        ("تنكة", ProductType.TANK),
        ("بكيت", ProductType.PACKET),
        ("كغم", ProductType.KILOGRAM),
        ("غلن", ProductType.GALLON),
        ("كيلو", ProductType.KILO),
        ("شوال", ProductType.SACK),
        ("كيس", ProductType.BAG),
        ("ربطة", ProductType.BUNDLE),
    ],
)
def test_known_tokens(token, expected):
    assert map_product_type(token, "") == expected
