import pytest

from vatsim_online.airports import AIRPORTS, lookup_airport
from vatsim_online.errors import UnknownAirport


def test_lookup_known_airport():
    assert lookup_airport("KSAN") == (32.7338, -117.1933)


def test_lookup_is_case_insensitive():
    assert lookup_airport(" klax ") == lookup_airport("KLAX")


@pytest.mark.parametrize("identifier", ["ZZZZ", "", None])
def test_unknown_airport(identifier):
    with pytest.raises(UnknownAirport) as exc:
        lookup_airport(identifier)
    assert exc.value.identifier == identifier


def test_airports_list_is_sorted_and_complete():
    assert AIRPORTS == sorted(AIRPORTS)
    for original in ("KSAN", "KLAX", "KSNA", "KLAS"):
        assert original in AIRPORTS
