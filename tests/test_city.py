import pytest

from energialeitura.city import City, CityError, ErrorCode


@pytest.fixture
def city():
    c = City()
    c.add_district(1, "Bairro Um")
    c.add_district(2, "Bairro Dois")
    c.add_street(1, 10, "Rua A")
    c.add_street(1, 11, "Rua B")
    c.add_house(1, 10, 100, 5, "Ana")
    c.add_house(1, 10, 101, 3, "Beto")
    c.add_house(1, 11, 102, 7, "Caio")
    return c


def test_error_codes_match_protocol_numbers(city):
    with pytest.raises(CityError) as info:
        city.measure_street(1, 99)
    assert int(info.value.code) == 11
    with pytest.raises(CityError) as info:
        city.measure_district(9)
    assert int(info.value.code) == 15
    with pytest.raises(CityError) as info:
        city.consume(1, 10, 100, -1.0)
    assert int(info.value.code) == 24


def test_districts_newest_first(city):
    assert [d.id for d in city.districts] == [2, 1]


def test_streets_newest_first(city):
    district = city.districts[1]
    assert [s.id for s in district.streets] == [11, 10]


def test_houses_sorted_by_number(city):
    city.add_house(1, 10, 103, 4, "Duda")
    street = city.districts[1].find(10)
    assert [h.number for h in street.houses] == [3, 4, 5]


def test_equal_numbers_new_house_goes_first(city):
    city.add_house(1, 10, 104, 5, "Edu")
    street = city.districts[1].find(10)
    assert [h.id for h in street.houses] == [101, 104, 100]


def test_duplicate_district(city):
    with pytest.raises(CityError) as info:
        city.add_district(1, "Outro")
    assert info.value.code is ErrorCode.DISTRICT_EXISTS


def test_duplicate_street(city):
    with pytest.raises(CityError) as info:
        city.add_street(1, 10, "Outra")
    assert info.value.code is ErrorCode.STREET_EXISTS


def test_duplicate_house(city):
    with pytest.raises(CityError) as info:
        city.add_house(1, 10, 100, 9, "Outro")
    assert info.value.code is ErrorCode.HOUSE_EXISTS


@pytest.mark.parametrize(
    "args, code",
    [
        ((-1, 10, 100, 5, "x"), ErrorCode.NEGATIVE_DISTRICT_ID),
        ((1, -1, 100, 5, "x"), ErrorCode.NEGATIVE_STREET_ID),
        ((1, 10, -1, 5, "x"), ErrorCode.NEGATIVE_HOUSE_ID),
        ((1, 10, 200, -1, "x"), ErrorCode.NEGATIVE_HOUSE_NUMBER),
        ((9, 10, 200, 1, "x"), ErrorCode.DISTRICT_NOT_FOUND),
        ((2, 10, 200, 1, "x"), ErrorCode.STREET_NOT_IN_DISTRICT),
    ],
)
def test_add_house_errors(city, args, code):
    with pytest.raises(CityError) as info:
        city.add_house(*args)
    assert info.value.code is code


def test_negative_checks_precede_lookup():
    with pytest.raises(CityError) as info:
        City().add_street(-3, 1, "x")
    assert info.value.code is ErrorCode.NEGATIVE_DISTRICT_ID


def test_consume_accumulates(city):
    city.consume(1, 10, 100, 1.5)
    total = city.consume(1, 10, 100, 2.5)
    assert total == city.measure_house(1, 10, 100)
    assert total == pytest.approx(1.5 + 2.5)


def test_consume_errors(city):
    with pytest.raises(CityError) as info:
        city.consume(1, 10, 100, -0.5)
    assert info.value.code is ErrorCode.NEGATIVE_CONSUMPTION
    with pytest.raises(CityError) as info:
        city.consume(1, 10, 999, 1.0)
    assert info.value.code is ErrorCode.HOUSE_NOT_IN_STREET


def test_new_house_measures_zero(city):
    assert city.measure_house(1, 11, 102) == 0.0


def test_totals_are_consistent(city):
    city.consume(1, 10, 100, 1.25)
    city.consume(1, 10, 101, 0.75)
    city.consume(1, 11, 102, 3.5)
    street_sum = city.measure_street(1, 10) + city.measure_street(1, 11)
    assert city.measure_district(1) == pytest.approx(street_sum)
    assert city.measure_city() == pytest.approx(
        city.measure_district(1) + city.measure_district(2)
    )
    assert city.measure_district(2) == 0.0


def test_measure_errors(city):
    with pytest.raises(CityError) as info:
        city.measure_street(1, 99)
    assert info.value.code is ErrorCode.STREET_NOT_IN_DISTRICT
    with pytest.raises(CityError) as info:
        city.measure_district(7)
    assert info.value.code is ErrorCode.DISTRICT_NOT_FOUND
    with pytest.raises(CityError) as info:
        city.measure_house(1, -2, 0)
    assert info.value.code is ErrorCode.NEGATIVE_STREET_ID


def test_remove_house(city):
    city.consume(1, 10, 100, 2.0)
    removed = city.remove_house(1, 10, 100)
    assert removed.id == 100
    assert city.measure_street(1, 10) == 0.0
    with pytest.raises(CityError) as info:
        city.remove_house(1, 10, 100)
    assert info.value.code is ErrorCode.HOUSE_NOT_IN_STREET


def test_remove_street(city):
    city.consume(1, 11, 102, 4.0)
    removed = city.remove_street(1, 11)
    assert removed.id == 11
    assert city.measure_district(1) == 0.0
    with pytest.raises(CityError) as info:
        city.measure_street(1, 11)
    assert info.value.code is ErrorCode.STREET_NOT_IN_DISTRICT


def test_remove_street_missing_district(city):
    with pytest.raises(CityError) as info:
        city.remove_street(5, 10)
    assert info.value.code is ErrorCode.DISTRICT_NOT_FOUND


def test_clear(city):
    city.consume(1, 10, 100, 1.0)
    city.clear()
    assert city.districts == []
    assert city.measure_city() == 0.0
    with pytest.raises(CityError) as info:
        city.measure_district(1)
    assert info.value.code is ErrorCode.DISTRICT_NOT_FOUND


def test_city_error_code_from_int():
    error = CityError(15)
    assert error.code is ErrorCode.DISTRICT_NOT_FOUND
    assert "district not found" in str(error)