"""In-memory model of a city's electricity meters: districts, streets and houses."""

from __future__ import annotations

import struct
from bisect import bisect_left
from dataclasses import dataclass, field
from enum import IntEnum


def _f32(value: float) -> float:
    """Round a value to single precision, the precision meter readings are kept in."""
    return struct.unpack("f", struct.pack("f", value))[0]


class ErrorCode(IntEnum):
    """Reasons an operation on the city is refused."""

    STREET_NOT_IN_DISTRICT = 11
    HOUSE_NOT_IN_STREET = 12
    STREET_EXISTS = 13
    HOUSE_EXISTS = 14
    DISTRICT_NOT_FOUND = 15
    NEGATIVE_DISTRICT_ID = 16
    NEGATIVE_STREET_ID = 17
    UNKNOWN_ACTION = 18
    UNKNOWN_UNIT = 19
    FILE_OPEN_FAILED = 20
    DISTRICT_EXISTS = 21
    NEGATIVE_HOUSE_ID = 22
    NEGATIVE_HOUSE_NUMBER = 23
    NEGATIVE_CONSUMPTION = 24


class CityError(Exception):
    """An operation on the city could not be carried out."""

    def __init__(self, code: ErrorCode, detail: str = "") -> None:
        self.code = ErrorCode(code)
        message = self.code.name.lower().replace("_", " ")
        super().__init__(f"{message}: {detail}" if detail else message)


@dataclass
class House:
    """A metered house on a street."""

    id: int
    number: int
    consumer: str
    consumption: float = 0.0


@dataclass
class Street:
    """A street holding its houses ordered by house number."""

    id: int
    name: str
    houses: list[House] = field(default_factory=list)

    def total(self) -> float:
        """Sum of the consumption of every house on the street."""
        result = 0.0
        for house in self.houses:
            result = _f32(result + house.consumption)
        return result

    def find(self, house_id: int) -> House | None:
        return next((h for h in self.houses if h.id == house_id), None)


@dataclass
class District:
    """A district holding its streets, most recently added first."""

    id: int
    name: str
    streets: list[Street] = field(default_factory=list)

    def total(self) -> float:
        """Sum of the consumption of every house in the district."""
        result = 0.0
        for street in self.streets:
            for house in street.houses:
                result = _f32(result + house.consumption)
        return result

    def find(self, street_id: int) -> Street | None:
        return next((s for s in self.streets if s.id == street_id), None)


def _check_ids(district_id: int, street_id: int | None = None,
               house_id: int | None = None) -> None:
    if district_id < 0:
        raise CityError(ErrorCode.NEGATIVE_DISTRICT_ID, f"district {district_id}")
    if street_id is not None and street_id < 0:
        raise CityError(ErrorCode.NEGATIVE_STREET_ID, f"street {street_id}")
    if house_id is not None and house_id < 0:
        raise CityError(ErrorCode.NEGATIVE_HOUSE_ID, f"house {house_id}")


class City:
    """A city made of districts, each of streets, each of houses."""

    def __init__(self) -> None:
        self.districts: list[District] = []

    def _district(self, district_id: int) -> District:
        district = next((d for d in self.districts if d.id == district_id), None)
        if district is None:
            raise CityError(ErrorCode.DISTRICT_NOT_FOUND, f"district {district_id}")
        return district

    def _street(self, district_id: int, street_id: int) -> Street:
        street = self._district(district_id).find(street_id)
        if street is None:
            raise CityError(ErrorCode.STREET_NOT_IN_DISTRICT, f"street {street_id}")
        return street

    def _house(self, district_id: int, street_id: int, house_id: int) -> House:
        house = self._street(district_id, street_id).find(house_id)
        if house is None:
            raise CityError(ErrorCode.HOUSE_NOT_IN_STREET, f"house {house_id}")
        return house

    def add_district(self, district_id: int, name: str) -> District:
        """Add a district; newer districts come first."""
        _check_ids(district_id)
        if any(d.id == district_id for d in self.districts):
            raise CityError(ErrorCode.DISTRICT_EXISTS, f"district {district_id}")
        district = District(district_id, name)
        self.districts.insert(0, district)
        return district

    def add_street(self, district_id: int, street_id: int, name: str) -> Street:
        """Add a street to a district; newer streets come first."""
        _check_ids(district_id, street_id)
        district = self._district(district_id)
        if district.find(street_id) is not None:
            raise CityError(ErrorCode.STREET_EXISTS, f"street {street_id}")
        street = Street(street_id, name)
        district.streets.insert(0, street)
        return street

    def add_house(self, district_id: int, street_id: int, house_id: int,
                  number: int, consumer: str) -> House:
        """Add a house, keeping the street's houses ordered by number."""
        _check_ids(district_id, street_id, house_id)
        if number < 0:
            raise CityError(ErrorCode.NEGATIVE_HOUSE_NUMBER, f"number {number}")
        street = self._street(district_id, street_id)
        if street.find(house_id) is not None:
            raise CityError(ErrorCode.HOUSE_EXISTS, f"house {house_id}")
        house = House(house_id, number, consumer)
        position = bisect_left(street.houses, number, key=lambda h: h.number)
        street.houses.insert(position, house)
        return house

    def consume(self, district_id: int, street_id: int, house_id: int,
                amount: float) -> float:
        """Add a reading to a house and return its new consumption."""
        _check_ids(district_id, street_id, house_id)
        amount = _f32(amount)
        if amount < 0.0:
            raise CityError(ErrorCode.NEGATIVE_CONSUMPTION, f"amount {amount:.2f}")
        house = self._house(district_id, street_id, house_id)
        house.consumption = _f32(house.consumption + amount)
        return house.consumption

    def measure_house(self, district_id: int, street_id: int, house_id: int) -> float:
        _check_ids(district_id, street_id, house_id)
        return self._house(district_id, street_id, house_id).consumption

    def measure_street(self, district_id: int, street_id: int) -> float:
        _check_ids(district_id, street_id)
        return self._street(district_id, street_id).total()

    def measure_district(self, district_id: int) -> float:
        _check_ids(district_id)
        return self._district(district_id).total()

    def measure_city(self) -> float:
        result = 0.0
        for district in self.districts:
            for street in district.streets:
                for house in street.houses:
                    result = _f32(result + house.consumption)
        return result

    def remove_house(self, district_id: int, street_id: int, house_id: int) -> House:
        """Remove a house from its street and return it."""
        _check_ids(district_id, street_id, house_id)
        street = self._street(district_id, street_id)
        house = street.find(house_id)
        if house is None:
            raise CityError(ErrorCode.HOUSE_NOT_IN_STREET, f"house {house_id}")
        street.houses.remove(house)
        return house

    def remove_street(self, district_id: int, street_id: int) -> Street:
        """Remove a street and all its houses, returning the street."""
        _check_ids(district_id, street_id)
        district = self._district(district_id)
        street = district.find(street_id)
        if street is None:
            raise CityError(ErrorCode.STREET_NOT_IN_DISTRICT, f"street {street_id}")
        district.streets.remove(street)
        street.houses.clear()
        return street

    def clear(self) -> None:
        """Remove every district, street and house."""
        for district in self.districts:
            for street in district.streets:
                street.houses.clear()
            district.streets.clear()
        self.districts.clear()