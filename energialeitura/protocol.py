"""Reads command scripts for a city and writes the resulting protocol lines."""

from __future__ import annotations

import math
import re
import struct
from pathlib import Path
from typing import Callable

from energialeitura.city import City, CityError, ErrorCode

_SPACE = re.compile(r"[ \t\n\v\f\r]*")
_WORD = re.compile(r"[^ \t\n\v\f\r]+")
_INTEGER = re.compile(r"[+-]?[0-9]+")
_REAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_LINE = re.compile(r"[^\n]+")

_UNKNOWN_ACTION = "ERRO: Acao inexistente."
_UNKNOWN_UNIT = "ERRO: Unidade inexistente."

_ERRORS = {
    ErrorCode.STREET_NOT_IN_DISTRICT:
        "ERRO: A rua informada não pertence ao bairro. "
        "Bairro id: {district} Rua id: {street}",
    ErrorCode.HOUSE_NOT_IN_STREET:
        "ERRO: A casa informada não pertence à rua. "
        "Bairro id: {district} Rua id: {street} Casa id: {house}",
    ErrorCode.STREET_EXISTS:
        "ERRO: Ja existe uma rua com este id vinculada ao bairro. "
        "Bairro id: {district} Rua id: {street}",
    ErrorCode.HOUSE_EXISTS:
        "ERRO: Ja existe uma casa com este id vinculada à rua. "
        "Bairro id: {district} Rua id: {street} Casa id: {house}",
    ErrorCode.DISTRICT_NOT_FOUND:
        "ERRO: Bairro inexistente. Bairro id: {district}",
    ErrorCode.NEGATIVE_DISTRICT_ID:
        "ERRO: O id do bairro não pode ser negativo. Bairro id: {district}",
    ErrorCode.NEGATIVE_STREET_ID:
        "ERRO: O id da rua não pode ser negativo. "
        "Bairro id: {district} Rua id: {street}",
    ErrorCode.DISTRICT_EXISTS:
        "ERRO: Ja existe um bairro com este id vinculado à cidade. "
        "Bairro id: {district}",
    ErrorCode.NEGATIVE_HOUSE_ID:
        "ERRO: O id da casa não pode ser negativo. "
        "Bairro id: {district} Rua id: {street} Casa id: {house}",
    ErrorCode.NEGATIVE_HOUSE_NUMBER:
        "ERRO: O numero da casa não pode ser negativo. "
        "Bairro id: {district} Rua id: {street} Casa id: {house} Nr Casa: {number}",
    ErrorCode.NEGATIVE_CONSUMPTION:
        "ERRO: O consumo não pode ser negativo. "
        "Bairro id: {district} Rua id: {street} Casa id: {house} Consumo: {amount:.2f}",
}


def _f32(value: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


class _Scanner:
    """Pulls whitespace-separated fields out of a command script."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def _take(self, pattern: re.Pattern[str]) -> str | None:
        self._pos = _SPACE.match(self._text, self._pos).end()
        match = pattern.match(self._text, self._pos)
        if match is None:
            return None
        self._pos = match.end()
        return match.group()

    def word(self) -> str | None:
        return self._take(_WORD)

    def integer(self) -> int | None:
        token = self._take(_INTEGER)
        return None if token is None else int(token)

    def real(self) -> float | None:
        token = self._take(_REAL)
        return None if token is None else _f32(float(token))

    def rest_of_line(self) -> str | None:
        return self._take(_LINE)


class _Session:
    """Runs one script against a city, remembering the last values read."""

    def __init__(self, city: City, text: str) -> None:
        self.city = city
        self.scanner = _Scanner(text)
        self.fields: dict[str, object] = {
            "district": 0, "street": 0, "house": 0, "number": 0,
            "amount": 0.0, "name": "", "consumer": "", "action": "",
        }
        self._readers: dict[str, Callable[[], object]] = {
            "district": self.scanner.integer,
            "street": self.scanner.integer,
            "house": self.scanner.integer,
            "number": self.scanner.integer,
            "amount": self.scanner.real,
            "name": self.scanner.rest_of_line,
            "consumer": self.scanner.rest_of_line,
        }

    def read(self, *names: str) -> None:
        """Read fields in order, stopping at the first that does not parse."""
        for name in names:
            value = self._readers[name]()
            if value is None:
                break
            self.fields[name] = value

    def skip_line(self) -> None:
        rest = self.scanner.rest_of_line()
        if rest is not None:
            self.fields["action"] = rest

    def street_add(self):
        self.read("district", "street", "name")
        f = self.fields
        return self.city.add_street(f["district"], f["street"], f["name"])

    def street_remove(self):
        self.read("district", "street")
        return self.city.remove_street(self.fields["district"], self.fields["street"])

    def street_measure(self):
        self.read("district", "street")
        return self.city.measure_street(self.fields["district"], self.fields["street"])

    def house_add(self):
        self.read("district", "street", "house", "number", "consumer")
        f = self.fields
        return self.city.add_house(f["district"], f["street"], f["house"],
                                   f["number"], f["consumer"])

    def house_remove(self):
        self.read("district", "street", "house")
        f = self.fields
        return self.city.remove_house(f["district"], f["street"], f["house"])

    def house_consume(self):
        self.read("district", "street", "house", "amount")
        f = self.fields
        return self.city.consume(f["district"], f["street"], f["house"], f["amount"])

    def house_measure(self):
        self.read("district", "street", "house")
        f = self.fields
        return self.city.measure_house(f["district"], f["street"], f["house"])

    def district_add(self):
        self.read("district", "name")
        return self.city.add_district(self.fields["district"], self.fields["name"])

    def district_measure(self):
        self.read("district")
        return self.city.measure_district(self.fields["district"])

    def city_measure(self):
        return self.city.measure_city()

    def run(self) -> list[str]:
        lines: list[str] = []
        while (unit := self.scanner.word()) is not None:
            if unit not in _UNITS:
                lines.append(_UNKNOWN_UNIT)
                self.skip_line()
                continue
            action = self.scanner.word()
            if action is not None:
                self.fields["action"] = action
            command = _COMMANDS.get((unit, self.fields["action"]))
            if command is None:
                lines.append(_UNKNOWN_ACTION)
                self.skip_line()
                continue
            handler, template = command
            try:
                value = handler(self)
            except CityError as exc:
                lines.append(_ERRORS[exc.code].format(**self.fields))
            else:
                lines.append(template.format(value=value, **self.fields))
        return lines


_COMMANDS: dict[tuple[str, str], tuple[Callable[[_Session], object], str]] = {
    ("rua", "incluir"): (
        _Session.street_add,
        "Rua incluida com sucesso. Bairro id: {district} Rua id: {street} "
        "Rua nome: {name}"),
    ("rua", "eliminar"): (
        _Session.street_remove,
        "Rua removida com sucesso. Bairro id: {district} Rua id: {street}"),
    ("rua", "medir"): (
        _Session.street_measure,
        "Medicao da rua realizada com sucesso. Bairro id: {district} "
        "Rua id: {street} consumo: {value:.2f}"),
    ("casa", "incluir"): (
        _Session.house_add,
        "Casa incluida com sucesso. Bairro id: {district} Rua id: {street} "
        "Casa id: {house} Casa nr: {number} Consumidor nome: {consumer}"),
    ("casa", "eliminar"): (
        _Session.house_remove,
        "Casa removida com sucesso. Bairro id: {district} Rua id: {street} "
        "Casa id: {house}"),
    ("casa", "consumir"): (
        _Session.house_consume,
        "Consumo registrado com sucesso. Bairro id: {district} Rua id: {street} "
        "Casa id: {house} Consumo: {amount:.2f}"),
    ("casa", "medir"): (
        _Session.house_measure,
        "Medição da casa realizada com sucesso. Bairro id: {district} "
        "Rua id: {street} Casa id: {house} consumo: {value:.2f}"),
    ("bairro", "medir"): (
        _Session.district_measure,
        "Medição do bairro realizada com sucesso. Bairro id: {district} "
        "consumo: {value:.2f}"),
    ("bairro", "incluir"): (
        _Session.district_add,
        "Bairro incluido com sucesso. Bairro id: {district}"),
    ("cidade", "medir"): (
        _Session.city_measure,
        "Medição da Cidade realizada com sucesso. Consumo: {value:.2f}"),
}

_UNITS = frozenset(unit for unit, _ in _COMMANDS)


def run_commands(city: City, text: str) -> list[str]:
    """Apply every command in the script to the city and return the protocol lines."""
    return _Session(city, text).run()


def process_file(city: City, input_path, output_path) -> list[str]:
    """Run the script in input_path and write its protocol to output_path.

    The output file is created before the input is opened, so it is left
    empty when the input cannot be read.
    """
    with open(output_path, "w", encoding="utf-8", errors="surrogateescape") as out:
        try:
            text = Path(input_path).read_text(encoding="utf-8",
                                              errors="surrogateescape")
        except OSError as exc:
            raise CityError(ErrorCode.FILE_OPEN_FAILED, str(input_path)) from exc
        lines = run_commands(city, text)
        out.writelines(f"{line}\n" for line in lines)
    return lines