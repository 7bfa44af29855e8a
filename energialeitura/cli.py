"""Command line entry point: runs a command script against the default city."""

from __future__ import annotations

import argparse

from energialeitura.city import City, CityError, ErrorCode
from energialeitura.protocol import process_file

_BANNER = (
    "\t\t\t\t>>> Bem Vindo ao Programa <<<\n\n"
    "\t\t>>> Administracao de Leitura de Consumo de Energia Eletrica <<<\n"
)
_PROMPT = "Para executar, digite o nome do arquivo de entrada.txt:"
_DEFAULT_OUTPUT = "protocolo_saida.txt"


def default_city() -> City:
    """Return a city holding the districts every run starts with."""
    city = City()
    for district_id, name in ((1, "Bairro Um"), (2, "Bairro Dois"),
                              (13, "Bairro Treze"), (17, "Bairro Dezessete")):
        city.add_district(district_id, name)
    return city


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="energialeitura",
        description="Process electricity meter commands and write a protocol.")
    parser.add_argument("input", nargs="?", help="command script to read")
    parser.add_argument("-o", "--output", default=_DEFAULT_OUTPUT,
                        help="protocol file to write")
    args = parser.parse_args(argv)

    print(_BANNER)
    input_path = args.input
    if input_path is None:
        print(_PROMPT)
        try:
            input_path = input().lstrip()
        except EOFError:
            input_path = ""

    city = default_city()
    try:
        process_file(city, input_path, args.output)
    except CityError as exc:
        if exc.code is not ErrorCode.FILE_OPEN_FAILED:
            raise
        print("Erro na abertura do arquivo.")
        return 0
    finally:
        city.clear()
    print("Protocolo de saída gerado com sucesso.")
    return 0