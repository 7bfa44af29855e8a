# energialeitura

Keeps a record of electricity consumption for a city organised into
districts (*bairros*), streets (*ruas*) and houses (*casas*). It reads a
command script, applies each command to the city, and writes one protocol
line per command, by default to `protocolo_saida.txt`.

## Installation

```
pip install .
```

## Command line

```
energialeitura [input] [-o OUTPUT]
```

- `input`: the command script to read. If it is left out, the program
  asks for the file name on standard input.
- `-o`, `--output`: the protocol file to write (default
  `protocolo_saida.txt`, in the current directory).

The program prints a welcome banner first. Each run starts with a city
holding four districts: 1 "Bairro Um", 2 "Bairro Dois", 13 "Bairro Treze"
and 17 "Bairro Dezessete". On success it prints
`Protocolo de saída gerado com sucesso.`. If the input cannot be read it
prints `Erro na abertura do arquivo.` and leaves the output file empty. The
exit status is 0 in both cases.

### Input format

Each command starts with a unit and an action:

```
bairro incluir <district> <name>
bairro medir <district>
rua incluir <district> <street> <name>
rua eliminar <district> <street>
rua medir <district> <street>
casa incluir <district> <street> <house> <number> <consumer name>
casa eliminar <district> <street> <house>
casa consumir <district> <street> <house> <amount>
casa medir <district> <street> <house>
cidade medir
```

Names run to the end of the line. A field that is missing or does not
parse keeps the value last read for that field.

An unknown unit writes `ERRO: Unidade inexistente.`, and an unknown action
writes `ERRO: Acao inexistente.`. In both cases the rest of the line is
skipped. Each other command writes either a success line or an `ERRO:`
line that names the ids involved. Measurements are printed with two
decimals.

Ids, house numbers and amounts cannot be negative. Streets and districts
added later come first. The houses in a street are kept in order of house
number. Readings are kept in single precision.

## Library use

```python
from energialeitura.city import City, CityError, ErrorCode

city = City()
city.add_district(1, "Bairro Um")
city.add_street(1, 10, "Rua das Flores")
city.add_house(1, 10, 100, 42, "Maria")
city.consume(1, 10, 100, 12.5)      # returns the house's new consumption
print(city.measure_street(1, 10))   # 12.5
print(city.measure_city())          # 12.5

try:
    city.measure_district(99)
except CityError as exc:
    assert exc.code is ErrorCode.DISTRICT_NOT_FOUND
```

`City` also provides:

- `measure_house`
- `measure_district`
- `remove_house`
- `remove_street`, which drops the street's houses too
- `clear`

Every refused operation raises `CityError`. Its `code` attribute holds an
`ErrorCode`. The `House`, `Street` and `District` dataclasses hold the
records. `Street.total()` and `District.total()` sum their houses'
consumption.

To run a script from code:

```python
from energialeitura.cli import default_city
from energialeitura.protocol import process_file, run_commands

city = default_city()
lines = process_file(city, "entrada.txt", "protocolo_saida.txt")
lines = run_commands(default_city(), "cidade medir\n")
```

`process_file` returns the protocol lines it wrote. It raises `CityError`
with `ErrorCode.FILE_OPEN_FAILED` when the input cannot be read.
`run_commands` takes the script as a string and returns the lines without
writing a file.

## What it does not do

The city exists only in memory for the length of one run. Nothing is
saved between runs, and each command-line run starts again from the four
default districts.

## Tests

```
pip install ".[test]"
pytest
```