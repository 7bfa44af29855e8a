import io

from energialeitura.cli import default_city, main


def test_default_city_districts():
    city = default_city()
    assert [d.id for d in city.districts] == [17, 13, 2, 1]
    assert city.districts[-1].name == "Bairro Um"


def test_main_with_arguments(tmp_path, capsys):
    source = tmp_path / "entrada.txt"
    source.write_text("bairro incluir 1 Outro\nbairro incluir 5 Cinco\n",
                      encoding="utf-8")
    target = tmp_path / "saida.txt"
    assert main([str(source), "--output", str(target)]) == 0
    lines = target.read_text(encoding="utf-8").splitlines()
    assert lines == [
        "ERRO: Ja existe um bairro com este id vinculado à cidade. Bairro id: 1",
        "Bairro incluido com sucesso. Bairro id: 5",
    ]
    assert "Protocolo de saída gerado com sucesso." in capsys.readouterr().out


def test_main_missing_file(tmp_path, capsys):
    target = tmp_path / "saida.txt"
    assert main([str(tmp_path / "nao_existe.txt"), "-o", str(target)]) == 0
    out = capsys.readouterr().out
    assert "Erro na abertura do arquivo." in out
    assert "gerado com sucesso" not in out


def test_main_reads_name_from_stdin(tmp_path, monkeypatch, capsys):
    (tmp_path / "entrada.txt").write_text("rua incluir 13 4 Rua Quatro\n",
                                          encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO("  entrada.txt\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Para executar, digite o nome do arquivo de entrada.txt:" in out
    lines = (tmp_path / "protocolo_saida.txt").read_text(encoding="utf-8").splitlines()
    assert lines == ["Rua incluida com sucesso. Bairro id: 13 Rua id: 4 "
                     "Rua nome: Rua Quatro"]


def test_main_each_run_starts_fresh(tmp_path):
    source = tmp_path / "entrada.txt"
    source.write_text("bairro incluir 9 Nove\n", encoding="utf-8")
    target = tmp_path / "saida.txt"
    main([str(source), "-o", str(target)])
    first = target.read_text(encoding="utf-8")
    main([str(source), "-o", str(target)])
    assert target.read_text(encoding="utf-8") == first