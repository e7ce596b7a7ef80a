# tests/test_cli.py
import pytest

from multiavatar.cli.args import build_parser, main, params_from_args

BINX = "Binx Bond123"


@pytest.fixture
def settings_file(tmp_path):
    def write(body=""):
        p = tmp_path / "avatar.yaml"
        p.write_text(body, encoding="utf-8")
        return str(p)
    return write


def test_cli_flags_present():
    ap = build_parser()
    args = ap.parse_args(
        [
            "someone",
            "--transparent",
            "--theme",
            "B",
            "--part-version",
            "eyes:11",
            "--allowed-themes",
            "top:A|C",
            "--clo",
            "#111111|#222222",
            "--without-part",
            "mouth",
            "--verify",
        ]
    )
    assert args.name == "someone"
    assert args.transparent and args.verify
    assert params_from_args(args) == {
        "name": "someone",
        "transparent": "true",
        "theme": "B",
        "partVersion": "eyes:11",
        "allowedThemes": "top:A|C",
        "clo": "#111111|#222222",
        "withoutPart": "mouth",
    }


def test_cli_writes_svg_to_stdout(settings_file, capsys, binx_svg):
    assert main([BINX, "--config", settings_file()]) == 0
    assert capsys.readouterr().out == binx_svg + "\n"


def test_cli_verify(settings_file, capsys, binx_svg):
    assert main([BINX, "--verify", "--config", settings_file()]) == 0
    assert capsys.readouterr().out == binx_svg + "\n"


def test_cli_trims_name(settings_file, capsys, binx_svg):
    assert main([f"  {BINX} ", "--config", settings_file()]) == 0
    assert capsys.readouterr().out == binx_svg + "\n"


def test_cli_blank_name_exits_2(settings_file, capsys):
    assert main(["   ", "--config", settings_file()]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "name" in captured.err


def test_cli_flags_change_output(settings_file, capsys, binx_svg):
    assert main([BINX, "--transparent", "--config", settings_file()]) == 0
    out = capsys.readouterr().out
    assert out.startswith('<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 231 231"><path')
    assert "#26de81" not in out


def test_cli_settings_defaults_apply(settings_file, capsys):
    path = settings_file("defaults:\n  transparent: true\n  colors:\n    head: '#010101'\n")
    assert main([BINX, "--config", path]) == 0
    out = capsys.readouterr().out
    assert "#26de81" not in out
    assert "fill:#010101;" in out


def test_cli_flags_follow_settings_defaults(settings_file, capsys):
    path = settings_file("defaults:\n  colors:\n    head: '#010101'\n")
    assert main([BINX, "--head", "#020202", "--config", path]) == 0
    out = capsys.readouterr().out
    assert "#010101" not in out
    assert "fill:#020202;" in out


def test_cli_missing_settings_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        main([BINX, "--config", str(tmp_path / "missing.yaml")])
