"""コマンドライン（`python -m layerart`）のテスト。"""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from layerart.__main__ import main
from layerart.core.runtime_config import set_config_path


@pytest.fixture(autouse=True)
def _isolate(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    set_config_path(None)
    yield
    set_config_path(None)


def test_encode_prints_clamped_artwork_string(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["encode", "--shape", "star", "--rotation", "400", "--layers", "12"]) == 0
    out = capsys.readouterr().out.strip()
    assert out.startswith("shape:star;rotation:360.0;")
    assert "layer:12.0" in out


def test_encode_accepts_colors_and_rainbow_flags(capsys: pytest.CaptureFixture[str]) -> None:
    argv = ["encode", "--colors", "#ff0000,#00ff00", "--rainbow", "--rainbow-style", "cyberpunk"]
    assert main(argv) == 0
    out = capsys.readouterr().out.strip()
    assert "colors:#FF0000,#00FF00" in out
    assert "useRainbow:true" in out
    assert "rainbowStyle:1" in out


@pytest.mark.parametrize(
    "argv",
    [
        ["encode", "--shape", "blob"],
        ["encode", "--rotation", "abc"],
        ["encode", "--background", "red"],
        ["render"],
        [],
    ],
)
def test_argument_errors_exit_with_2(argv: list[str]) -> None:
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert exc.value.code == 2


def test_decode_prints_json(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["decode", "shape:circle;rotation:45.0"]) == 0
    assert json.loads(capsys.readouterr().out) == {"shape": "circle", "rotation": "45.0"}


def test_decode_reads_artwork_from_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    src = tmp_path / "art.txt"
    src.write_text("shape:hexagon;layer:5.0\n", encoding="utf-8")
    assert main(["decode", f"@{src}"]) == 0
    assert json.loads(capsys.readouterr().out) == {"shape": "hexagon", "layer": "5.0"}


def test_missing_artwork_file_is_argument_error(tmp_path: Path) -> None:
    assert main(["decode", f"@{tmp_path / 'missing.txt'}"]) == 2


def test_render_writes_svg(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    out = tmp_path / "out" / "art.svg"
    assert main(["render", "shape:square;layer:4.0;primitive:2.0", str(out)]) == 0
    assert capsys.readouterr().out.strip() == str(out)
    text = out.read_text(encoding="utf-8")
    assert text.count("<path ") == 8


def test_render_defaults_to_configured_output_dir(tmp_path: Path) -> None:
    assert main(["render", "shape:circle;layer:2.0"]) == 0
    assert (tmp_path / "data" / "output" / "layerart.svg").is_file()


def test_render_uses_config_file(tmp_path: Path) -> None:
    cfg = tmp_path / "cfg.yaml"
    cfg.write_text("layout:\n  canvas_size: [320, 240]\n", encoding="utf-8")
    out = tmp_path / "art.svg"
    assert main(["render", "shape:circle", str(out), "--config", str(cfg)]) == 0
    assert 'viewBox="0 0 320 240"' in out.read_text(encoding="utf-8")


def test_render_with_invalid_config_exits_with_1(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    missing = tmp_path / "missing.yaml"
    assert main(["render", "shape:circle", str(tmp_path / "a.svg"), "--config", str(missing)]) == 1
    assert "config error" in capsys.readouterr().err

    bad = tmp_path / "bad.yaml"
    bad.write_text("version: 9\n", encoding="utf-8")
    assert main(["render", "shape:circle", str(tmp_path / "a.svg"), "--config", str(bad)]) == 1
