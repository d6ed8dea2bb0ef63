# どこで: `src/layerart/core/runtime_config.py`。
# 何を: config.yaml による実行時設定（探索・ロード・キャッシュ）を提供する。
# なぜ: キャンバス寸法や出力先を、コードを変えずにユーザーが上書きできるようにするため。

from __future__ import annotations

import os
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any

from layerart.core.layer import LayoutConfig


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """layerart の実行時設定。"""

    config_path: Path | None
    output_dir: Path
    layout: LayoutConfig
    svg_decimals: int


_EXPLICIT_CONFIG_PATH: Path | None = None
_CONFIG_CACHE: RuntimeConfig | None = None


def set_config_path(path: str | Path | None) -> None:
    """以降の設定探索で使う明示 config パスを設定する。

    Notes
    -----
    `path` を None にすると明示指定を解除し、既定の探索に戻る。
    """

    global _EXPLICIT_CONFIG_PATH, _CONFIG_CACHE
    if path is None:
        _EXPLICIT_CONFIG_PATH = None
        _CONFIG_CACHE = None
        return
    _EXPLICIT_CONFIG_PATH = Path(str(path)).expanduser()
    _CONFIG_CACHE = None


def _default_config_candidates() -> tuple[Path, ...]:
    return (
        Path.cwd() / ".layerart" / "config.yaml",
        Path.home() / ".config" / "layerart" / "config.yaml",
    )


def _as_optional_path(value: Any) -> Path | None:
    if value is None:
        return None
    s = str(value).strip()
    if not s:
        return None
    return Path(os.path.expandvars(os.path.expanduser(s)))


def _as_mapping(value: Any, *, key: str) -> dict[str, Any]:
    if value is None:
        return {}
    if isinstance(value, dict):
        return dict(value)
    raise RuntimeError(f"{key} は mapping である必要があります: got={value!r}")


def _as_int_pair(value: Any, *, key: str) -> tuple[int, int]:
    if isinstance(value, (str, bytes)):
        raise RuntimeError(f"{key} は [w, h] の配列である必要があります: got={value!r}")
    try:
        seq = list(value)
    except TypeError as exc:
        raise RuntimeError(f"{key} は [w, h] の配列である必要があります: got={value!r}") from exc
    if len(seq) != 2:
        raise RuntimeError(f"{key} は [w, h] の配列である必要があります: got={value!r}")
    try:
        return int(seq[0]), int(seq[1])
    except (TypeError, ValueError) as exc:
        raise RuntimeError(f"{key} は [w, h] の整数配列である必要があります: got={value!r}") from exc


def _as_float(value: Any, *, key: str) -> float:
    if isinstance(value, bool):
        raise RuntimeError(f"{key} は数値である必要があります: got={value!r}")
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise RuntimeError(f"{key} は数値である必要があります: got={value!r}") from exc


def _as_int(value: Any, *, key: str) -> int:
    if isinstance(value, bool):
        raise RuntimeError(f"{key} は整数である必要があります: got={value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise RuntimeError(f"{key} は整数である必要があります: got={value!r}") from exc


def _as_bool(value: Any, *, key: str) -> bool:
    if isinstance(value, bool):
        return value
    raise RuntimeError(f"{key} は true/false である必要があります: got={value!r}")


def _require(mapping: dict[str, Any], name: str, *, key: str) -> Any:
    value = mapping.get(name)
    if value is None:
        raise RuntimeError(f"{key} が未設定です（同梱 default_config.yaml を確認してください）")
    return value


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """mapping 同士は再帰的に、それ以外は override 側で上書きした dict を返す。"""
    out = dict(base)
    for key, value in override.items():
        current = out.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            out[key] = _merge(current, value)
        else:
            out[key] = value
    return out


def _load_yaml_text(text: str, *, source: str) -> dict[str, Any]:
    try:
        import yaml  # type: ignore[import-untyped]
    except Exception as exc:  # pragma: no cover
        raise RuntimeError(f"PyYAML を import できません: {exc}") from exc

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise RuntimeError(f"config.yaml の読み込みに失敗しました: source={source}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise RuntimeError(f"config.yaml は mapping である必要があります: source={source}")
    return dict(data)


def _load_yaml_config(path: Path) -> dict[str, Any]:
    return _load_yaml_text(path.read_text(encoding="utf-8"), source=str(path))


def _load_packaged_default_config() -> dict[str, Any]:
    """同梱デフォルト config をロードして dict を返す。"""

    try:
        blob = (
            resources.files("layerart")
            .joinpath("resource", "default_config.yaml")
            .read_text(encoding="utf-8")
        )
    except Exception as exc:  # pragma: no cover
        raise RuntimeError(
            "同梱 default_config.yaml の読み込みに失敗しました"
            "（パッケージ配布物の package-data を確認してください）"
        ) from exc

    return _load_yaml_text(blob, source="layerart/resource/default_config.yaml")


def _parse_layout(payload: dict[str, Any]) -> LayoutConfig:
    layout = _as_mapping(payload.get("layout"), key="layout")
    canvas_size = _as_int_pair(
        _require(layout, "canvas_size", key="layout.canvas_size"), key="layout.canvas_size"
    )
    if canvas_size[0] <= 0 or canvas_size[1] <= 0:
        raise RuntimeError(f"layout.canvas_size は正の値である必要があります: got={canvas_size!r}")
    base_radius = _as_float(
        _require(layout, "base_radius", key="layout.base_radius"), key="layout.base_radius"
    )
    if base_radius <= 0:
        raise RuntimeError(f"layout.base_radius は正の値である必要があります: got={base_radius}")
    circle_segments = _as_int(
        _require(layout, "circle_segments", key="layout.circle_segments"),
        key="layout.circle_segments",
    )
    if circle_segments < 4:
        raise RuntimeError(
            f"layout.circle_segments は 4 以上である必要があります: got={circle_segments}"
        )
    return LayoutConfig(
        canvas_size=canvas_size,
        base_radius=base_radius,
        scale_growth=_as_float(
            _require(layout, "scale_growth", key="layout.scale_growth"),
            key="layout.scale_growth",
        ),
        spread_step=_as_float(
            _require(layout, "spread_step", key="layout.spread_step"), key="layout.spread_step"
        ),
        orbit=_as_bool(_require(layout, "orbit", key="layout.orbit"), key="layout.orbit"),
        circle_segments=circle_segments,
    )


def runtime_config() -> RuntimeConfig:
    """実行時設定をロードして返す（キャッシュ）。

    Raises
    ------
    FileNotFoundError
        `set_config_path` で指定したファイルが存在しない場合。
    RuntimeError
        YAML が壊れている、または値の型・値域が不正な場合。
    """

    global _CONFIG_CACHE
    if _CONFIG_CACHE is not None:
        return _CONFIG_CACHE

    explicit_path = _EXPLICIT_CONFIG_PATH
    if explicit_path is not None and not explicit_path.is_file():
        raise FileNotFoundError(f"config.yaml が見つかりません: {explicit_path}")

    discovered_path: Path | None = None
    for p in _default_config_candidates():
        if p.is_file():
            discovered_path = p
            break

    payload = _load_packaged_default_config()
    if discovered_path is not None:
        payload = _merge(payload, _load_yaml_config(discovered_path))
    if explicit_path is not None:
        payload = _merge(payload, _load_yaml_config(explicit_path))

    version = payload.get("version")
    if version is None:
        raise RuntimeError(
            "config.yaml の version が未設定です（同梱 default_config.yaml を確認してください）"
        )
    try:
        version_i = int(version)
    except (TypeError, ValueError) as exc:
        raise RuntimeError(f"config.yaml の version は整数である必要があります: got={version!r}") from exc
    if version_i != 1:
        raise RuntimeError(f"未対応の config.yaml version です: got={version_i}")

    paths = _as_mapping(payload.get("paths"), key="paths")
    output_dir = _as_optional_path(paths.get("output_dir"))
    if output_dir is None:
        raise RuntimeError(
            "paths.output_dir が未設定です（同梱 default_config.yaml を確認してください）"
        )

    export = _as_mapping(payload.get("export"), key="export")
    svg = _as_mapping(export.get("svg"), key="export.svg")
    decimals = _as_int(_require(svg, "decimals", key="export.svg.decimals"), key="export.svg.decimals")
    if decimals < 0:
        raise RuntimeError(f"export.svg.decimals は 0 以上である必要があります: got={decimals}")

    cfg = RuntimeConfig(
        config_path=explicit_path or discovered_path,
        output_dir=output_dir,
        layout=_parse_layout(payload),
        svg_decimals=decimals,
    )
    _CONFIG_CACHE = cfg
    return cfg


def layout_config() -> LayoutConfig:
    """設定ファイルで上書き済みの LayoutConfig を返す。"""

    return runtime_config().layout


def output_root_dir() -> Path:
    """出力ファイルを保存する既定ルートディレクトリを返す。

    上書き順（後勝ち）:
    1) 同梱 default_config.yaml
    2) `./.layerart/config.yaml` / `~/.config/layerart/config.yaml`
    3) `set_config_path(...)` で指定したパス
    """

    return Path(runtime_config().output_dir)


__all__ = [
    "RuntimeConfig",
    "layout_config",
    "output_root_dir",
    "runtime_config",
    "set_config_path",
]
