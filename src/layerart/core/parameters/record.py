# どこで: `src/layerart/core/parameters/record.py`。
# 何を: アートワーク文字列と保存先メタ情報（所有者/時刻/タイトル/ID）の組 ArtworkRecord と JSON encode/decode。
# なぜ: 外部ストレージとの境界で受け渡す形を固定し、カーネル側はメタ情報を解釈しないで済むようにするため。

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any


@dataclass(frozen=True, slots=True)
class ArtworkRecord:
    """保存・一覧表示の単位となるアートワーク 1 件。"""

    owner_id: str
    artwork_string: str
    timestamp: datetime
    title: str | None = None
    piece_id: str | None = None

    @property
    def id(self) -> str:
        """保存済みなら piece_id、未保存ならアートワーク文字列を識別子として返す。"""
        return self.piece_id if self.piece_id is not None else self.artwork_string


def encode_record(record: ArtworkRecord) -> dict[str, Any]:
    """ArtworkRecord を JSON 化可能な dict に変換して返す。"""

    timestamp = record.timestamp
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    return {
        "ownerId": record.owner_id,
        "artworkString": record.artwork_string,
        "timestamp": timestamp.isoformat(),
        "title": record.title,
        "pieceId": record.piece_id,
    }


def decode_record(obj: object) -> ArtworkRecord:
    """JSON 由来の dict から ArtworkRecord を復元して返す。

    Raises
    ------
    ValueError
        dict でない、必須キー（ownerId/artworkString/timestamp）が無い、
        または timestamp が ISO 8601 として解釈できない場合。
    """

    if not isinstance(obj, dict):
        raise ValueError(f"ArtworkRecord の payload は dict である必要がある: got={type(obj)!r}")
    missing = [k for k in ("ownerId", "artworkString", "timestamp") if k not in obj]
    if missing:
        raise ValueError(f"ArtworkRecord の必須キーがありません: {', '.join(missing)}")

    try:
        timestamp = datetime.fromisoformat(str(obj["timestamp"]))
    except ValueError as exc:
        raise ValueError(f"timestamp を解釈できません: {obj['timestamp']!r}") from exc
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)

    title = obj.get("title")
    piece_id = obj.get("pieceId")
    return ArtworkRecord(
        owner_id=str(obj["ownerId"]),
        artwork_string=str(obj["artworkString"]),
        timestamp=timestamp,
        title=None if title is None else str(title),
        piece_id=None if piece_id is None else str(piece_id),
    )


def dumps_record(record: ArtworkRecord) -> str:
    """ArtworkRecord を JSON 文字列へ変換して返す。"""

    return json.dumps(encode_record(record), ensure_ascii=False)


def loads_record(payload: str) -> ArtworkRecord:
    """JSON 文字列から ArtworkRecord を復元して返す。"""

    return decode_record(json.loads(payload))


__all__ = ["ArtworkRecord", "decode_record", "dumps_record", "encode_record", "loads_record"]
