"""Shard document schemas.

A shard document collects the shards a holder has received for one
disclosure, either typed in by hand (``x``/``y``) or copied from the
contract's shard events (``shard_x``/``shard_y`` plus ``context`` and
``from``).
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Optional, Union

import yaml
from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    ValidationError,
    model_validator,
)

from .errors import InvalidShardValueError, ShardDocumentError
from .models import ShardPoint
from .shards import to_field_int


def _context_key(value: Union[str, int]) -> Union[str, int]:
    try:
        return to_field_int(value, "context")
    except InvalidShardValueError:
        return str(value).strip()


class ShardEntry(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    x: Any = Field(validation_alias=AliasChoices("x", "shard_x"))
    y: Any = Field(validation_alias=AliasChoices("y", "shard_y"))
    context: Optional[Union[int, str]] = None
    sender: Optional[str] = Field(default=None, validation_alias=AliasChoices("from", "sender"))

    def to_point(self) -> ShardPoint:
        return ShardPoint(x=self.x, y=self.y)


class ShardDocument(BaseModel):
    model_config = ConfigDict(extra="ignore")

    recipient_amount: Optional[StrictInt] = None
    threshold_amount: Optional[StrictInt] = None
    context: Optional[Union[int, str]] = None
    shards: List[ShardEntry] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_single_context(self) -> "ShardDocument":
        contexts = {_context_key(entry.context) for entry in self.shards if entry.context is not None}
        if self.context is not None:
            contexts.add(_context_key(self.context))
        if len(contexts) > 1:
            shown = ", ".join(sorted(str(item) for item in contexts))
            raise ValueError(f"Shards belong to different disclosure contexts: {shown}")
        return self

    def points(self) -> List[ShardPoint]:
        return [entry.to_point() for entry in self.shards]


def document_from_data(data: Any) -> ShardDocument:
    try:
        return ShardDocument.model_validate(data or {})
    except ValidationError as exc:
        raise ShardDocumentError(f"Invalid shard document: {exc}") from exc


def document_from_path(path: Path) -> ShardDocument:
    try:
        with path.open("r", encoding="utf-8") as handle:
            if path.suffix.lower() in {".yaml", ".yml"}:
                raw = yaml.safe_load(handle)
            else:
                raw = json.load(handle)
    except OSError as exc:
        raise ShardDocumentError(f"Cannot read shard document {path}: {exc}") from exc
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise ShardDocumentError(f"Malformed shard document {path}: {exc}") from exc
    return document_from_data(raw)


__all__ = [
    "ShardDocument",
    "ShardEntry",
    "document_from_data",
    "document_from_path",
]
