from __future__ import annotations

import json
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml


@dataclass(frozen=True)
class ParserConfig:
    trim_trailing_whitespace: bool = True
    skip_blank_lines: bool = True
    encoding: str = "utf-8"

    @staticmethod
    def from_mapping(payload: dict[str, Any]) -> ParserConfig:
        known = {f.name for f in fields(ParserConfig)}
        unknown = sorted(set(payload) - known)
        if unknown:
            raise ValueError(f"Unknown parser config keys: {unknown}")
        return ParserConfig(
            trim_trailing_whitespace=bool(payload.get("trim_trailing_whitespace", True)),
            skip_blank_lines=bool(payload.get("skip_blank_lines", True)),
            encoding=str(payload.get("encoding", "utf-8")),
        )

    def prepare(self, text: str) -> str:
        """Apply the trailing-input policy before the text reaches the grammar."""
        if self.trim_trailing_whitespace:
            return text.rstrip(" \t\r\n")
        return text


DEFAULT_CONFIG = ParserConfig()


def load_config(path: Path) -> ParserConfig:
    if path.suffix.lower() in {".yml", ".yaml"}:
        payload = yaml.safe_load(path.read_text())
    else:
        payload = json.loads(path.read_text())
    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        raise ValueError(f"Parser config must be a mapping, got {type(payload).__name__}")
    return ParserConfig.from_mapping(payload)
