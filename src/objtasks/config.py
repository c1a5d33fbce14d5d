from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CodecConfig:
    indent: int | None = None
    separators: tuple[str, str] = (",", ":")  # compact, like JSON.stringify
    ensure_ascii: bool = False
    allow_nan: bool = False


DEFAULT_CONFIG = CodecConfig()
