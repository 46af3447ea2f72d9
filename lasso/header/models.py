from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class DescriptorLike(Protocol):
    """헤더에 저장 가능한 디스크립터 (name만 요구)"""
    name: str


@dataclass(frozen=True)
class Descriptor:
    name: str  # mnemonic (조회 키)
    value: Any = None  # 내부 구조는 해석하지 않음
