"""LAS 헤더 공통 정의"""

from __future__ import annotations

from typing import Dict, Optional


# LAS 표준 섹션 (타입 → prefix)
SECTION_PREFIXES: Dict[str, str] = {
    "VERSION": "~V",
    "WELL": "~W",
    "CURVE": "~C",
    "PARAMETER": "~P",
    "OTHER": "~O",
}


def section_prefix(header_type: str) -> Optional[str]:
    """섹션 타입으로 prefix 조회 (대소문자 무시)"""
    return SECTION_PREFIXES.get(header_type.strip().upper())
