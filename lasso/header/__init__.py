"""LAS 헤더 모듈

구조:
- base.py: 표준 섹션 정의 (타입 → prefix)
- models.py: 디스크립터 모델
- record.py: 헤더 레코드
"""

from .base import SECTION_PREFIXES, section_prefix
from .models import Descriptor, DescriptorLike
from .record import Header, HeaderRecord, create_header

__all__ = [
    # 섹션
    "SECTION_PREFIXES",
    "section_prefix",
    # 디스크립터
    "Descriptor",
    "DescriptorLike",
    # 헤더
    "Header",
    "HeaderRecord",
    "create_header",
]
