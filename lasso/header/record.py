"""LAS 헤더 레코드

헤더 한 개(섹션 타입, prefix, 디스크립터 목록)를 메모리에 보관합니다.
디스크립터 목록은 통째로만 교체되며, 이름 조회는 삽입 순서상 첫 번째 항목을 반환합니다.
"""

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from lasso.errors import InvalidDescriptorError, UnknownSectionError
from lasso.header.base import section_prefix
from lasso.header.models import DescriptorLike


logger = logging.getLogger(__name__)


class Header(ABC):
    """LAS 헤더 추상 클래스"""

    @abstractmethod
    def get_type(self) -> str:
        """섹션 타입 (예: "WELL")"""
        pass

    @abstractmethod
    def get_prefix(self) -> str:
        """섹션 prefix (예: "~W")"""
        pass

    @abstractmethod
    def get_descriptors(self) -> List[DescriptorLike]:
        """디스크립터 목록 (삽입 순서)"""
        pass

    @abstractmethod
    def get_descriptor(self, name: str) -> Optional[DescriptorLike]:
        """
        이름으로 디스크립터 조회

        Args:
            name: 디스크립터 이름

        Returns:
            이름이 일치하는 첫 번째 디스크립터, 없으면 None
        """
        pass

    @abstractmethod
    def set_descriptors(self, descriptors: Iterable[DescriptorLike]) -> None:
        """디스크립터 목록 전체 교체"""
        pass


# (디스크립터 튜플, 이름 → 첫 번째 디스크립터)
_Snapshot = Tuple[Tuple[DescriptorLike, ...], Dict[str, DescriptorLike]]


class HeaderRecord(Header):
    """메모리 내 LAS 헤더 레코드"""

    def __init__(
        self,
        type: str,
        prefix: str,
        descriptors: Optional[Iterable[DescriptorLike]] = None,
    ):
        """
        Args:
            type: 섹션 타입
            prefix: 섹션 prefix
            descriptors: 초기 디스크립터 목록 (생략 시 빈 목록)
        """
        self._type = type
        self._prefix = prefix
        self._lock = threading.Lock()
        self._snapshot: _Snapshot = ((), {})
        if descriptors is not None:
            self.set_descriptors(descriptors)

    @property
    def type(self) -> str:
        return self._type

    @property
    def prefix(self) -> str:
        return self._prefix

    def get_type(self) -> str:
        return self._type

    def get_prefix(self) -> str:
        return self._prefix

    def get_descriptors(self) -> List[DescriptorLike]:
        items, _ = self._snapshot
        return list(items)

    def get_descriptor(self, name: str) -> Optional[DescriptorLike]:
        _, index = self._snapshot
        return index.get(name)

    def set_descriptors(self, descriptors: Iterable[DescriptorLike]) -> None:
        """디스크립터 목록 전체 교체

        새 스냅샷을 만든 뒤 한 번에 바꿔 끼우므로 읽는 쪽은 교체 전/후 목록 중
        하나만 봅니다. 검증에 실패하면 기존 목록이 유지됩니다.

        Raises:
            InvalidDescriptorError: name 속성이 문자열이 아닌 항목이 있는 경우
        """
        snapshot = self._build_snapshot(descriptors)

        with self._lock:
            self._snapshot = snapshot

        logger.debug(
            "Replaced descriptors of %s header: %d item(s)",
            self._type,
            len(snapshot[0]),
        )

    def _build_snapshot(self, descriptors: Iterable[DescriptorLike]) -> _Snapshot:
        """디스크립터 튜플과 이름 인덱스 생성"""
        items = tuple(descriptors)
        index: Dict[str, DescriptorLike] = {}
        duplicates: List[str] = []

        for position, descriptor in enumerate(items):
            name = getattr(descriptor, "name", None)
            if not isinstance(name, str):
                raise InvalidDescriptorError(
                    f"Descriptor at position {position} has no string 'name': {descriptor!r}"
                )
            if name in index:
                if name not in duplicates:
                    duplicates.append(name)
                continue
            index[name] = descriptor

        if duplicates:
            logger.warning(
                "Duplicate descriptor names in %s header: %s (lookups return the first occurrence)",
                self._type,
                ", ".join(duplicates),
            )

        return items, index

    def descriptor_names(self) -> List[str]:
        """디스크립터 이름 목록 (중복 포함, 삽입 순서)"""
        items, _ = self._snapshot
        return [d.name for d in items]

    def __len__(self) -> int:
        items, _ = self._snapshot
        return len(items)

    def __iter__(self) -> Iterator[DescriptorLike]:
        items, _ = self._snapshot
        return iter(items)

    def __contains__(self, name: object) -> bool:
        _, index = self._snapshot
        return isinstance(name, str) and name in index

    def __repr__(self) -> str:
        return (
            f"HeaderRecord(type={self._type!r}, prefix={self._prefix!r}, "
            f"descriptors={len(self)})"
        )


def create_header(
    header_type: str,
    prefix: Optional[str] = None,
    descriptors: Optional[Iterable[DescriptorLike]] = None,
) -> HeaderRecord:
    """
    HeaderRecord 생성

    Args:
        header_type: 섹션 타입 ("VERSION", "WELL", "CURVE", "PARAMETER", "OTHER" 등)
        prefix: 섹션 prefix (생략 시 표준 섹션 표에서 조회)
        descriptors: 초기 디스크립터 목록

    Returns:
        생성된 HeaderRecord

    Raises:
        UnknownSectionError: 표준 섹션이 아니고 prefix도 없는 경우
    """
    if prefix is None:
        prefix = section_prefix(header_type)
        if prefix is None:
            raise UnknownSectionError(f"Unknown section type: {header_type}")

    return HeaderRecord(header_type, prefix, descriptors)
