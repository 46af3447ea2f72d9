"""
lasso - LAS(Log ASCII Standard) 헤더 레코드 라이브러리
"""

from lasso.errors import InvalidDescriptorError, LassoError, UnknownSectionError
from lasso.header import (
    Descriptor,
    DescriptorLike,
    Header,
    HeaderRecord,
    create_header,
    section_prefix,
)

__version__ = "0.1.0"
__all__ = [
    "Descriptor",
    "DescriptorLike",
    "Header",
    "HeaderRecord",
    "create_header",
    "section_prefix",
    "LassoError",
    "InvalidDescriptorError",
    "UnknownSectionError",
]
