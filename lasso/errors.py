"""lasso 예외 정의"""


class LassoError(Exception):
    """lasso 기본 예외"""
    pass


class InvalidDescriptorError(LassoError, TypeError):
    """name 속성이 없는 디스크립터"""
    pass


class UnknownSectionError(LassoError, ValueError):
    """알 수 없는 섹션 타입 (prefix 미지정)"""
    pass
