from collections.abc import Callable

from prdraft.core.exceptions import NoDiffError
from prdraft.core.logging import get_logger

logger = get_logger(__name__)

VersionControlDiff = Callable[[str], str]


def diff_range(source: str, target: str) -> str:
    """source가 target에서 갈라진 이후의 변경만 보는 three-dot 범위"""
    return f"{target}...{source}"


class DiffProvider:
    """두 브랜치 사이의 diff 제공자"""

    def __init__(self, vcs_diff: VersionControlDiff):
        self._vcs_diff = vcs_diff

    def get_diff(self, source: str, target: str) -> str:
        """target...source diff 반환

        Raises:
            NoDiffError: diff 출력이 비어 있는 경우
        """
        range_spec = diff_range(source, target)
        diff = self._vcs_diff(range_spec)

        if not diff or not diff.strip():
            logger.info("diff 없음 range=%s", range_spec)
            raise NoDiffError(source, target)

        logger.debug("diff 조회 완료 range=%s length=%d", range_spec, len(diff))
        return diff
