import subprocess

from prdraft.core.config import settings
from prdraft.core.exceptions import GitError
from prdraft.core.logging import get_logger

logger = get_logger(__name__)

GIT_DIFF_COMMAND = ["git", "diff", "--no-color", "--no-ext-diff"]


class GitClient:
    """git CLI 기반 diff 조회 클라이언트"""

    def __init__(self, repo_path: str | None = None, timeout: float | None = None):
        self.repo_path = repo_path or settings.git_repo_path
        self.timeout = timeout or settings.git_timeout

    def diff(self, range_spec: str) -> str:
        """범위 표현식에 대한 diff 텍스트 반환, 완료 또는 timeout까지 블로킹

        Args:
            range_spec: "target...source" 형식의 범위

        Returns:
            diff 텍스트, 변경이 없으면 빈 문자열

        Raises:
            GitError: git 실행 실패 또는 시간 초과
        """
        if range_spec.startswith("-"):
            raise GitError(f"유효하지 않은 범위: {range_spec}")

        try:
            result = subprocess.run(
                [*GIT_DIFF_COMMAND, range_spec, "--"],
                cwd=self.repo_path,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired as e:
            raise GitError(f"git diff 시간 초과 range={range_spec}") from e
        except FileNotFoundError as e:
            raise GitError(f"git 실행 파일 또는 저장소 경로를 찾을 수 없습니다: {e}") from e

        if result.returncode != 0:
            logger.warning(
                "git diff 실패 range=%s returncode=%d", range_spec, result.returncode
            )
            raise GitError(result.stderr.strip() or f"returncode={result.returncode}")

        return result.stdout

    __call__ = diff
