"""
PR 설명 초안 버퍼

생성 결과를 받는 대상. Dispatcher는 버퍼를 직접 건드리지 않고,
호출자가 buffer_writer()로 만든 continuation을 넘긴다.
"""

from prdraft.core.exceptions import BufferNotFoundError
from prdraft.core.logging import get_logger

logger = get_logger(__name__)

DESCRIPTION_HEADER = (
    "# PR description draft. Edit below this header.\n"
    '# Leading lines starting with "# " are ignored when this draft is reused as a template.\n'
)


class DraftBuffer:
    """편집 가능한 텍스트 버퍼"""

    def __init__(self, buffer_id: str, content: str = ""):
        self.buffer_id = buffer_id
        self._content = content
        self._live = True
        self._issued = 0
        self._delivered = 0

    @property
    def is_live(self) -> bool:
        return self._live

    @property
    def delivered(self) -> int:
        """마지막으로 반영된 생성 요청 번호"""
        return self._delivered

    def snapshot(self) -> str:
        return self._content

    def replace(self, text: str) -> None:
        self._content = text

    def close(self) -> None:
        self._live = False

    def begin_generation(self) -> int:
        """새 생성 요청의 fencing token 발급"""
        self._issued += 1
        return self._issued

    def deliver(self, token: int, text: str) -> bool:
        """token보다 나중에 발급된 결과가 이미 반영됐으면 false"""
        if token < self._delivered:
            return False
        self._delivered = token
        self._content = text
        return True


def buffer_writer(buffer: DraftBuffer):
    """버퍼에 결과를 쓰는 success continuation 생성

    전달 시점에 버퍼가 닫혔거나, 나중에 시작된 요청의 결과가 이미
    반영되어 있으면 결과를 버린다.
    """
    token = buffer.begin_generation()

    def write(text: str) -> None:
        if not buffer.is_live:
            logger.info("닫힌 버퍼, 결과 폐기 buffer_id=%s", buffer.buffer_id)
            return
        if not buffer.deliver(token, DESCRIPTION_HEADER + text):
            logger.warning(
                "이전 생성 결과 폐기 buffer_id=%s token=%d delivered=%d",
                buffer.buffer_id,
                token,
                buffer.delivered,
            )

    return write


class BufferRegistry:
    """버퍼 id별 저장소"""

    def __init__(self):
        self._buffers: dict[str, DraftBuffer] = {}

    def open(self, buffer_id: str, content: str = "") -> DraftBuffer:
        """버퍼 생성, 이미 있으면 내용만 교체"""
        buffer = self._buffers.get(buffer_id)
        if buffer is None:
            buffer = DraftBuffer(buffer_id, content)
            self._buffers[buffer_id] = buffer
        else:
            buffer.replace(content)
        return buffer

    def get(self, buffer_id: str) -> DraftBuffer:
        buffer = self._buffers.get(buffer_id)
        if buffer is None:
            raise BufferNotFoundError(buffer_id)
        return buffer

    def close(self, buffer_id: str) -> None:
        buffer = self._buffers.pop(buffer_id, None)
        if buffer is None:
            raise BufferNotFoundError(buffer_id)
        buffer.close()
