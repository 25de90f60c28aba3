HEADER_MARKER = "# "


def strip_header(content: str) -> str:
    """맨 앞에 연속된 "# " 주석 줄만 제거"""
    lines = content.split("\n")
    start = 0
    while start < len(lines) and lines[start].startswith(HEADER_MARKER):
        start += 1
    return "\n".join(lines[start:])


def extract_template(content: str | None, enabled: bool) -> str | None:
    """버퍼 내용에서 PR 템플릿 추출

    Args:
        content: 버퍼 전체 내용
        enabled: 템플릿 사용 여부 설정

    Returns:
        헤더를 제거하고 trim한 템플릿, 남는 내용이 없으면 None
    """
    if not enabled or content is None:
        return None

    content = content.strip()
    if not content:
        return None

    template = strip_header(content).strip()
    return template or None
