from prdraft.domain.description.prompts.system import (
    PR_DESCRIPTION_CONVENTIONAL_SYSTEM,
    PR_DESCRIPTION_SYSTEM,
)

SYSTEM_INSTRUCTIONS = {
    "default": PR_DESCRIPTION_SYSTEM,
    "conventional": PR_DESCRIPTION_CONVENTIONAL_SYSTEM,
}


def get_system_instruction(style: str) -> str:
    """프롬프트 스타일에 해당하는 시스템 지시문 반환"""
    try:
        return SYSTEM_INSTRUCTIONS[style]
    except KeyError:
        raise ValueError(f"지원하지 않는 프롬프트 스타일: {style}") from None


__all__ = [
    "PR_DESCRIPTION_SYSTEM",
    "PR_DESCRIPTION_CONVENTIONAL_SYSTEM",
    "SYSTEM_INSTRUCTIONS",
    "get_system_instruction",
]
