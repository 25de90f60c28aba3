RATIONALE_SECTION = "Why these changes were made: {rationale}"
TEMPLATE_SECTION = "PR template to follow:\n{template}"
DIFF_SECTION = "Code changes:\n{diff}"

SECTION_SEPARATOR = "\n\n"


def assemble_prompt(diff: str, rationale: str | None = None, template: str | None = None) -> str:
    """변경 이유, 템플릿, diff 순서로 프롬프트 조립

    비어 있는 선택 섹션은 자리 표시 없이 생략된다.
    """
    sections = []
    if rationale:
        sections.append(RATIONALE_SECTION.format(rationale=rationale))
    if template:
        sections.append(TEMPLATE_SECTION.format(template=template))
    sections.append(DIFF_SECTION.format(diff=diff))
    return SECTION_SEPARATOR.join(sections)
