"""일정 원문 한 줄 정규화.

생성기가 일부 이모지 앞에 `$`를 붙여 내보내는 문제가 있어, 패턴 매칭 전에
이모지를 복구하고 남은 `$`를 모두 제거합니다.
"""

import re

_DOLLAR_BEFORE_EMOJI = re.compile(
    "\\$([\U0001F300-\U0001F6FF\U0001F900-\U0001F9FF\u2600-\u26FF\u2700-\u27BF])"
)
# 줄바꿈은 제거하지 않음
_DOLLAR_RUN = re.compile(r"\$[^\S\n]*")


def repair_emoji_prefix(text: str) -> str:
    """이모지 바로 앞의 `$`를 제거합니다."""
    return _DOLLAR_BEFORE_EMOJI.sub(r"\1", text)


def strip_dollar(text: str) -> str:
    """모든 `$`와 그 뒤에 붙은 공백을 제거합니다."""
    return _DOLLAR_RUN.sub("", text)


def normalize_line(line: str) -> str:
    """한 줄을 정규화합니다. 여러 번 적용해도 결과가 같습니다."""
    return strip_dollar(repair_emoji_prefix(line.strip())).strip()
