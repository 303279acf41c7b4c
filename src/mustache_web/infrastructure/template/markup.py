"""HTML 이스케이프 (&, <, >, ", ')"""

from typing import Any

from markupsafe import escape

# markupsafe의 숫자 엔티티를 호스트 이스케이프 표(&quot;, &#039;)로 맞춤
_QUOTE_ENTITIES = {"&#34;": "&quot;", "&#39;": "&#039;"}


def escape_markup(text: Any) -> str:
    """
    컴파일된 출력 전체를 HTML 이스케이프

    Examples:
        >>> escape_markup("Hello <b>!")
        'Hello &lt;b&gt;!'
        >>> escape_markup("say \\"hi\\" it's")
        'say &quot;hi&quot; it&#039;s'
    """
    if text is None:
        return ""

    escaped = str(escape(str(text)))
    for entity, replacement in _QUOTE_ENTITIES.items():
        escaped = escaped.replace(entity, replacement)
    return escaped
