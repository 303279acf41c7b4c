"""
클라이언트 렌더링 스크립트 생성

스크립트는 문자열 연결로 만들며, 마크업 ID는 호스트의 ID 할당기가
이미 정제한 값으로 간주합니다. JSON 페이로드 안의 "</"는 "<\\/"로 바꿔
인라인 <script> 블록이 조기에 닫히지 않도록 합니다.
"""

from mustache_web.domain.models.template import DATA_TEMPLATE_ATTRIBUTE


def _escape_script_payload(json_text: str) -> str:
    # "<\/"는 JSON 문자열 안에서 "</"와 같은 값으로 해석됨
    return json_text.replace("</", "<\\/")


def create_render_script(markup_id: str, json_text: str) -> str:
    """
    클라이언트 측 렌더링 스크립트 생성

    요소의 data-template 속성에서 원시 템플릿을 읽어 Mustache.render로
    렌더링하고 결과로 요소 내용을 바꿉니다.

    Args:
        markup_id: 대상 요소의 마크업 ID
        json_text: 직렬화된 JSON 스코프

    Returns:
        JavaScript 문장

    Examples:
        >>> create_render_script("panel1", '{"a":1}')
        '$("#panel1").html(Mustache.render($("#panel1").attr(\\'data-template\\'), {"a":1}))'
    """
    selector = f'$("#{markup_id}")'
    return (
        f"{selector}.html(Mustache.render({selector}.attr('{DATA_TEMPLATE_ATTRIBUTE}'), "
        f"{_escape_script_payload(json_text)}))"
    )


def on_dom_ready(script: str) -> str:
    """DOM 준비 후 실행되도록 스크립트를 감싸기 (jQuery)"""
    return f"$(function(){{{script};}});"


def create_lazy_load_script(callback_url: str, delay_ms: int = 0) -> str:
    """
    지연 로딩 스크립트 생성

    delay_ms 후 콜백 URL을 호출하고, 응답으로 받은 렌더링 스크립트를 실행합니다.

    Args:
        callback_url: AJAX 콜백 URL
        delay_ms: 지연 시간 (밀리초)

    Returns:
        JavaScript 문장
    """
    return f'setTimeout(function(){{$.getScript("{callback_url}");}}, {int(delay_ms)});'
