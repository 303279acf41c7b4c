"""
Domain Layer

스코프 모델, 템플릿 이름 규칙, 에러 체계
"""
