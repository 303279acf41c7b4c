"""
Application Ports

Infrastructure 계층이 구현하는 인터페이스
"""

from .template_port import ITemplateResource, ITemplateEngine, PartialLookup

__all__ = [
    "ITemplateResource",
    "ITemplateEngine",
    "PartialLookup",
]
