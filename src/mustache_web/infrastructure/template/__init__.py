"""
Template Infrastructure

pystache 엔진, 템플릿 리소스, HTML 이스케이프
"""

from .markup import escape_markup
from .pystache_template_engine import PystacheTemplateEngine
from .resources import FileResource, PackageResource, StringResource, read_string

__all__ = [
    "escape_markup",
    "PystacheTemplateEngine",
    "FileResource",
    "PackageResource",
    "StringResource",
    "read_string",
]
