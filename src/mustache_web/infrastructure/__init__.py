"""
Infrastructure Layer

Implementations of application ports and ambient services

Structure:
- config: JSON settings loader and environment overrides
- logging: structlog based structured logging
- template: pystache engine, template resources, HTML escaping
- serialization: JSON conversion helper
"""
