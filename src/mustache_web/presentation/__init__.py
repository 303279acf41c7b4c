"""
Presentation Layer

Structure:
- components: host component model, mustache panels and behaviors
- web: FastAPI host (install, sample app)
- cli: click command line interface
"""
