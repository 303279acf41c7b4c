"""
FastAPI host for mustache-web
"""
