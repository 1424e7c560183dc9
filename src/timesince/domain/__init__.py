"""Domain layer — instants, format tags, and the elapsed-time breakdown.

This layer depends only on stdlib, pydantic, and python-dateutil.
It must never import from services, i18n, commands, or config.
"""
