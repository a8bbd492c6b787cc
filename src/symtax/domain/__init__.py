"""Domain layer — transaction types, taxonomy templates, and the matching engine.

This layer depends only on stdlib.
It must never import from services, infrastructure, commands, or config.
"""
