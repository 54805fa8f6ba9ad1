"""Domain layer — identities, commitments, admin state, and event payloads.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
