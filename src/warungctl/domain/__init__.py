"""Domain layer — site document, validation, cart and checkout.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
