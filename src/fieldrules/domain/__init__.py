"""Domain layer: rules, outcomes, contexts, and messages.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, config, or output.
"""
