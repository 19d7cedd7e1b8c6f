"""Domain layer — group specifications, resolution, and errors.

This layer depends only on stdlib and pydantic.
It must never import from services, commands, output, or config.
"""
