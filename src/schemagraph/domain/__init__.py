"""Domain layer: metadata snapshots, graph model, join results and enums.

This layer depends only on stdlib and pydantic.
It must never import from engine, services, infrastructure, commands, or config.
"""
