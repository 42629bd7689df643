"""Infrastructure layer: reading metadata snapshots from disk.

Depends on stdlib, pydantic and the domain layer only.
It must never import from services, commands, or output.
"""
