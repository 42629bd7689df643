"""Service layer: engine operations wrapped in ServiceResult.

Services may import from domain, engine and infrastructure.
They must never import from commands or output.
"""
