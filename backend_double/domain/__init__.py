"""Domain layer for the backend double.

This layer contains:
- Interfaces: the backend surface and its collaborators
- Value Objects: immutable chain, DAG and staking records
- Entities: per-operation state
- Helpers: operation markers and type projection

The domain layer depends on the Python stdlib only.
"""
