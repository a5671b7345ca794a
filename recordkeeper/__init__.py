"""
Record Keeper
=============

Typed, in-memory record keeping built with Pydantic V2 and small
Domain-Driven Design building blocks.

Key Features:
- Generic keyed repository with validated CRUD operations
- Account transactions with a per-account balance policy
- Client and medication order grouping
- Typed stock repositories for tech and food products
- Grade reports from comma-separated learner files
- JSON-backed stock log
"""

__version__ = "1.0.0"
