"""
Domain Layer
============

Contains the entities, value objects, repository and domain services.
This layer is independent of configuration and file formats.
"""
