"""
Infrastructure Layer
====================

Configuration, logging setup and JSON file helpers.
"""
