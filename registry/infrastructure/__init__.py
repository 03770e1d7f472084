"""Infrastructure layer: REST client, repositories, search index, index sync.

Implements the protocols in registry.application.interfaces.
"""
