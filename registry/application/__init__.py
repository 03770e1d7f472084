"""Application layer: use cases, DTOs, ports, and services.

Depends on the domain layer only; infrastructure is injected through the
protocols in registry.application.interfaces.
"""
