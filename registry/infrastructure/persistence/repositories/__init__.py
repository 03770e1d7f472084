"""Repositories over the hosted relational store."""

from registry.infrastructure.persistence.repositories.writer_repo import WriterRepository

__all__ = ["WriterRepository"]
