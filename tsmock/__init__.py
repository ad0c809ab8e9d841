"""
tsmock - Mock HTTP server generated from route-annotated TypeScript interfaces.

This package scans a TypeScript source tree for interfaces preceded by a
``// route /path`` comment, reduces them to primitive schemas, and serves one
GET endpoint per route that answers with freshly generated JSON.
"""

__version__ = "0.1.0"
__license__ = "MIT"

# Public API
from tsmock.analyzers.analyzer_factory import AnalyzerFactory
from tsmock.models.domain_models import Entity, PrimitiveType, Property, SourceUnit
from tsmock.server.mock_service import MockService, build_service

__all__ = [
    "AnalyzerFactory",
    "Entity",
    "PrimitiveType",
    "Property",
    "SourceUnit",
    "MockService",
    "build_service",
]
