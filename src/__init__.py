"""
Things Service - Source Package

This package contains the serverless Things CRUD service: four independent
Lambda functions behind an HTTP API, backed by Aurora through the RDS Data API.
"""

__version__ = "1.0.0"

# Package metadata
__all__ = [
    "__version__",
]
