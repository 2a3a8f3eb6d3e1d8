"""
Core utilities and configuration for ShopMesh.

This package provides core functionality including logging configuration,
settings and the error hierarchy shared across the project.
"""

from shopmesh.core.logging_config import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
