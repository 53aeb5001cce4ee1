"""
CloudWatch check Python package.

This package hosts the measurement-configuration and query-construction engine,
the CloudWatch provider adapter, built-in service presets, and the one-shot
check CLI.
"""

from .__version__ import __version__

__all__ = ["__version__"]
