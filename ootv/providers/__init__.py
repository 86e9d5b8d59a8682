"""
OOTV Card Data Providers
"""
from .abstract_provider import AbstractProvider
from .oracle import OracleProvider

__all__ = ["AbstractProvider", "OracleProvider"]
