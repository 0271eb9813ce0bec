"""
Configuration package
"""
from .settings import ShowcaseConfig

__all__ = ['ShowcaseConfig']
