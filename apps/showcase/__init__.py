"""
Component Showcase: example pages for form binding and XML rendering
"""
from .showcase_app import ShowcaseApp, create_app, main

__version__ = '1.0.0'

__all__ = ['ShowcaseApp', 'create_app', 'main']
