"""
Person display record
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Person:
    name: str
    last_name: str
