"""
Shared pytest fixtures for pattern catalog tests.
"""
import os
import sys
import pytest

# Ensure backend root is on sys.path so `pattern_catalog.*` imports work
sys.path.insert(0, os.path.dirname(__file__))

# Keep tests on the built-in catalog regardless of the developer's .env
os.environ["CATALOG_SOURCE"] = ""

from pattern_catalog.entries import Category, PatternEntry
from pattern_catalog.patterns import Catalog


@pytest.fixture
def builder():
    return PatternEntry(
        name="Builder",
        category=Category.CREATIONAL,
        summary="Separates construction from representation.",
        applicability=["Complex objects assembled step by step"],
        known_uses=["Query builders"],
        notes=["Often fluent"],
        related_patterns={"Composite"},
        tags=["construction"],
    )


@pytest.fixture
def small_catalog(builder):
    """Builder, Composite, Observer and Singleton, in that order."""
    return Catalog([
        builder,
        PatternEntry(
            name="Composite",
            category="Structural",
            summary="Treats parts and wholes uniformly.",
            related_patterns={"Builder"},
            tags=["tree"],
        ),
        PatternEntry(
            name="Observer",
            category="Behavioral",
            summary="Notifies dependents of state changes.",
            tags=["events"],
        ),
        PatternEntry(
            name="Singleton",
            category="Creational",
            summary="One instance with a global access point.",
        ),
    ])
