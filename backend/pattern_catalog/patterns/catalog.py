# backend/pattern_catalog/patterns/catalog.py
"""
Pattern Catalog - Built-in design patterns and paradigms

The classic creational, structural and behavioral patterns, plus a few
programming paradigms filed under Other.
"""

import logging
from typing import List, Optional

from pattern_catalog import config
from pattern_catalog.entries import Category, PatternEntry
from pattern_catalog.patterns.registry import Catalog

logger = logging.getLogger(__name__)


# ============================================================
# CREATIONAL PATTERNS
# ============================================================

SINGLETON_PATTERN = PatternEntry(
    name="Singleton",
    category=Category.CREATIONAL,
    summary="Restricts a class to a single instance and provides a global point of access to it.",
    applicability=[
        "Exactly one instance of a class must exist and be reachable from a well-known place",
        "The sole instance should be extensible by subclassing",
    ],
    known_uses=["Configuration registries", "Logging facilities", "Connection pools"],
    notes=[
        "In JavaScript a closure over a private variable is the usual way to build one",
        "Hides dependencies and makes testing harder when overused",
    ],
    related_patterns={"Abstract Factory", "Builder", "Prototype", "Facade"},
    tags=["instance", "global"],
)

FACTORY_METHOD_PATTERN = PatternEntry(
    name="Factory Method",
    category=Category.CREATIONAL,
    summary="Defines an interface for creating an object but lets subclasses decide which class to instantiate.",
    applicability=[
        "A class cannot anticipate the class of objects it must create",
        "A class wants its subclasses to specify the objects it creates",
    ],
    known_uses=["UI toolkits creating platform widgets", "Document editors creating document types"],
    notes=["A plain function returning a new object literal is the simplest form"],
    related_patterns={"Abstract Factory", "Template Method", "Prototype"},
    tags=["factory", "instantiation"],
)

ABSTRACT_FACTORY_PATTERN = PatternEntry(
    name="Abstract Factory",
    category=Category.CREATIONAL,
    summary="Provides an interface for creating families of related objects without specifying their concrete classes.",
    applicability=[
        "A system should be independent of how its products are created",
        "A family of related products is designed to be used together",
    ],
    known_uses=["Cross-platform widget toolkits", "Database driver families"],
    related_patterns={"Factory Method", "Singleton", "Prototype"},
    tags=["factory", "families"],
)

BUILDER_PATTERN = PatternEntry(
    name="Builder",
    category=Category.CREATIONAL,
    summary="Separates construction from representation.",
    applicability=[
        "The algorithm for creating a complex object should be independent of its parts",
        "The construction process must allow different representations",
    ],
    known_uses=["Query builders", "HTTP request builders", "Document converters"],
    notes=["Method chaining that returns the builder keeps call sites readable"],
    related_patterns={"Abstract Factory", "Composite"},
    tags=["construction", "fluent"],
)

PROTOTYPE_PATTERN = PatternEntry(
    name="Prototype",
    category=Category.CREATIONAL,
    summary="Creates new objects by copying an existing instance.",
    applicability=[
        "The classes to instantiate are specified at run time",
        "Instances of a class can have one of only a few combinations of state",
    ],
    known_uses=["JavaScript prototype chains", "Graphic editors duplicating shapes"],
    notes=["Deep and shallow copies must be chosen deliberately"],
    related_patterns={"Abstract Factory", "Composite", "Decorator"},
    tags=["cloning"],
)


# ============================================================
# STRUCTURAL PATTERNS
# ============================================================

ADAPTER_PATTERN = PatternEntry(
    name="Adapter",
    category=Category.STRUCTURAL,
    summary="Converts the interface of a class into another interface that clients expect.",
    applicability=[
        "An existing class has an interface that does not match the one needed",
        "A reusable class must cooperate with unrelated classes",
    ],
    known_uses=["Wrapping legacy APIs", "Normalizing third-party SDK responses"],
    related_patterns={"Bridge", "Decorator", "Proxy"},
    tags=["wrapper", "interface"],
)

BRIDGE_PATTERN = PatternEntry(
    name="Bridge",
    category=Category.STRUCTURAL,
    summary="Decouples an abstraction from its implementation so the two can vary independently.",
    applicability=[
        "Both abstractions and implementations should be extensible by subclassing",
        "Implementation changes must not affect clients",
    ],
    known_uses=["Device drivers behind a common API", "Rendering backends"],
    related_patterns={"Abstract Factory", "Adapter"},
    tags=["abstraction"],
)

COMPOSITE_PATTERN = PatternEntry(
    name="Composite",
    category=Category.STRUCTURAL,
    summary="Composes objects into tree structures and lets clients treat individual objects and compositions uniformly.",
    applicability=["Part-whole hierarchies of objects must be represented"],
    known_uses=["DOM trees", "File system directories", "GUI containers"],
    related_patterns={"Decorator", "Flyweight", "Iterator", "Visitor"},
    tags=["tree", "hierarchy"],
)

DECORATOR_PATTERN = PatternEntry(
    name="Decorator",
    category=Category.STRUCTURAL,
    summary="Attaches additional responsibilities to an object dynamically.",
    applicability=[
        "Responsibilities should be added to individual objects without affecting others",
        "Extension by subclassing is impractical",
    ],
    known_uses=["Stream wrappers", "Middleware chains", "Python function decorators"],
    notes=["Keeps the wrapped object's interface intact"],
    related_patterns={"Adapter", "Composite", "Strategy"},
    tags=["wrapper"],
)

FACADE_PATTERN = PatternEntry(
    name="Facade",
    category=Category.STRUCTURAL,
    summary="Provides a unified, simpler interface to a set of interfaces in a subsystem.",
    applicability=["A simple interface to a complex subsystem is needed"],
    known_uses=["jQuery over the DOM API", "SDK client objects"],
    related_patterns={"Abstract Factory", "Mediator", "Singleton"},
    tags=["interface", "subsystem"],
)

FLYWEIGHT_PATTERN = PatternEntry(
    name="Flyweight",
    category=Category.STRUCTURAL,
    summary="Shares fine-grained objects to support large numbers of them efficiently.",
    applicability=[
        "An application uses a large number of objects",
        "Most object state can be made extrinsic",
    ],
    known_uses=["Glyph caches in text editors", "Interned strings"],
    related_patterns={"Composite", "State", "Strategy"},
    tags=["memory", "sharing"],
)

PROXY_PATTERN = PatternEntry(
    name="Proxy",
    category=Category.STRUCTURAL,
    summary="Provides a surrogate or placeholder for another object to control access to it.",
    applicability=[
        "Access to an object should be lazy, remote or protected",
    ],
    known_uses=["Lazy-loading images", "ORM relationship proxies", "Access-control wrappers"],
    related_patterns={"Adapter", "Decorator"},
    tags=["wrapper", "access"],
)


# ============================================================
# BEHAVIORAL PATTERNS
# ============================================================

CHAIN_OF_RESPONSIBILITY_PATTERN = PatternEntry(
    name="Chain of Responsibility",
    category=Category.BEHAVIORAL,
    summary="Passes a request along a chain of handlers until one of them handles it.",
    applicability=["More than one object may handle a request and the handler is not known a priori"],
    known_uses=["Event bubbling", "HTTP middleware pipelines"],
    related_patterns={"Composite", "Command"},
    tags=["handlers", "pipeline"],
)

COMMAND_PATTERN = PatternEntry(
    name="Command",
    category=Category.BEHAVIORAL,
    summary="Encapsulates a request as an object.",
    applicability=[
        "Operations should be queued, logged or undone",
        "Callers should be decoupled from the objects that perform the work",
    ],
    known_uses=["Undo stacks", "Job queues", "Menu actions"],
    related_patterns={"Composite", "Memento", "Prototype"},
    tags=["undo", "request"],
)

ITERATOR_PATTERN = PatternEntry(
    name="Iterator",
    category=Category.BEHAVIORAL,
    summary="Provides a way to access the elements of an aggregate sequentially without exposing its representation.",
    known_uses=["Language-level iteration protocols", "Database cursors"],
    related_patterns={"Composite", "Memento"},
    tags=["traversal"],
)

MEDIATOR_PATTERN = PatternEntry(
    name="Mediator",
    category=Category.BEHAVIORAL,
    summary="Defines an object that encapsulates how a set of objects interact.",
    applicability=["A set of objects communicate in well-defined but complex ways"],
    known_uses=["Chat rooms", "Air traffic control", "Form controllers"],
    related_patterns={"Facade", "Observer"},
    tags=["coordination"],
)

MEMENTO_PATTERN = PatternEntry(
    name="Memento",
    category=Category.BEHAVIORAL,
    summary="Captures and externalizes an object's internal state so it can be restored later.",
    known_uses=["Editor undo history", "Game save states"],
    related_patterns={"Command", "Iterator"},
    tags=["undo", "state"],
)

OBSERVER_PATTERN = PatternEntry(
    name="Observer",
    category=Category.BEHAVIORAL,
    summary="Defines a one-to-many dependency so that dependents are notified when one object changes state.",
    applicability=[
        "A change to one object requires changing others",
        "An object should notify others without knowing who they are",
    ],
    known_uses=["Event emitters", "Reactive UI bindings", "Publish/subscribe systems"],
    notes=["Subscribers that are never removed leak memory"],
    related_patterns={"Mediator", "Singleton"},
    tags=["events", "pubsub"],
)

STATE_PATTERN = PatternEntry(
    name="State",
    category=Category.BEHAVIORAL,
    summary="Lets an object alter its behavior when its internal state changes.",
    applicability=["An object's behavior depends on its state and changes at run time"],
    known_uses=["Traffic light controllers", "TCP connection states", "Workflow engines"],
    related_patterns={"Flyweight", "Singleton", "Strategy"},
    tags=["state machine"],
)

STRATEGY_PATTERN = PatternEntry(
    name="Strategy",
    category=Category.BEHAVIORAL,
    summary="Defines a family of interchangeable algorithms and encapsulates each one.",
    applicability=[
        "Many related classes differ only in their behavior",
        "Different variants of an algorithm are needed",
    ],
    known_uses=["Sorting comparators", "Payment providers", "Compression codecs"],
    related_patterns={"Flyweight", "State", "Template Method"},
    tags=["algorithm"],
)

TEMPLATE_METHOD_PATTERN = PatternEntry(
    name="Template Method",
    category=Category.BEHAVIORAL,
    summary="Defines the skeleton of an algorithm and defers some steps to subclasses.",
    known_uses=["Framework lifecycle hooks", "Test fixture setup and teardown"],
    related_patterns={"Factory Method", "Strategy"},
    tags=["algorithm", "inheritance"],
)

VISITOR_PATTERN = PatternEntry(
    name="Visitor",
    category=Category.BEHAVIORAL,
    summary="Represents an operation to be performed on the elements of an object structure.",
    applicability=["New operations over a stable class hierarchy are added often"],
    known_uses=["Compiler AST passes", "Document exporters"],
    related_patterns={"Composite", "Iterator"},
    tags=["traversal", "double dispatch"],
)


# ============================================================
# PARADIGMS AND ARCHITECTURAL PATTERNS
# ============================================================

MODULE_PATTERN = PatternEntry(
    name="Module",
    category=Category.OTHER,
    summary="Groups related code behind a single public interface and keeps the rest private.",
    known_uses=["JavaScript IIFE modules", "Python packages"],
    related_patterns={"Facade", "Singleton"},
    tags=["encapsulation"],
)

MVC_PATTERN = PatternEntry(
    name="Model-View-Controller",
    category=Category.OTHER,
    summary="Separates an application into data, presentation and input handling.",
    known_uses=["Server-side web frameworks", "Desktop GUI applications"],
    related_patterns={"Observer", "Strategy", "Composite"},
    tags=["architecture", "ui"],
)

OBJECT_ORIENTED_PARADIGM = PatternEntry(
    name="Object-Oriented Programming",
    category=Category.OTHER,
    summary="Models programs as objects that bundle state with the behavior that acts on it.",
    notes=["Encapsulation, inheritance and polymorphism are its usual pillars"],
    tags=["paradigm"],
)

FUNCTIONAL_PARADIGM = PatternEntry(
    name="Functional Programming",
    category=Category.OTHER,
    summary="Builds programs from pure functions and immutable data.",
    notes=["Higher-order functions replace many behavioral patterns"],
    related_patterns={"Strategy", "Command"},
    tags=["paradigm"],
)


PATTERN_CATALOG = [
    SINGLETON_PATTERN,
    FACTORY_METHOD_PATTERN,
    ABSTRACT_FACTORY_PATTERN,
    BUILDER_PATTERN,
    PROTOTYPE_PATTERN,
    ADAPTER_PATTERN,
    BRIDGE_PATTERN,
    COMPOSITE_PATTERN,
    DECORATOR_PATTERN,
    FACADE_PATTERN,
    FLYWEIGHT_PATTERN,
    PROXY_PATTERN,
    CHAIN_OF_RESPONSIBILITY_PATTERN,
    COMMAND_PATTERN,
    ITERATOR_PATTERN,
    MEDIATOR_PATTERN,
    MEMENTO_PATTERN,
    OBSERVER_PATTERN,
    STATE_PATTERN,
    STRATEGY_PATTERN,
    TEMPLATE_METHOD_PATTERN,
    VISITOR_PATTERN,
    MODULE_PATTERN,
    MVC_PATTERN,
    OBJECT_ORIENTED_PARADIGM,
    FUNCTIONAL_PARADIGM,
]


def builtin_entries() -> List[PatternEntry]:
    """
    Fresh copies of the built-in entries.

    A catalog owns its entries, so two catalogs never share one object.
    """
    return [
        PatternEntry(
            name=p.name,
            category=p.category,
            summary=p.summary,
            applicability=p.applicability,
            known_uses=p.known_uses,
            notes=p.notes,
            related_patterns=p.related_patterns,
            tags=p.tags,
        )
        for p in PATTERN_CATALOG
    ]


def register_all_patterns(catalog: Catalog) -> None:
    """Add all built-in patterns to a catalog"""
    for entry in builtin_entries():
        catalog.add(entry)
    logger.info(f"[Catalog] Registered {len(PATTERN_CATALOG)} built-in patterns")


def build_catalog(source: Optional[str] = None) -> Catalog:
    """
    Build a catalog from `source` (a .json or .md file), or from the
    built-in patterns when no source is configured.
    """
    source = source if source is not None else config.CATALOG_SOURCE
    catalog = Catalog()

    if not source:
        register_all_patterns(catalog)
        return catalog

    from pattern_catalog.loader import load_path

    report = load_path(catalog, source)
    logger.info(f"[Catalog] Loaded {len(report.added)} patterns from {source}")
    return catalog
