"""Utilities for processing, rendering, and writing API documentation pages."""

from .index_builder import IndexBuilder
from .metadata import build_meta, process
from .renderer import ContentKind, HtmlContentRenderer, render, text
from .site import GenerationReport, generate_site
from .strikethrough import StrikethroughExtension
from .suite_generator import GeneratedDocument, SuiteGenerator
from .toc import check_anchors, route_link, with_routes

__all__ = [
    "ContentKind",
    "GeneratedDocument",
    "GenerationReport",
    "HtmlContentRenderer",
    "IndexBuilder",
    "StrikethroughExtension",
    "SuiteGenerator",
    "build_meta",
    "check_anchors",
    "generate_site",
    "process",
    "render",
    "route_link",
    "text",
    "with_routes",
]
