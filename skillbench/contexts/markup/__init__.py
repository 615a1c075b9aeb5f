"""
Markup Context

Responsibilities:
- Builds single-element XML documents
- Sniffs root element names from XML streams
- Runs XPath queries over employee documents

Owns: XML serialization and XPath expressions
Never: Validates documents against schemas
"""

from skillbench.contexts.markup.simple_xml import create_xml, parse_root_element
from skillbench.contexts.markup.xpath_caller import (
    DocType,
    get_coworkers,
    get_employees,
    get_highest_paid,
    get_ordinary_employees,
    get_top_management,
    load_document,
)

__all__ = [
    "DocType",
    "create_xml",
    "get_coworkers",
    "get_employees",
    "get_highest_paid",
    "get_ordinary_employees",
    "get_top_management",
    "load_document",
    "parse_root_element",
]
