"""
XPath queries over employee documents.

Two layouts are supported:
- "emp": flat /content/emp/employee elements linked through @mgr
- "emp-hier": nested employee elements, subordinates inside their manager

Every employee carries @empno and @deptno attributes and ename/sal children.
Caller-supplied values are bound as XPath variables ($deptno, $empno).
"""

from dataclasses import dataclass
from enum import Enum
from typing import BinaryIO, List, Optional, Union

from lxml import etree

from skillbench.contexts.markup.logger import log_query
from skillbench.exceptions import MissingElementError

XPathValue = Union[str, int, float]
Document = Union[etree._ElementTree, etree._Element]


class DocType(str, Enum):
    EMP = "emp"
    EMP_HIER = "emp-hier"


# =============================================================================
# QUERY EXPRESSIONS
# =============================================================================


@dataclass(frozen=True)
class EmpQueries:
    """Expressions for the flat "emp" layout."""

    EMPLOYEES: str = "/content/emp/employee[@deptno = $deptno]"
    HIGHEST_PAID: str = "/content/emp/employee[not(sal < /content/emp/employee/sal)]"
    HIGHEST_PAID_IN_DEPT: str = (
        "/content/emp/employee[@deptno = $deptno]"
        "[not(sal < /content/emp/employee[@deptno = $deptno]/sal)]"
    )
    TOP_MANAGEMENT: str = "/content/emp/employee[not(@mgr)]"
    ORDINARY_EMPLOYEES: str = "/content/emp/employee[not(@empno = /content/emp/employee/@mgr)]"
    COWORKERS: str = (
        "/content/emp/employee"
        "[not(@empno = $empno) and @mgr = /content/emp/employee[@empno = $empno]/@mgr]"
    )


@dataclass(frozen=True)
class EmpHierQueries:
    """Expressions for the nested "emp-hier" layout."""

    EMPLOYEES: str = "//employee[@deptno = $deptno]"
    HIGHEST_PAID: str = "//employee[not(sal < //employee/sal)]"
    HIGHEST_PAID_IN_DEPT: str = "//employee[@deptno = $deptno][not(sal < //employee[@deptno = $deptno]/sal)]"
    TOP_MANAGEMENT: str = "/employee"
    ORDINARY_EMPLOYEES: str = "//employee[not(employee)]"
    COWORKERS: str = "//employee[@empno = $empno]/../employee[not(@empno = $empno)]"


_QUERIES = {DocType.EMP: EmpQueries, DocType.EMP_HIER: EmpHierQueries}


def _select(src: Document, doc_type: Union[DocType, str], query: str, **variables: XPathValue) -> List[etree._Element]:
    expression = getattr(_QUERIES[DocType(doc_type)], query)
    nodes = src.xpath(expression, **variables)
    log_query(query, expression, variables, len(nodes))
    return nodes


# =============================================================================
# DOCUMENT LOADING
# =============================================================================


def load_document(source: Union[str, BinaryIO]) -> etree._ElementTree:
    """
    Parse an employee document from a path or binary stream.

    Raises:
        lxml.etree.XMLSyntaxError: If the document is not well-formed
        OSError: If the file cannot be read
    """
    return etree.parse(source)


# =============================================================================
# QUERIES
# =============================================================================


def get_employees(src: Document, deptno: XPathValue, doc_type: Union[DocType, str]) -> List[etree._Element]:
    """All employees of department deptno, in document order."""
    return _select(src, doc_type, "EMPLOYEES", deptno=deptno)


def get_highest_paid(src: Document, doc_type: Union[DocType, str], deptno: Optional[XPathValue] = None) -> str:
    """
    Name of the best-paid employee, overall or within department deptno.

    Any of them when several share the top salary (the first in document
    order is returned).

    Raises:
        MissingElementError: If no employee qualifies (e.g. unknown deptno)
    """
    if deptno is None:
        candidates = _select(src, doc_type, "HIGHEST_PAID")
    else:
        candidates = _select(src, doc_type, "HIGHEST_PAID_IN_DEPT", deptno=deptno)
    if not candidates:
        raise MissingElementError(
            "No employee found", element="employee", snippet=None if deptno is None else f"deptno={deptno}"
        )
    return candidates[0].findtext("ename")


def get_top_management(src: Document, doc_type: Union[DocType, str]) -> List[etree._Element]:
    """Employees without a manager above them."""
    return _select(src, doc_type, "TOP_MANAGEMENT")


def get_ordinary_employees(src: Document, doc_type: Union[DocType, str]) -> List[etree._Element]:
    """Employees with no subordinates."""
    return _select(src, doc_type, "ORDINARY_EMPLOYEES")


def get_coworkers(src: Document, empno: XPathValue, doc_type: Union[DocType, str]) -> List[etree._Element]:
    """Employees sharing a manager with employee empno, excluding empno itself."""
    return _select(src, doc_type, "COWORKERS", empno=empno)
