"""Method registry tagging REST methods that support listing.

Architecture:
    Only methods that page their results with ``start``/``next``/``total``
    can be used with automatic listing. The registry records that tag per
    method name so the orchestrator can fail fast before any request is
    sent. Built-in methods are registered at import; applications can add
    their own (custom entity types, app methods) through ``register``.

See Also:
    - ListOrchestrator: rejects non-listable methods using this registry
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .exceptions import MethodNotListableError, ValidationError


class Method(str, Enum):
    """Known REST methods."""

    BATCH = "batch"

    COMPANY_ADD = "crm.company.add"
    COMPANY_DELETE = "crm.company.delete"
    COMPANY_FIELDS = "crm.company.fields"
    COMPANY_GET = "crm.company.get"
    COMPANY_LIST = "crm.company.list"
    COMPANY_UPDATE = "crm.company.update"

    CONTACT_ADD = "crm.contact.add"
    CONTACT_DELETE = "crm.contact.delete"
    CONTACT_FIELDS = "crm.contact.fields"
    CONTACT_GET = "crm.contact.get"
    CONTACT_LIST = "crm.contact.list"
    CONTACT_UPDATE = "crm.contact.update"

    DEAL_ADD = "crm.deal.add"
    DEAL_DELETE = "crm.deal.delete"
    DEAL_FIELDS = "crm.deal.fields"
    DEAL_GET = "crm.deal.get"
    DEAL_LIST = "crm.deal.list"
    DEAL_UPDATE = "crm.deal.update"

    LEAD_ADD = "crm.lead.add"
    LEAD_DELETE = "crm.lead.delete"
    LEAD_FIELDS = "crm.lead.fields"
    LEAD_GET = "crm.lead.get"
    LEAD_LIST = "crm.lead.list"
    LEAD_UPDATE = "crm.lead.update"

    ITEM_GET = "crm.item.get"
    ITEM_LIST = "crm.item.list"

    STATUS_FIELDS = "crm.status.fields"
    STATUS_GET = "crm.status.get"
    STATUS_LIST = "crm.status.list"

    CURRENCY_LIST = "crm.currency.list"

    USER_CURRENT = "user.current"
    USER_FIELDS = "user.fields"
    USER_GET = "user.get"

    DEPARTMENT_GET = "department.get"

    TASK_LIST = "tasks.task.list"


@dataclass(frozen=True)
class MethodSpec:
    """Registration metadata for a REST method.

    Attributes:
        name: Method name as sent to the API (e.g. "crm.deal.list")
        listable: Whether the method pages results with start/next/total
    """

    name: str
    listable: bool = False


_LISTABLE = frozenset(
    {
        Method.COMPANY_LIST,
        Method.CONTACT_LIST,
        Method.DEAL_LIST,
        Method.LEAD_LIST,
        Method.ITEM_LIST,
        Method.STATUS_LIST,
        Method.CURRENCY_LIST,
        Method.USER_GET,
        Method.DEPARTMENT_GET,
        Method.TASK_LIST,
    }
)


class MethodRegistry:
    """Registry of REST methods and their listing support."""

    def __init__(self) -> None:
        self._specs: dict[str, MethodSpec] = {}

    def register(self, name: str | Method, *, listable: bool = False) -> MethodSpec:
        """Register a method.

        Args:
            name: Method name or Method member
            listable: Whether the method supports automatic listing

        Returns:
            The stored MethodSpec

        Raises:
            ValidationError: If the method name is empty
        """
        key = method_name(name)
        if not key:
            raise ValidationError("Method name cannot be empty")
        spec = MethodSpec(name=key, listable=listable)
        self._specs[key] = spec
        return spec

    def get(self, name: str | Method) -> MethodSpec | None:
        return self._specs.get(method_name(name))

    def is_listable(self, name: str | Method) -> bool:
        spec = self.get(name)
        return spec is not None and spec.listable

    def require_listable(self, name: str | Method) -> str:
        """Return the method name, raising if it does not support listing."""
        if not self.is_listable(name):
            raise MethodNotListableError(method_name(name))
        return method_name(name)

    def listable_methods(self) -> list[str]:
        return sorted(name for name, spec in self._specs.items() if spec.listable)

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        return method_name(name) in self._specs


def method_name(name: str | Method) -> str:
    """Return the name sent to the API for a method name or Method member."""
    return name.value if isinstance(name, Method) else str(name)


def _build_default_registry() -> MethodRegistry:
    registry = MethodRegistry()
    for method in Method:
        registry.register(method, listable=method in _LISTABLE)
    return registry


# Global singleton instance
_default_registry: MethodRegistry | None = None


def get_method_registry() -> MethodRegistry:
    """Get the global method registry singleton (created on first access)."""
    global _default_registry
    if _default_registry is None:
        _default_registry = _build_default_registry()
    return _default_registry


def is_listable(name: str | Method) -> bool:
    """Check a method against the global registry."""
    return get_method_registry().is_listable(name)
