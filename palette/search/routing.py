"""Navigation targets for remote search hits."""

from __future__ import annotations

from urllib.parse import quote

from .contracts import QuickAction, RemoteResultItem, SearchDomain

_ENTITY_ROUTES = {
    SearchDomain.CUSTOMER.value: "/customers/{id}",
    SearchDomain.INVOICE.value: "/invoices/{id}",
    SearchDomain.REPAIR.value: "/repairs/{id}",
    SearchDomain.INSTALLMENT.value: "/installment-sales/{id}",
}

_LISTING_ROUTES = {
    SearchDomain.PRODUCT.value: "/products",
    SearchDomain.PHONE.value: "/mobile-phones",
    SearchDomain.SERVICE.value: "/services",
}

_ACTION_ROUTES = {
    (SearchDomain.INSTALLMENT.value, QuickAction.PAY_NEXT): "/installment-sales/{id}?pay=next",
    (SearchDomain.REPAIR.value, QuickAction.RECEIPT): "/repairs/{id}/receipt",
    (SearchDomain.INVOICE.value, QuickAction.PRINT): "/invoices/{id}?autoPrint=1",
}


def default_path(item: RemoteResultItem, term: str) -> str:
    """Return the path opened when a hit is activated without a quick action."""

    domain = item.domain
    if domain in _ENTITY_ROUTES:
        return _ENTITY_ROUTES[domain].format(id=item.id)
    if domain in _LISTING_ROUTES:
        return f"{_LISTING_ROUTES[domain]}?q={quote(term.strip(), safe='')}"
    return "/"


def action_path(item: RemoteResultItem, action: QuickAction | None, term: str) -> str:
    """Return the path for a quick action, falling back to the default target."""

    if action is not None:
        template = _ACTION_ROUTES.get((item.domain, QuickAction(action)))
        if template is not None:
            return template.format(id=item.id)
    return default_path(item, term)


def available_actions(item: RemoteResultItem) -> list[QuickAction]:
    """Quick actions offered for a hit, ``OPEN`` always last."""

    actions = [action for (domain, action) in _ACTION_ROUTES if domain == item.domain]
    actions.append(QuickAction.OPEN)
    return actions


__all__ = ["action_path", "available_actions", "default_path"]
