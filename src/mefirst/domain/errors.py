"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain record does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as duplicate names."""


def transaction_not_found(transaction_id: int) -> str:
    """Return message for missing transaction."""
    return f"Transaction {transaction_id} not found"


def goal_not_found(goal_id: int) -> str:
    """Return message for missing goal."""
    return f"Goal {goal_id} not found"


def bucket_not_found(bucket_id: int) -> str:
    """Return message for missing budget bucket."""
    return f"Budget bucket {bucket_id} not found"


def recurring_not_found(recurring_id: int) -> str:
    """Return message for missing recurring expense."""
    return f"Recurring expense {recurring_id} not found"


def wishlist_item_not_found(item_id: int) -> str:
    """Return message for missing wishlist item."""
    return f"Wishlist item {item_id} not found"


def unknown_category(category: str) -> str:
    """Return message for a category that is not configured."""
    return f"Category '{category}' not found"


def amount_not_positive(field_name: str = "Amount") -> str:
    """Return message for zero or negative money amounts."""
    return f"{field_name} must be greater than zero"


def name_required(what: str) -> str:
    """Return message for a missing name on creation."""
    return f"{what} name is required"


def goal_link_required(kind: str) -> str:
    """Return message when a transfer or investment has no goal."""
    return f"A {kind} must be linked to a goal"
