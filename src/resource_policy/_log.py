"""Diagnostic logging for authorization decisions."""

from __future__ import annotations

import logging

__all__ = ["log_attribute_decision", "log_missing_policy", "log_policy_decision"]

logger = logging.getLogger("resource_policy")


def log_policy_decision(
    *,
    policy: object,
    action: str,
    allowed: bool,
) -> None:
    """Log a single action decision.

    Logging levels:
    - INFO: Summary (policy class, action, outcome)
    - DEBUG: Detailed (bound principal and resource)

    Example::

        log_policy_decision(policy=post_policy, action="show", allowed=True)
    """
    policy_name = type(policy).__name__
    outcome = "allowed" if allowed else "denied"

    logger.info("Policy decision: %s.%s -> %s", policy_name, action, outcome)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Decision details for %s.%s: principal=%r resource=%r",
            policy_name,
            action,
            getattr(policy, "principal", None),
            getattr(policy, "resource", None),
        )


def log_attribute_decision(
    *,
    resource: object,
    attribute: str,
    engine: str,
    changed: bool,
    allowed: bool,
) -> None:
    """Log an attribute-change decision at INFO level."""
    logger.info(
        "Attribute decision: %s.%s (%s) changed=%s -> %s",
        type(resource).__name__,
        attribute,
        engine,
        changed,
        "allowed" if allowed else "denied",
    )


def log_missing_policy(*, resource_type: type) -> None:
    """Log a deny-by-default caused by an unregistered resource type."""
    logger.warning(
        "No policy registered for %s - deny-by-default applied",
        resource_type.__name__,
    )
