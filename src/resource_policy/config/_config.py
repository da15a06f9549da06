"""Layered configuration for resource-policy."""

from __future__ import annotations

from dataclasses import dataclass

from resource_policy._types import OnMissingPolicy

__all__ = [
    "AuthzConfig",
    "configure",
    "get_global_config",
    "_reset_global_config",
    "_set_global_config",
]

_VALID_POLICIES: set[str] = {"deny", "raise"}


@dataclass(frozen=True, slots=True)
class AuthzConfig:
    """Immutable configuration with merge semantics.

    Attributes:
        on_missing_policy: Behavior of ``can``/``authorize`` when no policy
            class is registered for the resource type.
            ``"deny"`` returns ``False`` (and logs a warning).
            ``"raise"`` raises ``NoPolicyError``.
        log_policy_decisions: Emit INFO/DEBUG records on the
            ``resource_policy`` logger for every decision.

    Example::

        config = AuthzConfig(on_missing_policy="raise")
        merged = config.merge(log_policy_decisions=True)
    """

    on_missing_policy: OnMissingPolicy = "deny"
    log_policy_decisions: bool = False

    def __post_init__(self) -> None:
        if self.on_missing_policy not in _VALID_POLICIES:
            raise ValueError(
                f"on_missing_policy must be one of {_VALID_POLICIES!r}, "
                f"got {self.on_missing_policy!r}"
            )

    def merge(
        self,
        *,
        on_missing_policy: OnMissingPolicy | None = None,
        log_policy_decisions: bool | None = None,
    ) -> AuthzConfig:
        """Return a new config with non-None overrides applied.

        Args:
            on_missing_policy: Override for on_missing_policy (ignored if None).
            log_policy_decisions: Override for log_policy_decisions (ignored if None).

        Returns:
            A new ``AuthzConfig`` with overrides merged.
        """
        return AuthzConfig(
            on_missing_policy=(
                on_missing_policy if on_missing_policy is not None else self.on_missing_policy
            ),
            log_policy_decisions=(
                log_policy_decisions
                if log_policy_decisions is not None
                else self.log_policy_decisions
            ),
        )


# ---------------------------------------------------------------------------
# Global configuration singleton
# ---------------------------------------------------------------------------

_global_config = AuthzConfig()


def get_global_config() -> AuthzConfig:
    """Return the current global configuration."""
    return _global_config


def configure(
    *,
    on_missing_policy: OnMissingPolicy | None = None,
    log_policy_decisions: bool | None = None,
) -> AuthzConfig:
    """Update the global configuration by merging overrides.

    Only non-None values are applied. Returns the new global config.

    Args:
        on_missing_policy: Set to ``"deny"`` or ``"raise"``.
        log_policy_decisions: Enable/disable decision logging.

    Returns:
        The updated global ``AuthzConfig``.

    Example::

        configure(on_missing_policy="raise")
        # can() now raises NoPolicyError for unregistered resource types
    """
    global _global_config
    _global_config = _global_config.merge(
        on_missing_policy=on_missing_policy,
        log_policy_decisions=log_policy_decisions,
    )
    return _global_config


def _set_global_config(cfg: AuthzConfig) -> None:
    """Replace global config with an exact snapshot. For testing only."""
    global _global_config
    _global_config = cfg


def _reset_global_config() -> None:
    """Reset global config to defaults. For testing only."""
    global _global_config
    _global_config = AuthzConfig()
