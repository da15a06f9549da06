"""resource-policy testing utilities — MockPrincipal, assertions, and fixtures.

Provides test helpers for verifying policies:

- **MockPrincipal / factories**: Lightweight principals for tests.
- **Assertion helpers**: ``assert_permitted``, ``assert_forbidden``,
  ``assert_attribute_authorized``, ``assert_attribute_rejected``.
- **Fixtures**: ``policy_registry``, ``policy_config``, ``isolated_policy``.

Example::

    from resource_policy.testing import assert_forbidden, make_user

    def test_strangers_cannot_edit(post):
        assert_forbidden(PostPolicy(make_user(id=99), post), "update")
"""

from resource_policy.testing._actors import MockPrincipal, make_admin, make_anonymous, make_user
from resource_policy.testing._assertions import (
    assert_attribute_authorized,
    assert_attribute_rejected,
    assert_forbidden,
    assert_permitted,
)
from resource_policy.testing._fixtures import isolated_policy, policy_config, policy_registry
from resource_policy.testing._isolation import isolated_policy_state

__all__ = [
    "MockPrincipal",
    "assert_attribute_authorized",
    "assert_attribute_rejected",
    "assert_forbidden",
    "assert_permitted",
    "isolated_policy",
    "isolated_policy_state",
    "make_admin",
    "make_anonymous",
    "make_user",
    "policy_config",
    "policy_registry",
]
