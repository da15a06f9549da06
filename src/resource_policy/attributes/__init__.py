"""Attribute-level authorization for resource updates."""

from resource_policy.attributes._authorizer import AttributeAuthorizer

__all__ = ["AttributeAuthorizer"]
