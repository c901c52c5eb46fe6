from __future__ import annotations

from .variants import AnyResource, Tag


class UnwrapError(Exception):
    """unsafe() was called on a Resource that is not Succeded."""

    resource: AnyResource

    def __init__(self, resource: AnyResource) -> None:
        self.resource = resource
        super().__init__(f"Cannot unwrap {resource.tag} resource: {resource!r}")

    @property
    def tag(self) -> Tag:
        """Tag of the offending resource."""
        return self.resource.tag


__all__ = ("UnwrapError",)
