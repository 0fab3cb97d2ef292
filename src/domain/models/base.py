"""Resource typing shared by every entity model."""

from __future__ import annotations

from typing import ClassVar

from .enums import ResourceType


class ResourceTyped:
    """Mixin tagging a model class with the ResourceType it persists as."""

    resource_type: ClassVar[ResourceType]


def resource_type_of(model: type) -> ResourceType:
    """Return the ResourceType tag of an entity class.

    Raises TypeError for classes that carry no tag.
    """
    tag = getattr(model, "resource_type", None)
    if not isinstance(tag, ResourceType):
        raise TypeError(f"{model.__name__} is not a resource-typed entity")
    return tag
