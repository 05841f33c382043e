# -*- coding: utf-8 -*-
"""
Named property setters for localizable elements.

A property is resolved for ``(element type, property name)`` in two tiers:

1. the explicit map filled with :meth:`PropertySetters.register`, searched
   along the type's MRO so registrations on a base class apply to
   subclasses;
2. a class-level :class:`LocalizableProperty` attribute with that name.

Anything else is left to the fallback actions.
"""
from __future__ import annotations

from typing import Any, Callable, Dict, Optional, Tuple

Setter = Callable[[Any, str], None]


class LocalizableProperty:
    """
    Class-level metadata declaring a settable, localizable property.

    Works as a data descriptor: instances read and write the value stored
    in their ``__dict__`` under the property name. Without an explicit
    ``name`` the attribute name it is assigned to is used.
    """

    def __init__(self, name: str = "", default: Any = None) -> None:
        self.name = name
        self.default = default

    def __set_name__(self, owner: type, attr_name: str) -> None:
        if not self.name:
            self.name = attr_name

    def __get__(self, instance: Any, owner: Optional[type] = None) -> Any:
        if instance is None:
            return self
        return instance.__dict__.get(self.name, self.default)

    def __set__(self, instance: Any, value: Any) -> None:
        instance.__dict__[self.name] = value

    def set_value(self, element: Any, value: str) -> None:
        self.__set__(element, value)


class PropertySetters:
    """Map of ``(type, property name)`` to a setter callable."""

    def __init__(self) -> None:
        self._setters: Dict[Tuple[type, str], Setter] = {}

    def register(self, target_type: type, property_name: str, setter: Setter) -> None:
        self._setters[(target_type, property_name)] = setter

    def register_many(self, target_types, property_name: str, setter: Setter) -> None:
        for target_type in target_types:
            self.register(target_type, property_name, setter)

    def resolve(self, element_type: type, property_name: str) -> Optional[Setter]:
        for klass in element_type.__mro__:
            setter = self._setters.get((klass, property_name))
            if setter is not None:
                return setter

        descriptor = _find_class_property(element_type, property_name)
        if descriptor is not None:
            return descriptor.set_value
        return None

    def __len__(self) -> int:
        return len(self._setters)


def _find_class_property(element_type: type, property_name: str) -> Optional[LocalizableProperty]:
    for klass in element_type.__mro__:
        candidate = klass.__dict__.get(property_name)
        if isinstance(candidate, LocalizableProperty):
            return candidate
    return None


__all__ = ["LocalizableProperty", "PropertySetters", "Setter"]
