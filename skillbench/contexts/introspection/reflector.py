"""
Runtime class inspection: method lookup by parameter annotations, declared
field listing, raw field reads and dynamic invocation by name.
"""

import inspect
import typing
from dataclasses import dataclass
from typing import Any, Iterator, List, Optional

from skillbench.exceptions import NotConfiguredError


@dataclass(frozen=True)
class FieldInfo:
    """An instance field declared through a class-level annotation."""

    name: str
    annotation: Any
    owner: type


def _is_public(name: str) -> bool:
    return not name.startswith("_")


def _annotation_matches(annotation: Any, expected: Any) -> bool:
    """Compare an annotation with a type; string annotations match by name."""
    if isinstance(annotation, str):
        return annotation == getattr(expected, "__name__", expected)
    return annotation == expected


def _is_class_var(annotation: Any) -> bool:
    if isinstance(annotation, str):
        return annotation.startswith(("ClassVar", "typing.ClassVar"))
    return annotation is typing.ClassVar or typing.get_origin(annotation) is typing.ClassVar


def _mangle(owner: type, name: str) -> str:
    """Storage name of a private (double-underscore) attribute declared in owner."""
    if name.startswith("__") and not name.endswith("__"):
        return f"_{owner.__name__.lstrip('_')}{name}"
    return name


class Reflector:
    """
    Inspects one class at a time; call set_class() before anything else.
    """

    def __init__(self):
        self._cls: Optional[type] = None

    def set_class(self, cls: type) -> None:
        self._cls = cls

    @property
    def cls(self) -> type:
        if self._cls is None:
            raise NotConfiguredError("No class to inspect; call set_class() first")
        return self._cls

    # =========================================================================
    # METHODS
    # =========================================================================

    def _positional_annotations(self, name: str) -> Optional[List[Any]]:
        """Annotations of a routine's positional parameters, without self/cls."""
        attribute = inspect.getattr_static(self.cls, name)
        bound_first = True
        if isinstance(attribute, staticmethod):
            attribute, bound_first = attribute.__func__, False
        elif isinstance(attribute, classmethod):
            attribute = attribute.__func__
        if not inspect.isfunction(attribute):
            return None

        positional = [
            parameter
            for parameter in inspect.signature(attribute).parameters.values()
            if parameter.kind in (parameter.POSITIONAL_ONLY, parameter.POSITIONAL_OR_KEYWORD)
        ]
        if bound_first:
            positional = positional[1:]
        return [parameter.annotation for parameter in positional]

    def get_method_names(self, *param_types: Any) -> Iterator[str]:
        """
        Public methods (own and inherited) whose positional parameters are
        annotated with exactly param_types.

        An overridden method is reported once. get_method_names() with no
        arguments lists the methods that take no parameters.

        Example:
            >>> reflector.set_class(ComplexNumber)
            >>> sorted(reflector.get_method_names(ComplexNumber))
            ['add', 'compare_to', 'multiply']
        """
        names = []
        for name in dir(self.cls):
            if not _is_public(name):
                continue
            annotations = self._positional_annotations(name)
            if annotations is None or len(annotations) != len(param_types):
                continue
            if all(_annotation_matches(a, t) for a, t in zip(annotations, param_types)):
                names.append(name)
        return iter(names)

    # =========================================================================
    # FIELDS
    # =========================================================================

    def get_all_declared_fields(self) -> Iterator[FieldInfo]:
        """
        Instance fields annotated in the class and all its bases, the class's
        own fields first. ClassVar annotations are skipped.
        """
        fields = []
        for owner in self.cls.__mro__:
            if owner is object:
                continue
            for name, annotation in inspect.get_annotations(owner).items():
                if not _is_class_var(annotation):
                    fields.append(FieldInfo(name, annotation, owner))
        return iter(fields)

    @staticmethod
    def get_field_value(target: Any, name: str) -> Any:
        """
        Read a field straight from target's storage, bypassing properties.

        Looks in the instance __dict__, then under the private (name-mangled)
        name of each class in the MRO, then in __slots__.

        Raises:
            AttributeError: If target stores no such field
        """
        storage = getattr(target, "__dict__", {})
        if name in storage:
            return storage[name]

        for owner in type(target).__mro__:
            mangled = _mangle(owner, name)
            if mangled != name and mangled in storage:
                return storage[mangled]

        for owner in type(target).__mro__:
            slots = owner.__dict__.get("__slots__", ())
            if isinstance(slots, str):
                slots = (slots,)
            for slot in slots:
                if slot == name:
                    return owner.__dict__[_mangle(owner, slot)].__get__(target, owner)

        raise AttributeError(f"{type(target).__name__!r} object has no field {name!r}")

    # =========================================================================
    # INVOCATION
    # =========================================================================

    def _resolve_method_name(self, name: str) -> str:
        if _is_public(name):
            return name
        for candidate in (name, _mangle(self.cls, name)):
            if candidate in self.cls.__dict__:
                return candidate
        raise AttributeError(f"{self.cls.__name__!r} declares no method {name!r}")

    def get_method_result(self, constructor_param: Any, method_name: str, *method_params: Any) -> Any:
        """
        Instantiate the class and call one of its methods.

        The instance is built with no arguments when constructor_param is
        None, otherwise with constructor_param as the only argument.
        Non-public methods are only found when the class itself declares
        them. Exceptions raised by the constructor or the method propagate.

        Raises:
            AttributeError: If the method does not exist
        """
        instance = self.cls() if constructor_param is None else self.cls(constructor_param)
        method = getattr(instance, self._resolve_method_name(method_name))
        if not callable(method):
            raise AttributeError(f"{self.cls.__name__}.{method_name} is not a method")
        return method(*method_params)
