"""
ParameterDescriptor model.

Describes one handler parameter: its position, declared type and the binding
markers attached through `typing.Annotated`. Descriptors are built once when a
handler is registered; resolvers only ever look at the descriptor.
"""

import inspect
from dataclasses import dataclass, field
from typing import (
    Annotated,
    Any,
    Callable,
    Dict,
    Tuple,
    Type,
    get_args,
    get_origin,
    get_type_hints,
)


@dataclass(frozen=True)
class ParameterDescriptor:
    """
    Binding metadata of a single handler parameter.
    """

    name: str
    index: int
    annotation: Any = inspect.Parameter.empty
    markers: Tuple[Any, ...] = ()

    def has_marker(self, marker_type: Type) -> bool:
        return any(
            marker is marker_type or isinstance(marker, marker_type) for marker in self.markers
        )

    def get_marker(self, marker_type: Type) -> Any:
        for marker in self.markers:
            if marker is marker_type or isinstance(marker, marker_type):
                return marker
        return None

    @property
    def is_annotated(self) -> bool:
        return self.annotation is not inspect.Parameter.empty

    @classmethod
    def for_callable(cls, func: Callable) -> Tuple["ParameterDescriptor", ...]:
        """
        Build descriptors for every parameter of `func`.

        `Annotated[T, marker, ...]` is split into the declared type `T` and the
        marker tuple.
        """
        hints = get_type_hints(func, include_extras=True)
        descriptors = []
        for index, param in enumerate(inspect.signature(func).parameters.values()):
            hint = hints.get(param.name, param.annotation)
            annotation, markers = hint, ()
            if get_origin(hint) is Annotated:
                annotation, *extras = get_args(hint)
                markers = tuple(extras)
            descriptors.append(
                cls(name=param.name, index=index, annotation=annotation, markers=markers)
            )
        return tuple(descriptors)


@dataclass
class BindingContext:
    """
    Per-request binding state passed through to every resolver.
    """

    handler_name: str = ""
    parameters: Tuple[ParameterDescriptor, ...] = ()
    attributes: Dict[str, Any] = field(default_factory=dict)
