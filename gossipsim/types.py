from typing import Any, Callable, Hashable, TypeAlias

NodeId: TypeAlias = int
Payload: TypeAlias = Any
NodePredicate: TypeAlias = Callable[[Any], bool]
AcceptPredicate: TypeAlias = Callable[[Any, Payload], bool]
Distribution: TypeAlias = Callable[[], float]
Edge: TypeAlias = tuple[Hashable, Hashable]
