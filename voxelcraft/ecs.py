"""A small entity-component system with per-component event subscribers."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Set

__all__ = [
    "ENTITY_NONE",
    "INITIAL_CAPACITY",
    "Event",
    "ComponentType",
    "System",
    "Entity",
    "ECS",
]

# Id stored for an index that holds no entity.
ENTITY_NONE = 0

INITIAL_CAPACITY = 64


class Event(enum.IntEnum):
    INIT = 0
    DESTROY = 1
    RENDER = 2
    UPDATE = 3
    TICK = 4


class ComponentType(enum.IntEnum):
    POSITION = 0
    CAMERA = 1
    CONTROL = 2
    PHYSICS = 3
    MOVEMENT = 4
    BLOCKLOOK = 5
    DEBUG = 6
    LIGHT = 7


Subscriber = Callable[[Any, "Entity"], None]


@dataclass(frozen=True)
class System:
    """Subscribers of one component type, plus a factory for default values."""

    init: Optional[Subscriber] = None
    destroy: Optional[Subscriber] = None
    render: Optional[Subscriber] = None
    update: Optional[Subscriber] = None
    tick: Optional[Subscriber] = None
    factory: Optional[Callable[[], Any]] = None

    def subscriber(self, event: Event) -> Optional[Subscriber]:
        """The subscriber for ``event``, or None."""
        return {
            Event.INIT: self.init,
            Event.DESTROY: self.destroy,
            Event.RENDER: self.render,
            Event.UPDATE: self.update,
            Event.TICK: self.tick,
        }[Event(event)]


@dataclass(frozen=True)
class Entity:
    """Handle to an entity: its unique id and its slot index."""

    id: int
    index: int
    ecs: Optional["ECS"] = field(default=None, compare=False, repr=False)


class ECS:
    """Stores components per type, indexed by entity slot."""

    def __init__(self, world: Any = None) -> None:
        self.world = world
        self._capacity = INITIAL_CAPACITY
        self._ids: List[int] = [ENTITY_NONE] * self._capacity
        self._live: Set[int] = set()
        self._next_entity_id = 1
        self._systems: Dict[ComponentType, System] = {t: System() for t in ComponentType}
        self._components: Dict[ComponentType, Dict[int, Any]] = {t: {} for t in ComponentType}

    @property
    def capacity(self) -> int:
        """Number of entity slots currently allocated."""
        return self._capacity

    def register(self, component_type: ComponentType, system: System) -> None:
        """Install the system for a component type, clearing its components."""
        component_type = ComponentType(component_type)
        self._systems[component_type] = system
        self._components[component_type] = {}

    def _entity_at(self, index: int) -> Entity:
        return Entity(id=self._ids[index], index=index, ecs=self)

    def _grow(self) -> None:
        self._ids.extend([ENTITY_NONE] * self._capacity)
        self._capacity *= 2

    def new(self) -> Entity:
        """Create an entity in the lowest free slot, growing if full."""
        index = next((i for i in range(self._capacity) if i not in self._live), None)
        if index is None:
            index = self._capacity
            self._grow()

        self._live.add(index)
        entity_id = self._next_entity_id
        self._next_entity_id += 1
        self._ids[index] = entity_id
        return Entity(id=entity_id, index=index, ecs=self)

    def delete(self, entity: Entity) -> None:
        """Remove an entity and all its components."""
        if entity.index not in self._live:
            raise KeyError(f"no entity at index {entity.index}")

        for component_type in ComponentType:
            store = self._components[component_type]
            if entity.index not in store:
                continue
            component = store.pop(entity.index)
            destroy = self._systems[component_type].destroy
            if destroy is not None:
                destroy(component, entity)

        self._live.discard(entity.index)
        self._ids[entity.index] = ENTITY_NONE

    def add(self, entity: Entity, component_type: ComponentType, value: Any = None) -> Any:
        """Attach a component; without a value the system's factory makes one."""
        component_type = ComponentType(component_type)
        store = self._components[component_type]
        if entity.index in store:
            raise ValueError(f"entity {entity.id} already has {component_type.name}")

        system = self._systems[component_type]
        if value is None and system.factory is not None:
            value = system.factory()
        store[entity.index] = value

        if system.init is not None:
            system.init(value, entity)
        return value

    def remove(self, entity: Entity, component_type: ComponentType) -> None:
        """Detach a component, running the system's destroy subscriber."""
        component_type = ComponentType(component_type)
        store = self._components[component_type]
        if entity.index not in store:
            raise KeyError(f"entity {entity.id} has no {component_type.name}")

        component = store.pop(entity.index)
        destroy = self._systems[component_type].destroy
        if destroy is not None:
            destroy(component, entity)

    def has(self, entity: Entity, component_type: ComponentType) -> bool:
        """True if the entity's slot holds this component type."""
        return entity.index in self._components[ComponentType(component_type)]

    def get(self, entity: Entity, component_type: ComponentType) -> Any:
        """The entity's component of this type; KeyError if absent."""
        component_type = ComponentType(component_type)
        store = self._components[component_type]
        if entity.index not in store:
            raise KeyError(f"entity {entity.id} has no {component_type.name}")
        return store[entity.index]

    def event(self, event: Event) -> None:
        """Call each component type's subscriber on every component, in type then slot order."""
        for component_type in ComponentType:
            subscriber = self._systems[component_type].subscriber(event)
            if subscriber is None:
                continue
            store = self._components[component_type]
            for index in sorted(store):
                if index in store:
                    subscriber(store[index], self._entity_at(index))