"""Entities, their components, systems and the scene that holds them."""

from __future__ import annotations

import itertools
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, TypeVar

T = TypeVar("T")
Vec2 = tuple[float, float]


class Registry:
    """Stores the components of every entity, at most one of each type."""

    def __init__(self) -> None:
        self._ids = itertools.count()
        self._entities: dict[int, dict[type, Any]] = {}

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._entities

    def __len__(self) -> int:
        return len(self._entities)

    def _components(self, entity_id: int) -> dict[type, Any]:
        try:
            return self._entities[entity_id]
        except KeyError:
            raise KeyError(f"entity {entity_id} does not exist") from None

    def create(self) -> int:
        """Create an entity without components and return its id."""
        entity_id = next(self._ids)
        self._entities[entity_id] = {}
        return entity_id

    def destroy(self, entity_id: int) -> None:
        """Remove an entity and all of its components."""
        self._components(entity_id)
        del self._entities[entity_id]

    def emplace(self, entity_id: int, component: T) -> T:
        """Attach a component; an entity holds one component of each type."""
        components = self._components(entity_id)
        component_type = type(component)
        if component_type in components:
            raise ValueError(
                f"entity {entity_id} already has a {component_type.__name__}"
            )
        components[component_type] = component
        return component

    def get(self, entity_id: int, component_type: type[T]) -> T:
        """Return the entity's component of the given type."""
        components = self._components(entity_id)
        try:
            return components[component_type]
        except KeyError:
            raise KeyError(
                f"entity {entity_id} has no {component_type.__name__}"
            ) from None

    def has(self, entity_id: int, component_type: type) -> bool:
        """Return True if the entity holds a component of the given type."""
        return component_type in self._components(entity_id)

    def remove(self, entity_id: int, component_type: type) -> None:
        """Detach the component of the given type, if the entity has one."""
        self._components(entity_id).pop(component_type, None)

    def view(self, *args: type) -> Iterator[tuple[Any, ...]]:
        """Yield ``(entity_id, *components)`` for entities holding every type."""
        for entity_id, components in list(self._entities.items()):
            if all(component_type in components for component_type in args):
                yield (entity_id, *(components[t] for t in args))


@dataclass(frozen=True, eq=False)
class Entity:
    """A handle to an entity in a registry; the default handle is null."""

    id: int | None = None
    registry: Registry | None = field(default=None, repr=False)

    def _registry(self) -> Registry:
        if self.id is None or self.registry is None:
            raise ValueError("the entity is null")
        return self.registry

    def add_component(self, component: T) -> T:
        """Attach a component and return it."""
        return self._registry().emplace(self.id, component)

    def get_component(self, component_type: type[T]) -> T:
        """Return the component of the given type."""
        return self._registry().get(self.id, component_type)

    def has_component(self, component_type: type) -> bool:
        """Return True if the entity holds a component of the given type."""
        return self._registry().has(self.id, component_type)

    def remove_component(self, component_type: type) -> None:
        """Detach the component of the given type."""
        self._registry().remove(self.id, component_type)

    def __bool__(self) -> bool:
        return self.id is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


@dataclass
class TransformComponent:
    """Where an entity is, the point it is placed by, and its scale."""

    position: Vec2 = (0.0, 0.0)
    origin: Vec2 = (0.0, 0.0)
    scale: Vec2 = (1.0, 1.0)


@dataclass
class HierarchyComponent:
    """Links an entity to its parent and to its siblings."""

    children: int = 0
    first_child: Entity = field(default_factory=Entity)
    prev: Entity = field(default_factory=Entity)
    next: Entity = field(default_factory=Entity)
    parent: Entity = field(default_factory=Entity)


@dataclass
class NameComponent:
    """The name of an entity."""

    name: str = ""


class System:
    """Works on the entities of a registry once per frame.

    The base class keeps track of whether it is active and of the time it
    has been updated for; subclasses override the hooks to do their work.
    """

    def __init__(self, registry: Registry) -> None:
        self.registry = registry
        self.active = False
        self.elapsed = 0.0

    def create(self) -> None:
        """Prepare the system and mark it active."""
        self.active = True
        self.elapsed = 0.0

    def update(self, delta_time: float) -> None:
        """Advance the system by one frame."""
        self.elapsed += delta_time

    def destroy(self) -> None:
        """Release what the system holds and mark it inactive."""
        self.active = False


class Scene:
    """A registry of entities together with the systems that run on it."""

    def __init__(self) -> None:
        self.registry = Registry()
        self._systems: list[System] = []

    @property
    def systems(self) -> tuple[System, ...]:
        """The systems in the order they run."""
        return tuple(self._systems)

    def create_entity(self, name: str = "") -> Entity:
        """Create an entity with a transform, a hierarchy link and a name."""
        entity = Entity(self.registry.create(), self.registry)
        entity.add_component(TransformComponent())
        entity.add_component(HierarchyComponent())
        entity.add_component(NameComponent(name or "Entity"))
        return entity

    def destroy_entity(self, entity: Entity) -> None:
        """Remove an entity from the scene."""
        if not entity:
            raise ValueError("cannot destroy a null entity")
        self.registry.destroy(entity.id)

    def add_system(self, system_type: type[T]) -> T:
        """Create a system of the given type and run it after the others."""
        system = system_type(self.registry)
        self._systems.append(system)
        return system

    def create(self) -> None:
        """Create every system."""
        for system in self._systems:
            system.create()

    def update(self, delta_time: float) -> None:
        """Update every system in order."""
        for system in self._systems:
            system.update(delta_time)

    def destroy(self) -> None:
        """Destroy every system."""
        for system in self._systems:
            system.destroy()


class Script:
    """Behaviour attached to an entity; the entity is set when it is attached.

    The base hooks record whether the script is alive and how long it has
    been updated for; subclasses override them with their behaviour.
    """

    entity: Entity = Entity()
    alive: bool = False
    elapsed: float = 0.0

    def get_component(self, component_type: type[T]) -> T:
        """Return a component of the script's entity."""
        return self.entity.get_component(component_type)

    def on_create(self) -> None:
        """Called once after the script is attached."""
        self.alive = True
        self.elapsed = 0.0

    def on_update(self, delta_time: float) -> None:
        """Called every frame."""
        self.elapsed += delta_time

    def on_destroy(self) -> None:
        """Called before the script is removed."""
        self.alive = False