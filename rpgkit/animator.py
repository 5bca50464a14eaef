"""Sprite animations and the state machine that switches between them."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from numbers import Real
from typing import Any

from .geometry import Rect

ParameterStorage = Mapping[str, Any]
Condition = Callable[[ParameterStorage], bool]


@dataclass(frozen=True)
class SpriteAnimationFrame:
    """One frame: the texture rectangle shown and how long it lasts."""

    rect: Rect
    duration: float


@dataclass
class SpriteAnimation:
    """A sequence of frames."""

    frames: list[SpriteAnimationFrame] = field(default_factory=list)


class ParameterType(Enum):
    """The kinds of value an animator parameter may hold."""

    VEC2 = "vec2"


@dataclass(frozen=True)
class AnimatorParameter:
    """A named, typed value that transition conditions may read."""

    name: str
    type: ParameterType


@dataclass(eq=False)
class AnimatorTransition:
    """A move from one node to another, taken when the condition holds."""

    source: AnimatorNode = field(repr=False)
    destination: AnimatorNode = field(repr=False)
    condition: Condition = field(repr=False)


@dataclass(eq=False)
class AnimatorNode:
    """A state of the animator, playing one animation."""

    name: str
    animation: SpriteAnimation = field(default_factory=SpriteAnimation)
    from_transitions: list[AnimatorTransition] = field(default_factory=list, repr=False)
    to_transitions: list[AnimatorTransition] = field(default_factory=list, repr=False)


@dataclass
class SpriteAnimator:
    """The nodes, transitions and parameters of an animation state machine."""

    nodes: list[AnimatorNode] = field(default_factory=list)
    transitions: list[AnimatorTransition] = field(default_factory=list)
    parameters: list[AnimatorParameter] = field(default_factory=list)


def _is_vec2(value: Any) -> bool:
    return (
        isinstance(value, Sequence)
        and not isinstance(value, (str, bytes))
        and len(value) == 2
        and all(isinstance(v, Real) and not isinstance(v, bool) for v in value)
    )


class BuilderNode:
    """A handle to a node of an animator under construction."""

    def __init__(self, animator: SpriteAnimator, node: AnimatorNode) -> None:
        self._animator = animator
        self.node = node

    def transition(self, destination: BuilderNode, condition: Condition) -> AnimatorTransition:
        """Add a transition from this node to another one."""
        transition = AnimatorTransition(self.node, destination.node, condition)
        self._animator.transitions.append(transition)
        self.node.from_transitions.append(transition)
        destination.node.to_transitions.append(transition)
        return transition


class BuilderParameter:
    """A handle to a parameter, used to read it from parameter storage."""

    def __init__(self, animator: SpriteAnimator, parameter: AnimatorParameter) -> None:
        self._animator = animator
        self.parameter = parameter

    def get(self, storage: ParameterStorage) -> Any:
        """Return the parameter's value; KeyError if absent, TypeError if mistyped."""
        value = storage[self.parameter.name]
        if self.parameter.type is ParameterType.VEC2 and not _is_vec2(value):
            raise TypeError(
                f"parameter {self.parameter.name!r} holds {value!r}, not a 2D vector"
            )
        return value


class SpriteAnimatorBuilder:
    """Builds a sprite animator; it starts with a node named "entry"."""

    def __init__(self) -> None:
        self._animator: SpriteAnimator | None = SpriteAnimator(nodes=[AnimatorNode("entry")])

    def _current(self) -> SpriteAnimator:
        if self._animator is None:
            raise RuntimeError("the animator has already been built")
        return self._animator

    def entry(self) -> BuilderNode:
        """Return the entry node."""
        animator = self._current()
        return BuilderNode(animator, animator.nodes[0])

    def node(self, name: str, frames: Iterable[SpriteAnimationFrame]) -> BuilderNode:
        """Add a node playing the given frames."""
        animator = self._current()
        node = AnimatorNode(name, SpriteAnimation(list(frames)))
        animator.nodes.append(node)
        return BuilderNode(animator, node)

    def parameter(self, name: str, type_: ParameterType) -> BuilderParameter:
        """Declare a parameter."""
        animator = self._current()
        parameter = AnimatorParameter(name, type_)
        animator.parameters.append(parameter)
        return BuilderParameter(animator, parameter)

    def build(self) -> SpriteAnimator:
        """Return the finished animator; the builder cannot be used after this."""
        animator = self._current()
        self._animator = None
        return animator