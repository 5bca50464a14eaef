"""The components that game entities are made of."""

from __future__ import annotations

import functools
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .animator import AnimatorNode, SpriteAnimator
from .audio import AudioClip, AudioState
from .font import Font
from .geometry import Rect
from .scene import Entity, Script
from .texture import Texture
from .window import Window, get_window

Vec2 = tuple[float, float]
Vec3 = tuple[float, float, float]
Color = tuple[float, float, float, float]
Matrix4 = tuple[tuple[float, float, float, float], ...]

_WHITE: Color = (1.0, 1.0, 1.0, 1.0)


@dataclass
class SpriteAnimatorComponent:
    """Drives a sprite from an animator; tracks the playing node and frame."""

    animator: SpriteAnimator | None = None
    parameter_storage: dict[str, Any] = field(default_factory=dict)
    active_node: AnimatorNode | None = None
    frame_index: int = 0
    frame_time: float = 0.0


@dataclass
class AudioListenerComponent:
    """Marks the entity that hears the sounds."""


@dataclass(eq=False)
class AudioSourceComponent:
    """Plays an audio clip from an entity's position, or everywhere if global."""

    clip: AudioClip
    state: AudioState = AudioState.STOP
    volume: float = 1.0
    pan: float = 0.0
    loop: bool = False
    is_global: bool = False
    max_distance: float = 2000.0

    def play(self) -> None:
        """Start or resume playback."""
        self.state = AudioState.PLAY

    def pause(self) -> None:
        """Pause playback."""
        self.state = AudioState.PAUSE

    def stop(self) -> None:
        """Stop playback."""
        self.state = AudioState.STOP


@dataclass
class RectColliderComponent:
    """A rectangular collider relative to the entity's position."""

    offset: Vec2 = (0.0, 0.0)
    size: Vec2 = (0.0, 0.0)


@dataclass
class RigidbodyComponent:
    """Lets physics move the entity."""

    velocity: Vec2 = (0.0, 0.0)


@dataclass
class PlayerComponent:
    """The player's speed and the entities of its sprite and footsteps."""

    speed: float = 1.3
    sprite: Entity = field(default_factory=Entity)
    steps: Entity = field(default_factory=Entity)


@dataclass
class AutoOrderComponent:
    """Orders the sprite by its vertical position, offset by the pivot."""

    order_pivot: int = 0


@dataclass
class CameraComponent:
    """A camera showing the window's area divided by the zoom.

    Without a window of its own the game's window is used.
    """

    zoom: float = 1.0
    window: Window | None = field(default=None, repr=False, compare=False)

    def _window(self) -> Window:
        return self.window if self.window is not None else get_window()

    def width(self) -> float:
        """The width of the visible area in world units."""
        return self._window().width / self.zoom

    def height(self) -> float:
        """The height of the visible area in world units."""
        return self._window().height / self.zoom

    def projection_matrix(self) -> Matrix4:
        """The orthographic projection, as rows, with depth from 0 to 100."""
        half_w, half_h = self.width() / 2, self.height() / 2
        left, right, bottom, top = -half_w, half_w, -half_h, half_h
        near, far = 0.0, 100.0
        return (
            (2 / (right - left), 0.0, 0.0, -(right + left) / (right - left)),
            (0.0, 2 / (top - bottom), 0.0, -(top + bottom) / (top - bottom)),
            (0.0, 0.0, -2 / (far - near), -(far + near) / (far - near)),
            (0.0, 0.0, 0.0, 1.0),
        )


@dataclass
class PointLightComponent:
    """A light shining in a circle around the entity."""

    color: Vec3 = (1.0, 1.0, 1.0)
    radius: float = 0.0
    intensity: float = 1.0
    enabled: bool = True


@dataclass
class SpriteRendererComponent:
    """Draws part of a texture; by default the whole texture."""

    texture: Texture
    texture_rect: Rect | None = None
    color: Color = _WHITE
    layer: int = 0
    order: int = 0

    def __post_init__(self) -> None:
        if self.texture_rect is None:
            self.texture_rect = Rect(0, 0, self.texture.width, self.texture.height)


class HorizontalAlign(Enum):
    """Where text sits horizontally relative to its position."""

    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


class VerticalAlign(Enum):
    """Where text sits vertically relative to its position."""

    TOP = "top"
    BOTTOM = "bottom"
    CENTER = "center"


@dataclass
class TextRendererComponent:
    """Draws a string with a font."""

    font: Font
    text: str = "Text"
    color: Color = _WHITE
    horizontal_align: HorizontalAlign = HorizontalAlign.LEFT
    vertical_align: VerticalAlign = VerticalAlign.BOTTOM
    layer: int = 0
    order: int = 0


@dataclass
class NativeScriptComponent:
    """Holds a script bound to an entity and creates it on demand."""

    instance: Script | None = None
    _factory: Callable[[], Script] | None = field(default=None, init=False, repr=False)

    def bind(self, script_type: type[Script], *args: Any, **kwargs: Any) -> None:
        """Choose the script type and the arguments it is created with."""
        self._factory = functools.partial(script_type, *args, **kwargs)

    def instantiate(self) -> Script:
        """Create the bound script and keep it as the instance."""
        if self._factory is None:
            raise RuntimeError("no script is bound")
        self.instance = self._factory()
        return self.instance

    def destroy_script(self) -> None:
        """Drop the script instance."""
        self.instance = None


@dataclass
class EnvironmentComponent:
    """The world's environment and the entity playing its night sounds."""

    night_audio: Entity = field(default_factory=Entity)


@dataclass
class HpComponent:
    """Hit points."""

    value: int = 100


@dataclass
class InventoryComponent:
    """A grid of item entities; null entities are empty cells."""

    items: list[list[Entity]] = field(default_factory=list)
    shown: bool = False


@dataclass
class ItemComponent:
    """An item with its name, description and icon."""

    name: str = ""
    description: str = ""
    icon: Texture = field(default_factory=Texture)
    icon_rect: Rect = field(default_factory=Rect)


@dataclass
class Tile:
    """A ground tile of the world map."""

    texture: Texture | None = None
    texture_rect: Rect = field(default_factory=Rect)


@dataclass
class WorldObject:
    """An object standing on a tile of the world map, such as a tree."""

    texture: Texture | None = None
    texture_rect: Rect = field(default_factory=Rect)
    origin: Vec2 = (0.0, 0.0)
    order_pivot: int = 0


class WorldMapGenerator(ABC):
    """Decides what lies at each cell of the world map."""

    @abstractmethod
    def generate_tiles(self, x: int, y: int) -> list[Tile]:
        """Return the tiles of a cell, bottom first."""

    @abstractmethod
    def generate_objects(self, x: int, y: int, tiles: list[Tile]) -> list[WorldObject]:
        """Return the objects placed on a cell with the given tiles."""


@dataclass
class WorldMapComponent:
    """An endless tile map produced by a generator around the camera."""

    tile_size: int = 32
    generator: WorldMapGenerator | None = None
    render_radius: int = 12
    tile_layer: int = 0
    object_layer: int = 1


@dataclass
class ButtonComponent:
    """A clickable button with a label."""

    font: Font
    text: str = "Button"
    size: Vec2 = (100.0, 50.0)
    enabled: bool = True
    on_click: Callable[[], None] | None = None
    on_hover: Callable[[bool], None] | None = None