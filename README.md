# rpgkit

Building blocks for a small top-down 2D role-playing game. The package keeps
game state (entities, components, sprites, text layout, animation graphs,
audio mixing and input) in plain Python objects, independent of any window or
graphics library.

## Modules

- `rpgkit.scene`: `Registry` stores at most one component of each type per
  entity, and `Registry.view(*types)` yields `(entity_id, *components)`.
  `Entity` is a handle into a registry; the default `Entity()` is null and
  false. `Scene.create_entity(name)` gives every entity a
  `TransformComponent`, a `HierarchyComponent` and a `NameComponent` (name
  `"Entity"` when none is given). `Scene.add_system(system_type)` builds a
  `System` on the scene's registry; `create`, `update` and `destroy` run the
  systems in the order they were added. `Script` is the base class for
  per-entity behaviour with `on_create`, `on_update` and `on_destroy`.
- `rpgkit.components`: the game's components as dataclasses, among them
  `CameraComponent` (visible `width()`, `height()` and an orthographic
  `projection_matrix()`), `SpriteRendererComponent`, `TextRendererComponent`,
  `AudioSourceComponent` (`play`, `pause`, `stop`), `RigidbodyComponent`,
  `RectColliderComponent`, `PointLightComponent`, `InventoryComponent`,
  `ItemComponent`, `ButtonComponent`, `WorldMapComponent` with the abstract
  `WorldMapGenerator`, and `NativeScriptComponent`, whose `bind` records a
  script type and its arguments and whose `instantiate` creates it.
- `rpgkit.scripts`: `ButtonScript`, which keeps a button in the top-left
  corner of the window.
- `rpgkit.geometry`: `Rect` (left, bottom, width, height) with `contains`,
  `intersects`, scaling by `*` and `Rect.from_sequence` for four-number lists.
- `rpgkit.bitmap`: `Pixel` and the RGBA `Bitmap` with `get_pixel`,
  `set_pixel`, `pixels` and `raw_pixels`.
- `rpgkit.texture`: `Texture.load` reads an image file with Pillow (flipped so
  the bottom row comes first), `Texture.from_bitmap` wraps a bitmap and
  `Texture.empty` is the shared 1x1 white texture. Failures raise
  `TextureError`.
- `rpgkit.sprite`: `Sprite` with `local_bounds()` and `global_bounds()`.
- `rpgkit.spritebatch`: `SpriteBatch` gathers sprites between `begin()` and
  `end()` on up to 16 layers and 16 textures, sorted by order within a layer,
  and `end()` returns the `Vertex` list, four per sprite. `quad_indices`
  gives the matching triangle indices. Going over a limit raises
  `SpriteBatchError`.
- `rpgkit.font` and `rpgkit.text`: `Font.load` renders printable ASCII from a
  TrueType file with Pillow into one atlas texture; `Font.from_glyphs` builds
  one from ready glyph bitmaps. `Text` lays a string out as one sprite per
  glyph, with line breaks, and draws it into a `SpriteBatch`.
- `rpgkit.animator`: `SpriteAnimatorBuilder` builds a `SpriteAnimator` of
  nodes, transitions and typed parameters, starting from a node named
  `"entry"`.
- `rpgkit.audio`: `CachedAudioClip` (read into memory) and `StreamAudioClip`
  (read from disk), `AudioSource` with state, volume, pan and loop, and
  `AudioDevice`, which mixes playing sources into interleaved stereo floats
  with `render(frame_count)`. `mix_frames` is the mixing step on its own.
- `rpgkit.keys`, `rpgkit.keyconfig`, `rpgkit.window`: the `Key` enumeration,
  `string_to_key` and `key_to_glfw`, `KeyMappingConfig` read from YAML, and
  `Window`, which tracks key, mouse-button, cursor and size state from the
  events passed to its `handle_*` methods. `get_window()` returns the one
  shared window.

## Installation

```
pip install .
```

## Examples

```python
from rpgkit.scene import Scene, TransformComponent
from rpgkit.components import HpComponent
from rpgkit.geometry import Rect

scene = Scene()
player = scene.create_entity("player")
player.add_component(HpComponent())
player.get_component(TransformComponent).position = (64.0, 128.0)

scene.create()
scene.update(1 / 60)

area = Rect(0, 0, 100, 200)
print(area.contains((64.0, 128.0)))   # True
```

Drawing a sprite into a batch:

```python
from rpgkit.bitmap import Bitmap
from rpgkit.sprite import Sprite
from rpgkit.spritebatch import SpriteBatch
from rpgkit.texture import Texture

batch = SpriteBatch()
batch.begin()
batch.draw(Sprite(texture=Texture.from_bitmap(Bitmap(32, 32))), layer=1)
vertices = batch.end()   # four Vertex objects
```

Key bindings come from a YAML file whose values are key names such as `w`,
`esc` or `f1`:

```yaml
exit: esc
moveUp: w
moveDown: s
moveLeft: a
moveRight: d
inventory: i
use: e
hitYourself: h
torch: t
```

```python
from rpgkit.keyconfig import KeyMappingConfig

config = KeyMappingConfig.from_file("keys.yml")
print(config.move_up)   # Key.W
```

Actions that are not given, and names that are not known, map to
`Key.UNKNOWN`.

## What the package does not do

- It opens no window and draws nothing on screen. `Window` only records the
  state it is given through `handle_key`, `handle_mouse_button`,
  `handle_cursor` and `handle_resize`, and `SpriteBatch.end()` returns
  vertices for a renderer to use.
- It decodes no audio and plays nothing through a sound card.
  `AudioDevice` needs a decoder factory from the caller and returns mixed
  samples for the caller to send on.
- It has no rendering, physics, animation-playing or audio systems and no
  game loop or command; `System` and `Script` are the places to add them.
- `WorldMapGenerator` is abstract; no world generator is included.

## Running the tests

```
pip install .[test]
pytest
```