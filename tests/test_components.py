import pytest

from rpgkit.audio import AudioState, StreamAudioClip
from rpgkit.bitmap import Bitmap
from rpgkit.components import (
    AudioSourceComponent,
    ButtonComponent,
    CameraComponent,
    HorizontalAlign,
    HpComponent,
    InventoryComponent,
    NativeScriptComponent,
    PlayerComponent,
    SpriteRendererComponent,
    TextRendererComponent,
    Tile,
    VerticalAlign,
    WorldMapGenerator,
    WorldObject,
)
from rpgkit.font import Font
from rpgkit.geometry import Rect
from rpgkit.scene import Entity, Scene, Script
from rpgkit.texture import Texture
from rpgkit.window import Window


def _apply(matrix, vector):
    return tuple(sum(a * b for a, b in zip(row, vector)) for row in matrix)


def test_audio_source_state_changes():
    source = AudioSourceComponent(StreamAudioClip("music.mp3"))
    assert source.state is AudioState.STOP
    source.play()
    assert source.state is AudioState.PLAY
    source.pause()
    assert source.state is AudioState.PAUSE
    source.stop()
    assert source.state is AudioState.STOP
    assert source.max_distance == 2000.0


def test_camera_size_follows_window_and_zoom():
    window = Window(800, 600, "test")
    camera = CameraComponent(zoom=2.0, window=window)
    assert camera.width() * camera.zoom == window.width
    assert camera.height() * camera.zoom == window.height


def test_camera_projection_maps_corners_to_clip_space():
    camera = CameraComponent(zoom=1.5, window=Window(800, 600, "test"))
    matrix = camera.projection_matrix()
    w, h = camera.width(), camera.height()
    top_right = _apply(matrix, (w / 2, h / 2, 0.0, 1.0))
    bottom_left = _apply(matrix, (-w / 2, -h / 2, 0.0, 1.0))
    assert top_right[:2] == pytest.approx((1.0, 1.0))
    assert bottom_left[:2] == pytest.approx((-1.0, -1.0))
    assert top_right[3] == 1.0


def test_sprite_renderer_shows_whole_texture_by_default():
    texture = Texture.from_bitmap(Bitmap(4, 2))
    renderer = SpriteRendererComponent(texture)
    assert renderer.texture_rect == Rect(0, 0, 4, 2)
    custom = SpriteRendererComponent(texture, Rect(1, 1, 2, 1))
    assert custom.texture_rect == Rect(1, 1, 2, 1)


def test_text_renderer_defaults():
    renderer = TextRendererComponent(Font())
    assert renderer.text == "Text"
    assert renderer.horizontal_align is HorizontalAlign.LEFT
    assert renderer.vertical_align is VerticalAlign.BOTTOM


def test_button_defaults_and_callbacks():
    clicks = []
    button = ButtonComponent(Font(), on_click=lambda: clicks.append(True))
    assert button.text == "Button"
    assert button.size == (100.0, 50.0)
    button.on_click()
    assert clicks == [True]


class _Greeter(Script):
    def __init__(self, greeting, *, times=1):
        self.greeting = greeting
        self.times = times


def test_native_script_bind_and_instantiate():
    component = NativeScriptComponent()
    component.bind(_Greeter, "hello", times=3)
    script = component.instantiate()
    assert component.instance is script
    assert (script.greeting, script.times) == ("hello", 3)
    component.destroy_script()
    assert component.instance is None


def test_native_script_without_binding_raises():
    with pytest.raises(RuntimeError):
        NativeScriptComponent().instantiate()


class _FlatGenerator(WorldMapGenerator):
    def generate_tiles(self, x, y):
        return [Tile(texture_rect=Rect(x, y, 32, 32))]

    def generate_objects(self, x, y, tiles):
        return [WorldObject(order_pivot=len(tiles))]


def test_world_map_generator_subclass():
    generator = _FlatGenerator()
    tiles = generator.generate_tiles(3, 4)
    assert tiles[0].texture_rect == Rect(3, 4, 32, 32)
    assert generator.generate_objects(3, 4, tiles)[0].order_pivot == 1


def test_world_map_generator_is_abstract():
    with pytest.raises(TypeError):
        WorldMapGenerator()


def test_components_live_on_entities():
    scene = Scene()
    player = scene.create_entity("player")
    item = scene.create_entity("axeItem")
    player.add_component(HpComponent())
    inventory = player.add_component(
        InventoryComponent([[Entity()] * 4 for _ in range(6)])
    )
    inventory.items[0][0] = item
    assert player.get_component(HpComponent).value == 100
    assert player.get_component(InventoryComponent).items[0][0] == item
    assert not inventory.items[1][0]


def test_player_defaults():
    player = PlayerComponent()
    assert player.speed == 1.3
    assert not player.sprite
    assert not player.steps