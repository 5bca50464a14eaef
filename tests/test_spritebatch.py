import pytest

from rpgkit.bitmap import Bitmap
from rpgkit.geometry import Rect
from rpgkit.sprite import Sprite
from rpgkit.spritebatch import (
    MAX_LAYERS,
    MAX_TEXTURES,
    SpriteBatch,
    SpriteBatchError,
    quad_indices,
)
from rpgkit.texture import Texture


def make_texture(width=4, height=4):
    return Texture.from_bitmap(Bitmap(width, height))


def colored(texture, red):
    return Sprite(texture, color=(red, 0.0, 0.0, 1.0))


def test_quad_indices_pattern():
    assert quad_indices(2) == [0, 1, 2, 2, 3, 0, 4, 5, 6, 6, 7, 4]


def test_quad_indices_sizes():
    assert quad_indices(0) == []
    assert len(quad_indices(5)) == 30


def test_end_gives_four_vertices_per_sprite():
    batch = SpriteBatch()
    texture = make_texture()
    batch.begin()
    batch.draw(Sprite(texture))
    batch.draw(Sprite(texture))
    assert len(batch.end()) == 8
    assert batch.sprite_count == 2


def test_vertex_positions_follow_the_corners():
    batch = SpriteBatch()
    batch.begin()
    batch.draw(Sprite(make_texture(), color=(0.2, 0.3, 0.4, 0.5)))
    vertices = batch.end()
    assert [v.position for v in vertices] == [(0, 0), (4, 0), (4, 4), (0, 4)]
    assert all(v.color == (0.2, 0.3, 0.4, 0.5) for v in vertices)


def test_lower_layers_come_first():
    batch = SpriteBatch()
    texture = make_texture()
    batch.begin()
    batch.draw(colored(texture, 1.0), layer=1)
    batch.draw(colored(texture, 0.5), layer=0)
    reds = [v.color[0] for v in batch.end()[::4]]
    assert reds == [0.5, 1.0]


def test_order_sorts_within_layer_and_keeps_ties_stable():
    batch = SpriteBatch()
    texture = make_texture()
    batch.begin()
    batch.draw(colored(texture, 0.1), order=5)
    batch.draw(colored(texture, 0.2), order=1)
    batch.draw(colored(texture, 0.3), order=5)
    reds = [v.color[0] for v in batch.end()[::4]]
    assert reds == [0.2, 0.1, 0.3]


def test_textures_share_slots():
    batch = SpriteBatch()
    first, second = make_texture(), make_texture()
    batch.begin()
    batch.draw(Sprite(first))
    batch.draw(Sprite(first))
    batch.draw(Sprite(second))
    tex_ids = [v.tex_id for v in batch.end()[::4]]
    assert tex_ids == [0.0, 0.0, 1.0]
    assert batch.textures == (first, second)


def test_too_many_textures_raise():
    batch = SpriteBatch()
    batch.begin()
    for _ in range(MAX_TEXTURES):
        batch.draw(Sprite(make_texture()))
    with pytest.raises(SpriteBatchError):
        batch.draw(Sprite(make_texture()))
    assert batch.sprite_count == MAX_TEXTURES


@pytest.mark.parametrize("layer", [MAX_LAYERS, -1])
def test_layer_out_of_range_raises(layer):
    batch = SpriteBatch()
    with pytest.raises(SpriteBatchError):
        batch.draw(Sprite(make_texture()), layer=layer)


def test_sprite_limit_raises():
    batch = SpriteBatch(max_sprites=1)
    texture = make_texture()
    batch.draw(Sprite(texture))
    with pytest.raises(SpriteBatchError):
        batch.draw(Sprite(texture))


def test_zero_size_texture_raises():
    batch = SpriteBatch()
    with pytest.raises(SpriteBatchError):
        batch.draw(Sprite(Texture()))


def test_begin_resets_the_batch():
    batch = SpriteBatch()
    batch.draw(Sprite(make_texture()))
    batch.begin()
    assert batch.end() == []
    assert batch.sprite_count == 0
    assert batch.textures == ()


def test_tex_coords_stay_inside_texture():
    batch = SpriteBatch()
    batch.draw(Sprite(make_texture(8, 8), texture_rect=Rect(2, 2, 4, 4)))
    for vertex in batch.end():
        u, v = vertex.tex_coord
        assert 0.0 <= u <= 1.0
        assert 0.0 <= v <= 1.0


def test_mirrored_rect_flips_tex_coords():
    batch = SpriteBatch()
    batch.draw(Sprite(make_texture(), texture_rect=Rect(0, 4, 4, -4)))
    bottom_left, _, _, top_left = batch.end()
    assert bottom_left.tex_coord[1] > top_left.tex_coord[1]
    assert bottom_left.position[1] < top_left.position[1]