import pygame

from evansengine.textures import TextureSet, load_texture


def _surface_loader(paths):
    def loader(path):
        paths.append(path)
        return pygame.Surface((64, 64))
    return loader


def _none_loader(path):
    return None


def test_load_texture_missing_file_returns_none(tmp_path):
    assert load_texture(str(tmp_path / "absent.png")) is None


def test_load_texture_reads_saved_image(tmp_path):
    image = pygame.Surface((12, 7))
    image.fill((10, 20, 30))
    path = tmp_path / "image.bmp"
    pygame.image.save(image, str(path))
    loaded = load_texture(str(path))
    assert loaded.get_size() == (12, 7)
    assert loaded.get_at((0, 0))[:3] == (10, 20, 30)


def test_load_player_textures_uses_source_paths():
    paths = []
    textures = TextureSet()
    textures.load_player_textures(_surface_loader(paths))
    assert "Resources/Hunter/Idle/Idle-Side-Sheet.png" in paths
    assert "Resources/Hunter/Attack/Slice-Down-Sheet.png" in paths
    assert textures.missing_player_textures() == []
    assert textures.zombie_base_idle is None


def test_missing_player_textures_lists_all_in_order():
    textures = TextureSet()
    textures.load_player_textures(_none_loader)
    missing = textures.missing_player_textures()
    assert missing[0] == "Player Side Idle Texture is null"
    assert missing[-1] == "Player Attack up texture is null"
    assert len(missing) == len(set(missing)) + 1


def test_check_player_textures_prints(capsys):
    textures = TextureSet()
    result = textures.check_player_textures()
    out = capsys.readouterr().out.splitlines()
    assert out == result
    assert "Player Down Walk Texture is null" in out


def test_destroy_player_textures_clears_only_player():
    textures = TextureSet()
    textures.load_player_textures(_surface_loader([]))
    textures.load_enemy_textures(_surface_loader([]))
    textures.destroy_player_textures()
    assert textures.player_side_idle is None
    assert textures.zombie_base_idle is not None
    assert textures.missing_enemy_textures() == []
    assert set(textures.loaded()) == {
        "zombie_base_idle", "zombie_banshee_idle", "zombie_overweight_idle"
    }


def test_enemy_textures_round_trip(capsys):
    paths = []
    textures = TextureSet()
    textures.load_enemy_textures(_surface_loader(paths))
    assert "Resources/Zombie/Idle/Zombie-Base-Idle-Sheet.png" in paths
    assert textures.check_enemy_textures() == []
    textures.destroy_enemy_textures()
    missing = textures.check_enemy_textures()
    assert missing == [
        "Zombie Base Idle Texture is null",
        "Zombie Banshee Idle Texture is null",
        "Zombie Overweight Idle Texture is null",
    ]
    assert "Zombie Banshee Idle Texture is null" in capsys.readouterr().out