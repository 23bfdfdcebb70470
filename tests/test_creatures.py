import pytest

from floodforge.creatures import CreatureCatalog


def touch(path):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"")


@pytest.fixture
def assets(tmp_path):
    root = tmp_path / "creatures"
    for name in ("Alpha", "CLEAR", "UNKNOWN", "Zeta"):
        touch(root / f"{name}.png")
    touch(root / "notes.txt")
    touch(root / "modA" / "Beta.png")
    touch(root / "room" / "Gamma.png")
    touch(root / "TAGS" / "MEAN.png")
    touch(root / "TAGS" / "SEED.png")
    (root / "mods.txt").write_text("modA\r\n\n")
    (root / "parse.txt").write_text("Old>Alpha\nSame\n")
    return root


def test_missing_mods_file_gives_empty_catalog(tmp_path):
    catalog = CreatureCatalog.load(tmp_path)
    assert catalog.creatures == []
    assert catalog.tags == []
    assert catalog.texture_path("Anything") is None


def test_creature_order(assets):
    catalog = CreatureCatalog.load(assets)
    assert catalog.creatures[0] == "CLEAR"
    assert catalog.creatures[-1] == "UNKNOWN"
    assert set(catalog.creatures) == {"Alpha", "CLEAR", "UNKNOWN", "Zeta", "Beta"}
    assert "room-Gamma" not in catalog.creatures
    assert catalog.tags == ["MEAN", "SEED"]


def test_texture_paths(assets):
    catalog = CreatureCatalog.load(assets)
    assert catalog.texture_path("") is None
    assert catalog.texture_path("Beta") == assets / "modA" / "Beta.png"
    assert catalog.texture_path("room-Gamma") == assets / "room" / "Gamma.png"
    assert catalog.texture_path("MEAN") == assets / "TAGS" / "MEAN.png"
    assert catalog.texture_path("Nope") == assets / "UNKNOWN.png"
    assert catalog.unknown == assets / "UNKNOWN.png"


def test_parse_and_known(assets):
    catalog = CreatureCatalog.load(assets)
    assert catalog.parse("Old") == "Alpha"
    assert catalog.parse("Same") == "Same"
    assert catalog.parse("Zeta") == "Zeta"
    assert catalog.known("")
    assert catalog.known("Old")
    assert catalog.known("room-Gamma")
    assert not catalog.known("Same")
    assert not catalog.known("Nope")


def test_missing_parse_file_keeps_names(assets):
    (assets / "parse.txt").unlink()
    catalog = CreatureCatalog.load(assets)
    assert catalog.parse_map == {}
    assert catalog.parse("Old") == "Old"
    assert "Alpha" in catalog.creatures


def test_missing_tags_directory_raises(assets):
    for image in (assets / "TAGS").iterdir():
        image.unlink()
    (assets / "TAGS").rmdir()
    with pytest.raises(FileNotFoundError):
        CreatureCatalog.load(assets)