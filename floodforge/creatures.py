"""Catalog of creature and tag images found in an assets directory."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Union

CREATURE_ROWS = 6

PathLike = Union[str, Path]


def _images(directory: Path) -> List[Path]:
    return sorted(
        entry for entry in directory.iterdir() if entry.is_file() and entry.suffix == ".png"
    )


def _lines(path: Path) -> List[str]:
    content = path.read_text(encoding="utf-8")
    lines = content.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


@dataclass
class CreatureCatalog:
    """Known creature types, creature tags, their images and name aliases."""

    textures: Dict[str, Path] = field(default_factory=dict)
    tag_textures: Dict[str, Path] = field(default_factory=dict)
    creatures: List[str] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)
    parse_map: Dict[str, str] = field(default_factory=dict)

    @property
    def unknown(self) -> Optional[Path]:
        """Image used for creatures that have none of their own."""
        return self.textures.get("UNKNOWN")

    def _load_folder(self, directory: Path, prefix: str = "", include: bool = True) -> None:
        for image in _images(directory):
            creature = prefix + image.stem
            if include:
                self.creatures.append(creature)
            self.textures[creature] = image

    @staticmethod
    def load(directory: PathLike) -> CreatureCatalog:
        """Read a creatures directory.

        Without a ``mods.txt`` the catalog is empty. Otherwise images come from
        the directory itself, each listed mod folder, ``room`` (prefixed
        ``room-`` and not offered as a choice) and ``TAGS``. ``CLEAR`` is moved
        first and ``UNKNOWN`` last; ``parse.txt`` supplies ``from>to`` aliases.
        """
        root = Path(directory)
        catalog = CreatureCatalog()

        mods_file = root / "mods.txt"
        if not mods_file.is_file():
            return catalog
        mods = [line.removesuffix("\r") for line in _lines(mods_file) if line]

        catalog._load_folder(root)
        for mod in mods:
            catalog._load_folder(root / mod)
        catalog._load_folder(root / "room", "room-", include=False)

        for image in _images(root / "TAGS"):
            catalog.tags.append(image.stem)
            catalog.tag_textures[image.stem] = image

        creatures = catalog.creatures
        if "CLEAR" in creatures:
            i = creatures.index("CLEAR")
            creatures[0], creatures[i] = creatures[i], creatures[0]
        if "UNKNOWN" in creatures:
            i = creatures.index("UNKNOWN")
            creatures[-1], creatures[i] = creatures[i], creatures[-1]

        parse_file = root / "parse.txt"
        if not parse_file.is_file():
            return catalog
        for line in _lines(parse_file):
            if ">" in line:
                source, _, target = line.partition(">")
            else:
                source = target = line
            catalog.parse_map[source] = target

        return catalog

    def parse(self, name: str) -> str:
        """Resolve an alias to its canonical creature name."""
        return self.parse_map.get(name, name)

    def known(self, creature_type: str) -> bool:
        if creature_type == "":
            return True
        return self.parse(creature_type) in self.textures

    def texture_path(self, creature_type: str) -> Optional[Path]:
        """Image for a creature or tag; the UNKNOWN image for unrecognised types."""
        if creature_type == "":
            return None
        if creature_type in self.tag_textures:
            return self.tag_textures[creature_type]
        if creature_type not in self.textures:
            return self.unknown
        return self.textures[creature_type]