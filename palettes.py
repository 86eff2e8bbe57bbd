# palettes.py
from dataclasses import dataclass
from typing import List, Optional, Sequence


@dataclass(frozen=True)
class Palette:
    name: str
    colors: tuple


BASE_PALETTES: List[Palette] = [
    Palette("Earthy", ("#8B4513", "#D2691E", "#DEB887", "#F5DEB3", "#556B2F", "#2F4F4F")),
    Palette("Bold", ("#DC143C", "#FF8C00", "#FFD700", "#228B22", "#1E90FF", "#8A2BE2")),
    Palette("Pastel", ("#FFB3BA", "#FFDFBA", "#FFFFBA", "#BAFFC9", "#BAE1FF", "#E8BAFF")),
    Palette("Forest", ("#2D5016", "#4A7C23", "#8FBC3A", "#C8D96F", "#5C4033", "#8B6914")),
    Palette("Ocean", ("#003545", "#006D77", "#83C5BE", "#EDF6F9", "#FFDDD2", "#E29578")),
    Palette("Sunset", ("#641220", "#85182A", "#E01E37", "#F26A4F", "#F7A072", "#FFDAB9")),
    Palette("Winter", ("#1B1F3B", "#3E517A", "#82A0BC", "#B8D4E3", "#DCEEF8", "#F0F0F0")),
    Palette("Jewel", ("#6A0572", "#AB0D6F", "#D4376E", "#E85D75", "#2E86AB", "#1B4332")),
    Palette("Muted Clay", ("#7A5C4B", "#B08B6F", "#C9B29C", "#D9CFC1", "#6F7B6A", "#4F5A4D")),
    Palette("Dusty Sage", ("#5B6D64", "#7C8C7A", "#9AA892", "#C3CDBE", "#CFC2B1", "#A28D7A")),
    Palette("Weathered Denim", ("#2F3E4E", "#4A5A68", "#6B7B86", "#8C9AA4", "#B4B0A1", "#D0C8B8")),
    Palette("Soft Linen", ("#6E6259", "#8C8075", "#A99D92", "#C7BCB1", "#DED6CC", "#F1ECE4")),
]


def get_all_palettes(custom: Sequence[Palette] = ()) -> List[Palette]:
    return list(BASE_PALETTES) + list(custom)


def palette_by_index(index: int, custom: Sequence[Palette] = ()) -> Palette:
    pals = get_all_palettes(custom)
    return pals[index % len(pals)]


def find_palette(name: str, custom: Sequence[Palette] = ()) -> Optional[Palette]:
    key = name.strip().lower()
    for p in get_all_palettes(custom):
        if p.name.lower() == key:
            return p
    return None
