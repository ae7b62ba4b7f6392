from dataclasses import dataclass
from typing import Dict, List, Tuple

RGB = Tuple[int, int, int]


@dataclass(slots=True)
class BlockPalette:
    """Block color names (the values held in board slots) mapped to RGB, in draw order."""
    colors: Dict[str, RGB]

    def rgb_for(self, color_name: str) -> RGB:
        return self.colors[color_name]

    def color_names(self) -> List[str]:
        return list(self.colors)
