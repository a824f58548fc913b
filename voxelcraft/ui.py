"""On-screen interface: the hotbar, the crosshair and their container."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

from .blocks import BlockId, Direction, get_block
from .controls import ButtonSet

__all__ = [
    "HOTBAR_SLOTS",
    "UI_COMPONENTS_MAX",
    "KEY_0",
    "SLOT_PIXELS",
    "ICON_OFFSET_PIXELS",
    "ICON_SIZE_PIXELS",
    "Quad",
    "Screen",
    "UIComponent",
    "Hotbar",
    "Crosshair",
    "UI",
]

HOTBAR_SLOTS = 10
UI_COMPONENTS_MAX = 256
KEY_0 = 48

SLOT_PIXELS = 40.0
ICON_OFFSET_PIXELS = 6.0
ICON_SIZE_PIXELS = 28.0
HOTBAR_MARGIN = 16.0
CROSSHAIR_PIXELS = 16

Vec2 = Tuple[float, float]
Vec3 = Tuple[float, float, float]
Vec4 = Tuple[float, float, float, float]

WHITE: Vec4 = (1.0, 1.0, 1.0, 1.0)

_DEFAULT_HOTBAR = (
    BlockId.GRASS,
    BlockId.DIRT,
    BlockId.STONE,
    BlockId.COBBLESTONE,
    BlockId.PLANKS,
    BlockId.LOG,
    BlockId.GLASS,
    BlockId.ROSE,
    BlockId.TORCH,
    BlockId.SAND,
)

Hook = Optional[Callable[[], None]]


@dataclass(frozen=True)
class Quad:
    """A textured screen-space rectangle to draw.

    Block icons name an atlas cell instead of texture coordinates.
    """

    texture: str
    offset: Vec3
    size: Vec2
    color: Vec4 = WHITE
    uv_min: Vec2 = (0.0, 0.0)
    uv_max: Vec2 = (1.0, 1.0)
    atlas_cell: Optional[Tuple[int, int]] = None


@dataclass
class Screen:
    """What interface components draw to and read input from."""

    size: Tuple[int, int] = (1280, 720)
    keyboard: ButtonSet = field(default_factory=ButtonSet)
    draw: Optional[Callable[[Quad], None]] = None

    def emit(self, quad: Quad) -> None:
        if self.draw is not None:
            self.draw(quad)


class UIComponent:
    """Base of interface components.

    A hook left as None is skipped; subclasses define the hooks they need.
    """

    enabled: bool = True
    destroy: Hook = None
    render: Hook = None
    update: Hook = None
    tick: Hook = None


class Hotbar(UIComponent):
    """A row of block slots, one of which is selected."""

    def __init__(self, screen: Optional[Screen] = None) -> None:
        self.screen = screen if screen is not None else Screen()
        self.enabled = True
        self.index = 0
        self.values: List[BlockId] = list(_DEFAULT_HOTBAR)

    def select_key(self, digit: int) -> None:
        """Select by number key: 1..9 pick slots 1..9, 0 picks the tenth."""
        if not 0 <= digit <= 9:
            raise ValueError(f"not a digit key: {digit}")
        self.index = HOTBAR_SLOTS - 1 if digit == 0 else digit - 1

    def selected(self) -> BlockId:
        """The block in the selected slot."""
        return self.values[self.index]

    def update(self) -> None:  # type: ignore[override]
        keyboard = self.screen.keyboard
        for digit in range(10):
            if keyboard[KEY_0 + digit].pressed:
                self.select_key(digit)

    def render(self) -> None:  # type: ignore[override]
        width = self.screen.size[0]
        base_x = (width - HOTBAR_SLOTS * SLOT_PIXELS) / 2.0
        slot_size = (SLOT_PIXELS, SLOT_PIXELS)

        for i, block_id in enumerate(self.values):
            x, y = base_x + i * SLOT_PIXELS, HOTBAR_MARGIN
            self.screen.emit(
                Quad("hotbar", (x, y, 0.0), slot_size, WHITE, (0.0, 0.0), (0.5, 1.0))
            )
            if i == self.index:
                self.screen.emit(
                    Quad("hotbar", (x, y, 0.0), slot_size, WHITE, (0.5, 0.0), (1.0, 1.0))
                )
            self.screen.emit(
                Quad(
                    "blocks",
                    (x + ICON_OFFSET_PIXELS, y + ICON_OFFSET_PIXELS, 0.0),
                    (ICON_SIZE_PIXELS, ICON_SIZE_PIXELS),
                    WHITE,
                    atlas_cell=get_block(block_id).texture_location(Direction.UP),
                )
            )


class Crosshair(UIComponent):
    """A faint marker at the centre of the screen."""

    def __init__(self, screen: Optional[Screen] = None) -> None:
        self.screen = screen if screen is not None else Screen()
        self.enabled = True

    def render(self) -> None:  # type: ignore[override]
        width, height = self.screen.size
        half = CROSSHAIR_PIXELS // 2
        self.screen.emit(
            Quad(
                "crosshair",
                (float(width // 2 - half), float(height // 2 - half), 0.0),
                (float(CROSSHAIR_PIXELS), float(CROSSHAIR_PIXELS)),
                (1.0, 1.0, 1.0, 0.4),
            )
        )


class UI:
    """Holds interface components and forwards events to the enabled ones."""

    def __init__(self, screen: Optional[Screen] = None) -> None:
        self.screen = screen if screen is not None else Screen()
        self.components: List[UIComponent] = []
        self.hotbar = Hotbar(self.screen)
        self.crosshair = Crosshair(self.screen)
        self.add(self.hotbar)
        self.add(self.crosshair)

    def add(self, component: UIComponent) -> UIComponent:
        """Append a component and enable it."""
        if len(self.components) >= UI_COMPONENTS_MAX:
            raise OverflowError("too many interface components")
        component.enabled = True
        self.components.append(component)
        return component

    def _hooks(self, event: str) -> List[Callable[[], None]]:
        hooks = []
        for component in self.components:
            hook = getattr(component, event)
            if hook is not None and component.enabled:
                hooks.append(hook)
        return hooks

    def destroy(self) -> None:
        for hook in self._hooks("destroy"):
            hook()

    def render(self) -> None:
        for hook in self._hooks("render"):
            hook()

    def update(self) -> None:
        for hook in self._hooks("update"):
            hook()

    def tick(self) -> None:
        for hook in self._hooks("tick"):
            hook()