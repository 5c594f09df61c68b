"""Window type catalog."""

from dataclasses import dataclass


@dataclass(frozen=True)
class WindowType:
    key: str
    name: str
    u_value: float  # Uw, W/(m²·K)
    g_value: float  # solar heat-gain coefficient
    psi: float  # frame thermal bridge, W/(m·K)
    aliases: tuple[str, ...] = ()


WINDOW_TYPES: tuple[WindowType, ...] = (
    WindowType(
        "double_glazed",
        "Double-glazed standard",
        u_value=1.2,
        g_value=0.55,
        psi=0.06,
        aliases=("double-glazed", "double", "std_2ch"),
    ),
    WindowType(
        "triple_glazed",
        "Triple-glazed energy saving",
        u_value=0.9,
        g_value=0.48,
        psi=0.05,
        aliases=("triple-glazed", "triple", "std_3ch"),
    ),
    WindowType(
        "old_wood",
        "Old timber windows",
        u_value=2.6,
        g_value=0.65,
        psi=0.08,
        aliases=("old-wood", "old"),
    ),
)

DEFAULT_WINDOW_KEY = "double_glazed"
UPGRADE_WINDOW_KEY = "triple_glazed"
