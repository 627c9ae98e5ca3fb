import re
from dataclasses import dataclass
from typing import Literal, Optional

NotificationKind = Literal["error", "permission"]

# one optional "#", then RRGGBB or AARRGGBB
_HEX_RE = re.compile(r"#?((?:[0-9A-Fa-f]{2})?[0-9A-Fa-f]{6})")


@dataclass(frozen=True)
class RgbColor:
    r: int
    g: int
    b: int

    def __post_init__(self):
        for name in ("r", "g", "b"):
            v = getattr(self, name)
            if isinstance(v, bool) or not isinstance(v, int) or not 0 <= v <= 255:
                raise ValueError(f"channel {name} must be an int in [0, 255], got {v!r}")

    @classmethod
    def from_hex(cls, value: str) -> "RgbColor":
        """Parse #RRGGBB, RRGGBB or #AARRGGBB (alpha is dropped)."""
        m = _HEX_RE.fullmatch(value.strip())
        if m is None:
            raise ValueError(f"not a hex color: {value!r}")
        n = int(m.group(1)[-6:], 16)
        return cls((n >> 16) & 0xFF, (n >> 8) & 0xFF, n & 0xFF)

    def to_field(self) -> str:
        # wire format of the "color" form field
        return f"{self.r},{self.g},{self.b}"

    def to_hex(self) -> str:
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"

    def luminance(self) -> float:
        def lin(c: int) -> float:
            c = c / 255.0
            return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

        return 0.2126 * lin(self.r) + 0.7152 * lin(self.g) + 0.0722 * lin(self.b)

    def on_color(self) -> str:
        """Foreground for text drawn on top of this color."""
        return "black" if self.luminance() > 0.5 else "white"


DEFAULT_COLOR = RgbColor(255, 139, 126)  # #FF8B7E


@dataclass
class CapturedImage:
    data: bytes
    source: Optional[str] = None        # file path or device name
    content_type: str = "image/jpeg"

    @property
    def filename(self) -> str:
        if self.source:
            name = self.source.replace("\\", "/").rsplit("/", 1)[-1]
            if "." in name:
                return name
        return "hand.jpg"


@dataclass
class Notification:
    kind: NotificationKind
    message: str
    actions: tuple[str, ...] = ()
