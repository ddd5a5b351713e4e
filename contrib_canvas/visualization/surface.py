"""
Drawing surfaces for the contribution charts.

The renderers talk to a small canvas-like API (fill/stroke/text plus an
affine transform). PillowSurface implements it on top of a Pillow image so
charts can be written straight to PNG.
"""
#region Imports
import io
import math
from functools import lru_cache
from pathlib import Path
from typing import Optional, Protocol, Union

from PIL import Image, ImageDraw, ImageFont

from contrib_canvas.config.defaults import DEFAULT_FONT_FACE
#endregion


#region Constants
IDENTITY = (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)

# Canvas textBaseline -> Pillow vertical anchor (left aligned)
BASELINE_ANCHORS = {
    "top": "lt",
    "hanging": "la",
    "middle": "lm",
    "alphabetic": "ls",
    "ideographic": "ld",
    "bottom": "ld",
}

# Tried in order when the requested face is not installed
FALLBACK_FONT_PATHS = [
    "/System/Library/Fonts/Menlo.ttc",  # macOS
    "C:\\Windows\\Fonts\\consola.ttf",  # Windows
    "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",  # Linux
    "/usr/share/fonts/truetype/liberation/LiberationMono-Regular.ttf",  # Linux alternative
]
#endregion


#region Protocols


class RenderingContext(Protocol):
    """2D drawing primitives used by the renderers (HTML canvas subset)."""

    fill_style: str
    stroke_style: str
    line_width: float
    text_baseline: str

    def set_font(self, size: float, face: str) -> None: ...
    def scale(self, sx: float, sy: Optional[float] = None) -> None: ...
    def translate(self, tx: float, ty: float) -> None: ...
    def rotate(self, angle: float) -> None: ...
    def save(self) -> None: ...
    def restore(self) -> None: ...
    def fill_rect(self, x: float, y: float, width: float, height: float) -> None: ...
    def fill_text(self, text: object, x: float, y: float, max_width: Optional[float] = None) -> None: ...
    def measure_text(self, text: object) -> float: ...
    def begin_path(self) -> None: ...
    def move_to(self, x: float, y: float) -> None: ...
    def line_to(self, x: float, y: float) -> None: ...
    def stroke(self) -> None: ...


class Surface(Protocol):
    """Resizable target that hands out a RenderingContext."""

    width: int
    height: int

    def resize(self, width: float, height: float) -> None: ...
    def get_context(self) -> RenderingContext: ...


#endregion


#region Functions


@lru_cache(maxsize=64)
def load_font(face: str, size: int) -> Union[ImageFont.FreeTypeFont, ImageFont.ImageFont]:
    """
    Load a font by family name or file path.

    Falls back to common monospace system fonts, then to Pillow's
    bundled default font.

    Args:
        face: Family name (e.g., 'IBM Plex Mono') or path to a font file
        size: Size in device pixels

    Returns:
        Pillow font object
    """
    compact = face.replace(" ", "")
    candidates = [face, f"{compact}-Regular.ttf", f"{compact}.ttf", *FALLBACK_FONT_PATHS]
    for candidate in candidates:
        try:
            return ImageFont.truetype(candidate, size)
        except OSError:
            continue
    return ImageFont.load_default(size=size)


#endregion


#region Classes


class PillowContext:
    """
    Canvas-style drawing context over a Pillow image.

    Coordinates passed to the drawing methods are logical units; the
    current transform (scale/translate/rotate) maps them to image pixels.
    Path points are transformed when they are added, as on an HTML canvas.
    """

    def __init__(self, image: Image.Image):
        self._image = image
        self._draw = ImageDraw.Draw(image)
        self.fill_style = "#000000"
        self.stroke_style = "#000000"
        self.line_width = 1.0
        self.text_baseline = "alphabetic"
        self.font_size = 10.0
        self.font_face = DEFAULT_FONT_FACE
        self._transform = IDENTITY
        self._stack: list[tuple] = []
        self._subpaths: list[list[tuple[float, float]]] = []

    #region State

    def set_font(self, size: float, face: str) -> None:
        self.font_size = float(size)
        self.font_face = face

    def save(self) -> None:
        self._stack.append((
            self._transform,
            self.fill_style,
            self.stroke_style,
            self.line_width,
            self.text_baseline,
            self.font_size,
            self.font_face,
        ))

    def restore(self) -> None:
        if not self._stack:
            return
        (
            self._transform,
            self.fill_style,
            self.stroke_style,
            self.line_width,
            self.text_baseline,
            self.font_size,
            self.font_face,
        ) = self._stack.pop()

    def scale(self, sx: float, sy: Optional[float] = None) -> None:
        if sy is None:
            sy = sx
        a, b, c, d, e, f = self._transform
        self._transform = (a * sx, b * sx, c * sy, d * sy, e, f)

    def translate(self, tx: float, ty: float) -> None:
        a, b, c, d, e, f = self._transform
        self._transform = (a, b, c, d, e + a * tx + c * ty, f + b * tx + d * ty)

    def rotate(self, angle: float) -> None:
        """Rotate by angle radians, clockwise on screen for positive values."""
        cos, sin = math.cos(angle), math.sin(angle)
        a, b, c, d, e, f = self._transform
        self._transform = (
            a * cos + c * sin,
            b * cos + d * sin,
            c * cos - a * sin,
            d * cos - b * sin,
            e,
            f,
        )

    def _apply(self, x: float, y: float) -> tuple[float, float]:
        a, b, c, d, e, f = self._transform
        return (a * x + c * y + e, b * x + d * y + f)

    @property
    def _pixel_scale(self) -> float:
        a, b, c, d, _, _ = self._transform
        return math.sqrt(abs(a * d - b * c)) or 1.0

    @property
    def _rotation(self) -> float:
        a, b, _, _, _, _ = self._transform
        return math.atan2(b, a)

    #endregion

    #region Rectangles and paths

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None:
        corners = [
            self._apply(x, y),
            self._apply(x + width, y),
            self._apply(x + width, y + height),
            self._apply(x, y + height),
        ]
        _, b, c, _, _, _ = self._transform
        if abs(b) > 1e-9 or abs(c) > 1e-9:
            self._draw.polygon(corners, fill=self.fill_style)
            return

        xs = [p[0] for p in corners]
        ys = [p[1] for p in corners]
        # Pillow rectangles include both end points
        x0, x1 = round(min(xs)), round(max(xs)) - 1
        y0, y1 = round(min(ys)), round(max(ys)) - 1
        if x1 < x0 or y1 < y0:
            return
        self._draw.rectangle([x0, y0, x1, y1], fill=self.fill_style)

    def begin_path(self) -> None:
        self._subpaths = []

    def move_to(self, x: float, y: float) -> None:
        self._subpaths.append([self._apply(x, y)])

    def line_to(self, x: float, y: float) -> None:
        if not self._subpaths:
            self.move_to(x, y)
            return
        self._subpaths[-1].append(self._apply(x, y))

    def stroke(self) -> None:
        width = max(1, round(self.line_width * self._pixel_scale))
        for subpath in self._subpaths:
            if len(subpath) >= 2:
                self._draw.line(subpath, fill=self.stroke_style, width=width)

    #endregion

    #region Text

    def _font(self, size: float) -> Union[ImageFont.FreeTypeFont, ImageFont.ImageFont]:
        return load_font(self.font_face, max(1, round(size * self._pixel_scale)))

    def measure_text(self, text: object) -> float:
        """Width of text in logical units with the current font."""
        font = self._font(self.font_size)
        return self._draw.textlength(str(text), font=font) / self._pixel_scale

    def fill_text(self, text: object, x: float, y: float, max_width: Optional[float] = None) -> None:
        """
        Draw text with its left edge at x and the current baseline at y.

        Args:
            text: Value to draw (converted with str)
            x: Left edge in logical units
            y: Baseline position in logical units (see text_baseline)
            max_width: When the text is wider, the font is shrunk to fit
        """
        text = str(text)
        size = self.font_size
        if max_width is not None and max_width > 0:
            width = self.measure_text(text)
            if width > max_width:
                size = size * max_width / width

        font = self._font(size)
        anchor = None
        if isinstance(font, ImageFont.FreeTypeFont):
            anchor = BASELINE_ANCHORS.get(self.text_baseline, "ls")

        origin = self._apply(x, y)
        rotation = self._rotation
        if abs(rotation) < 1e-9:
            self._draw.text(origin, text, fill=self.fill_style, font=font, anchor=anchor)
            return
        self._paste_rotated_text(text, origin, rotation, font, anchor)

    def _paste_rotated_text(self, text: str, origin: tuple[float, float], rotation: float, font, anchor: Optional[str]) -> None:
        left, top, right, bottom = self._draw.textbbox((0, 0), text, font=font, anchor=anchor)
        pad = 2
        layer = Image.new("RGBA", (right - left + 2 * pad, bottom - top + 2 * pad), (0, 0, 0, 0))
        text_x, text_y = pad - left, pad - top
        ImageDraw.Draw(layer).text((text_x, text_y), text, fill=self.fill_style, font=font, anchor=anchor)

        # Image.rotate turns counter-clockwise, canvas angles turn clockwise
        rotated = layer.rotate(-math.degrees(rotation), expand=True, resample=Image.Resampling.BICUBIC)

        # Where the text origin ends up inside the rotated layer
        vx, vy = text_x - layer.width / 2, text_y - layer.height / 2
        cos, sin = math.cos(rotation), math.sin(rotation)
        rx = rotated.width / 2 + vx * cos - vy * sin
        ry = rotated.height / 2 + vx * sin + vy * cos

        position = (round(origin[0] - rx), round(origin[1] - ry))
        self._image.paste(rotated, position, rotated)

    #endregion


class PillowSurface:
    """
    Pillow image that behaves like an HTML canvas element.

    Resizing replaces the image and resets the drawing context,
    including any scale applied to it.
    """

    def __init__(self, mode: str = "RGBA"):
        self.mode = mode
        self.width = 0
        self.height = 0
        self.image: Optional[Image.Image] = None
        self._context: Optional[PillowContext] = None

    def resize(self, width: float, height: float) -> None:
        self.width = max(1, int(round(width)))
        self.height = max(1, int(round(height)))
        self.image = Image.new(self.mode, (self.width, self.height))
        self._context = None

    def get_context(self) -> PillowContext:
        if self.image is None:
            raise RuntimeError("Surface has no size yet, call resize() first")
        if self._context is None:
            self._context = PillowContext(self.image)
        return self._context

    def save(self, path: Union[str, Path], format: str = "PNG") -> None:
        """
        Write the surface to an image file.

        Raises:
            RuntimeError: If nothing has been rendered yet
            IOError: If the file cannot be written
        """
        if self.image is None:
            raise RuntimeError("Nothing has been rendered to this surface")
        self.image.save(path, format)

    def to_png_bytes(self) -> bytes:
        """Encode the surface as PNG."""
        buffer = io.BytesIO()
        self.save(buffer)
        return buffer.getvalue()


#endregion
