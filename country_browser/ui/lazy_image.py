from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict

from dash import html

DEFAULT_OFFSET_PX = 1300
DEFAULT_PLACEHOLDER_HEIGHT_PX = 200

# 1x1 transparent gif so the <img> has a valid src before the real one is swapped in
PLACEHOLDER_SRC = "data:image/gif;base64,R0lGODlhAQABAAAAACH5BAEKAAEALAAAAAABAAEAAAICTAEAOw=="


class ImageState(str, Enum):
    NOT_VISIBLE = "not-visible"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


@dataclass(frozen=True)
class ImageStyle:
    width_px: int = 50
    height_px: int | None = None

    def to_css(self) -> Dict[str, str]:
        css = {"width": f"{self.width_px}px"}
        if self.height_px is not None:
            css["height"] = f"{self.height_px}px"
        return css


@dataclass
class DeferredImage:
    """
    Image cell that is not requested until it comes near the viewport.

    States: not-visible -> loading -> loaded | failed

    - observe(distance_px) is the visibility signal; the request starts once
      the cell is within offset_px of the viewport
    - the image is requested at most once per mount (request_count <= 1)

    The browser side of this lives in assets/lazy_image.js, which reads the
    same data-* attributes and drives data-state through the same states.
    """

    src: str
    alt: str
    style: ImageStyle = field(default_factory=ImageStyle)
    offset_px: int = DEFAULT_OFFSET_PX
    placeholder_height_px: int = DEFAULT_PLACEHOLDER_HEIGHT_PX
    state: ImageState = ImageState.NOT_VISIBLE
    request_count: int = 0

    def observe(self, distance_px: float) -> ImageState:
        if self.state is ImageState.NOT_VISIBLE and distance_px <= self.offset_px:
            self.state = ImageState.LOADING
            self.request_count += 1
        return self.state

    def loaded(self) -> ImageState:
        if self.state is ImageState.LOADING:
            self.state = ImageState.LOADED
        return self.state

    def failed(self) -> ImageState:
        if self.state is ImageState.LOADING:
            self.state = ImageState.FAILED
        return self.state

    @property
    def current_src(self) -> str:
        if self.state is ImageState.NOT_VISIBLE:
            return PLACEHOLDER_SRC
        return self.src

    def render(self) -> html.Img:
        style = self.style.to_css()
        if self.state is ImageState.NOT_VISIBLE:
            style.setdefault("minHeight", f"{self.placeholder_height_px}px")

        return html.Img(
            src=self.current_src,
            alt=self.alt,
            style=style,
            className="lazy-image",
            **{
                "data-src": self.src,
                "data-offset": str(self.offset_px),
                "data-state": self.state.value,
            },
        )
