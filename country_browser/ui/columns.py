from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Tuple

from dash import html

from country_browser.core.country import Country
from country_browser.ui.lazy_image import DEFAULT_OFFSET_PX, DeferredImage, ImageStyle


class ColumnKind(str, Enum):
    TEXT = "text"
    IMAGE = "image"


@dataclass(frozen=True)
class ColumnDef:
    """
    One table column: header label, the Country attribute it shows and how
    its cells are drawn.

    - TEXT columns render the attribute as plain text
    - IMAGE columns treat the attribute as a URI and render a DeferredImage
    """

    header: str
    attribute: str
    kind: ColumnKind = ColumnKind.TEXT
    alt: Optional[str] = None
    image_style: ImageStyle = field(default_factory=ImageStyle)

    def value(self, country: Country) -> Any:
        return getattr(country, self.attribute)

    def render_cell(self, country: Country, offset_px: int = DEFAULT_OFFSET_PX) -> html.Td:
        if self.kind is ColumnKind.IMAGE:
            image = DeferredImage(
                src=self.value(country),
                alt=self.alt or self.header,
                style=self.image_style,
                offset_px=offset_px,
            )
            return html.Td(image.render())
        return html.Td(str(self.value(country)))


DEFAULT_COLUMNS: Tuple[ColumnDef, ...] = (
    ColumnDef(header="Country Name", attribute="name"),
    ColumnDef(header="Code", attribute="code"),
    ColumnDef(header="Capital", attribute="capital"),
    ColumnDef(header="Phone Code", attribute="phone_code"),
    ColumnDef(header="Population", attribute="population"),
    ColumnDef(header="Flag", attribute="flag", kind=ColumnKind.IMAGE, alt="Flag"),
    ColumnDef(header="Emblem", attribute="emblem", kind=ColumnKind.IMAGE, alt="emblem"),
)
