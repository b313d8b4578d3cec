from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Mapping


@dataclass(frozen=True)
class Country:
    """
    One country record as received from the countries API.

    Fields:

    - name: display name, used by the name search
    - code: country abbreviation (API field 'abbreviation')
    - capital: capital city
    - phone_code: international dialling code (API field 'phone')
    - population: non-negative head count, used by the population buckets
    - flag / emblem: image URIs (API fields 'media.flag' / 'media.emblem')
    - continent: continent name

    Records have no explicit key. The UI keys rows by flag URI.
    """

    name: str
    code: str = ""
    capital: str = ""
    phone_code: str = ""
    population: int = 0
    flag: str = ""
    emblem: str = ""
    continent: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Country:
        return cls(
            name=str(data.get("name") or ""),
            code=str(data.get("code") or ""),
            capital=str(data.get("capital") or ""),
            phone_code=str(data.get("phone_code") or ""),
            population=int(data.get("population") or 0),
            flag=str(data.get("flag") or ""),
            emblem=str(data.get("emblem") or ""),
            continent=str(data.get("continent") or ""),
        )

    @classmethod
    def from_api(cls, raw: Mapping[str, Any]) -> Country:
        """
        Decode one element of the API payload:

            {name, abbreviation, capital, phone, population,
             media: {flag, emblem}, continent}

        Missing text fields become "" and a missing population becomes 0.
        :raises ValueError: if the element is not an object or the population
                            is not a non-negative integer.
        """
        if not isinstance(raw, Mapping):
            raise ValueError(f"Expected a country object, got {type(raw).__name__}")

        media = raw.get("media") or {}
        if not isinstance(media, Mapping):
            raise ValueError(f"Invalid media block for country {raw.get('name')!r}")

        return cls(
            name=_text(raw.get("name")),
            code=_text(raw.get("abbreviation")),
            capital=_text(raw.get("capital")),
            phone_code=_text(raw.get("phone")),
            population=_population(raw.get("population"), raw.get("name")),
            flag=_text(media.get("flag")),
            emblem=_text(media.get("emblem")),
            continent=_text(raw.get("continent")),
        )


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _population(value: Any, name: Any) -> int:
    if value is None:
        return 0
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool):
        raise ValueError(f"Invalid population {value!r} for country {name!r}")
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if not isinstance(value, int) or value < 0:
        raise ValueError(f"Invalid population {value!r} for country {name!r}")
    return value
