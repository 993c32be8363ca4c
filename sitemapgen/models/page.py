from typing import Any, Dict, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, PrivateAttr, field_validator
from pydantic import ValidationError as PydanticValidationError

from sitemapgen.errors import InvalidInputError

# Sitemap protocol fields, in the order every encoder emits them
RECOGNIZED_FIELDS: Tuple[str, ...] = ("loc", "lastmod", "priority", "changefreq")

CHANGE_FREQUENCIES: Tuple[str, ...] = (
    "always",
    "hourly",
    "daily",
    "weekly",
    "monthly",
    "yearly",
    "never",
)


class PageRecord(BaseModel):
    """One URL entry of a sitemap.

    The four protocol fields are typed attributes; every other key supplied
    by the caller lands in ``extensions``, in insertion order. Values are kept
    as text exactly as given and are only checked by
    :func:`~sitemapgen.services.record_validator.validate_pages`.
    """

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    loc: Optional[str] = None
    lastmod: Optional[str] = None
    priority: Optional[str] = None
    changefreq: Optional[str] = None
    extensions: Dict[str, Optional[str]] = {}

    # Key order of the source mapping; drives CSV column derivation
    _field_order: Tuple[str, ...] = PrivateAttr(default=())

    @field_validator("extensions")
    @classmethod
    def check_extension_names(cls, value: Dict[str, Optional[str]]) -> Dict[str, Optional[str]]:
        clashing = [name for name in value if name in RECOGNIZED_FIELDS]
        if clashing:
            raise ValueError(f"protocol fields cannot be extensions: {', '.join(clashing)}")
        return value

    @classmethod
    def from_mapping(cls, mapping: Mapping[Any, Any]) -> "PageRecord":
        """Build a record from a caller-supplied key/value mapping.

        A ``None`` value on a protocol field counts as absent. Numbers are
        accepted and converted to text.

        Raises:
            InvalidInputError: if a value is not text, a number, or ``None``.
        """
        recognized: Dict[str, Any] = {}
        extensions: Dict[str, Any] = {}
        for key, value in mapping.items():
            name = str(key)
            if name in RECOGNIZED_FIELDS:
                recognized[name] = value
            else:
                extensions[name] = value

        try:
            record = cls(**recognized, extensions=extensions)
        except PydanticValidationError as exc:
            fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in exc.errors())
            raise InvalidInputError(f"Page values must be text or numbers (offending: {fields}).") from exc

        record._field_order = tuple(str(key) for key in mapping.keys())
        return record

    def field_names(self) -> List[str]:
        """Return the keys of this record in source order.

        Protocol fields that are absent are omitted. Records built directly
        (not via :meth:`from_mapping`) list protocol fields first.
        """
        if self._field_order:
            return [
                name
                for name in self._field_order
                if name in self.extensions or getattr(self, name, None) is not None
            ]
        names = [name for name in RECOGNIZED_FIELDS if getattr(self, name) is not None]
        names.extend(self.extensions)
        return names

    def get(self, name: str) -> Optional[str]:
        """Return the value of protocol or extension field *name*, or ``None``."""
        if name in RECOGNIZED_FIELDS:
            return getattr(self, name)
        return self.extensions.get(name)
