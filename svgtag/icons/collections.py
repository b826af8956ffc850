"""Icon collection registry: collection name -> URL template."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from svgtag.errors import UnknownCollectionError

PLACEHOLDER = "%s"

DEFAULT_COLLECTIONS: dict[str, str] = {
    "bootstrap": "https://icons.getbootstrap.com/assets/icons/%s.svg",
    "material": "https://raw.githubusercontent.com/Templarian/MaterialDesign/master/svg/%s.svg",
    "octicons": "https://raw.githubusercontent.com/primer/octicons/master/icons/%s-24.svg",
    "boxicons": "https://boxicons.com/static/img/svg/regular/bx-%s.svg",
    "simple": "https://raw.githubusercontent.com/simple-icons/simple-icons/develop/icons/%s.svg",
}


class CollectionRegistry(Mapping[str, str]):
    """Immutable mapping of collection names to URL templates.

    Templates carry one ``%s`` placeholder for the icon name. They are not
    validated: a template without it resolves to a URL that fails at fetch time.
    """

    def __init__(self, templates: Mapping[str, str] | None = None) -> None:
        source = DEFAULT_COLLECTIONS if templates is None else templates
        self._templates = MappingProxyType(dict(source))

    def __getitem__(self, collection: str) -> str:
        try:
            return self._templates[collection]
        except KeyError:
            raise UnknownCollectionError(collection) from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._templates)

    def __len__(self) -> int:
        return len(self._templates)

    def url_for(self, collection: str, name: str) -> str:
        return self[collection].replace(PLACEHOLDER, name, 1)

    def with_collection(self, collection: str, template: str) -> CollectionRegistry:
        return CollectionRegistry({**self._templates, collection: template})

    def __repr__(self) -> str:
        return f"CollectionRegistry({sorted(self._templates)})"
