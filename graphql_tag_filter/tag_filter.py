from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any, Optional

from graphql_tag_filter.utilities.sets import has_intersection


def _to_tag_set(value: Optional[Iterable[str]], key: str) -> Optional[frozenset[str]]:
    if value is None:
        return None
    if isinstance(value, str):
        raise TypeError(f'TagFilter.{key} must be a collection of tags, not a string: {value!r}')
    return frozenset(value)


@dataclass(frozen=True)
class TagFilter:
    """Which tagged nodes of a subgraph stay accessible.

    ``None`` means "no constraint of that kind". An empty ``include`` is a
    constraint nothing can satisfy, so every node gets excluded.
    """

    include: Optional[frozenset[str]] = None
    exclude: Optional[frozenset[str]] = None

    def __post_init__(self):
        object.__setattr__(self, 'include', _to_tag_set(self.include, 'include'))
        object.__setattr__(self, 'exclude', _to_tag_set(self.exclude, 'exclude'))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> 'TagFilter':
        unknown = set(mapping) - {'include', 'exclude'}
        if unknown:
            raise ValueError(f'Unknown tag filter keys: {", ".join(sorted(unknown))}')
        return cls(include=mapping.get('include'), exclude=mapping.get('exclude'))

    def excludes(self, tags: frozenset[str]) -> bool:
        return (self.include is not None and not has_intersection(tags, self.include)) or (
            self.exclude is not None and has_intersection(tags, self.exclude)
        )

    # Types are only ever forced inaccessible by `exclude`; `include` applies
    # to their members.
    def excludes_type(self, tags: frozenset[str]) -> bool:
        return self.exclude is not None and has_intersection(tags, self.exclude)
