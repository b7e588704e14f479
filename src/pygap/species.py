"""
Plant Functional Type (PFT) catalog.

A catalog is an immutable, id-ordered table of PFT records together with the
three recruitment groups derived from shade tolerance. It is built once per
run and shared read-only by every plot and tree.

Usage:
    from pygap.species import SpeciesCatalog, ToleranceClass

    catalog = SpeciesCatalog.build([
        {'name': 'Sugar maple', 'g': 170., 'c': 1.57, 'age_max': 200,
         'tolerance': 'shade_tolerant', 'd_max': 152.5, 'h_max': 4011.,
         'b2': 50.9, 'b3': 0.167, 'degd_min': 2000., 'degd_max': 6300.,
         'wmin': 300., 'wmax': -1.},
        ...
    ])
    catalog[0].name           # "Sugar maple"
    catalog.shade_tolerant_ids
"""

import operator
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Tuple

from .exceptions import ConfigurationError, SpeciesNotFoundError

__all__ = [
    'ToleranceClass',
    'Pft',
    'SpeciesCatalog',
    'PFT_FIELDS',
]


class ToleranceClass(str, Enum):
    """Shade tolerance class of a PFT.

    Decides which recruitment rule and which light-response curve apply.
    """

    SHADE_TOLERANT = "shade_tolerant"
    """Establishes under any canopy; steep light response."""

    CHERRY = "cherry"
    """Early-successional pioneer; establishes only in open gaps."""

    BIRCH = "birch"
    """Mid-successional; establishes under a partly closed canopy."""

    @classmethod
    def from_string(cls, value: str) -> 'ToleranceClass':
        """Convert a configuration string to a ToleranceClass.

        Accepts any case and spaces or hyphens in place of underscores.

        Raises:
            ConfigurationError: If the value names no tolerance class
        """
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower().replace('-', '_').replace(' ', '_')
        for member in cls:
            if member.value == normalized:
                return member
        raise ConfigurationError(
            f"Unknown tolerance class '{value}'. "
            f"Valid classes: {[m.value for m in cls]}"
        )


# Record fields in the column order of the configuration table
PFT_FIELDS: Tuple[str, ...] = (
    'name', 'g', 'c', 'age_max', 'tolerance', 'd_max', 'h_max',
    'b2', 'b3', 'degd_min', 'degd_max', 'wmin', 'wmax',
)


@dataclass(frozen=True)
class Pft:
    """Plant Functional Type parameters.

    Attributes:
        id: Zero-based position in the catalog
        name: Common name
        g: Growth rate coefficient
        c: Allometric weight coefficient (weight = c * d^2)
        age_max: Maximum age (years)
        tolerance: Shade tolerance class
        d_max: Maximum diameter (cm)
        h_max: Maximum height (cm)
        b2: Linear height-diameter coefficient
        b3: Quadratic height-diameter coefficient
        degd_min: Minimum growing degree-days (unused)
        degd_max: Maximum growing degree-days (unused)
        wmin: Minimum soil moisture (unused)
        wmax: Maximum soil moisture, -1 when unbounded (unused)
    """
    id: int
    name: str
    g: float
    c: float
    age_max: int
    tolerance: ToleranceClass
    d_max: float
    h_max: float
    b2: float
    b3: float
    degd_min: float
    degd_max: float
    wmin: float
    wmax: float

    @property
    def is_shade_tolerant(self) -> bool:
        return self.tolerance is ToleranceClass.SHADE_TOLERANT


def _build_pft(pft_id: int, record: Mapping[str, Any]) -> Pft:
    missing = [name for name in PFT_FIELDS if name not in record]
    if missing:
        raise ConfigurationError(
            f"Species record {pft_id} ({record.get('name', '?')}) is missing fields: {missing}"
        )

    name = str(record['name'])
    try:
        pft = Pft(
            id=pft_id,
            name=name,
            g=float(record['g']),
            c=float(record['c']),
            age_max=int(record['age_max']),
            tolerance=ToleranceClass.from_string(record['tolerance']),
            d_max=float(record['d_max']),
            h_max=float(record['h_max']),
            b2=float(record['b2']),
            b3=float(record['b3']),
            degd_min=float(record['degd_min']),
            degd_max=float(record['degd_max']),
            wmin=float(record['wmin']),
            wmax=float(record['wmax']),
        )
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"Invalid species record for '{name}': {e}") from e

    for param in ('d_max', 'h_max', 'age_max'):
        if getattr(pft, param) <= 0:
            raise ConfigurationError(
                f"Species '{name}' has non-positive {param}: {getattr(pft, param)}"
            )
    return pft


class SpeciesCatalog:
    """Immutable table of PFTs with shade-tolerance recruitment groups.

    Build catalogs with SpeciesCatalog.build(); ids are assigned 0..n-1 in
    record order.

    Attributes:
        shade_tolerant_ids: Ids of shade-tolerant species
        cherry_ids: Ids of early-successional species
        birch_ids: Ids of mid-successional species
    """

    __slots__ = ('_pfts', 'shade_tolerant_ids', 'cherry_ids', 'birch_ids')

    def __init__(self, pfts: Iterable[Pft]):
        object.__setattr__(self, '_pfts', tuple(pfts))
        groups: Dict[ToleranceClass, List[int]] = {t: [] for t in ToleranceClass}
        for pft in self._pfts:
            groups[pft.tolerance].append(pft.id)
        object.__setattr__(self, 'shade_tolerant_ids', tuple(groups[ToleranceClass.SHADE_TOLERANT]))
        object.__setattr__(self, 'cherry_ids', tuple(groups[ToleranceClass.CHERRY]))
        object.__setattr__(self, 'birch_ids', tuple(groups[ToleranceClass.BIRCH]))

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    @classmethod
    def build(cls, records: Iterable[Mapping[str, Any]],
              require_all_groups: bool = True) -> 'SpeciesCatalog':
        """Build a catalog from PFT records.

        Args:
            records: Mappings with the keys listed in PFT_FIELDS
            require_all_groups: If True, every tolerance class must have at
                least one species. Recruitment draws uniformly from each group,
                so an empty group is only acceptable in reduced test catalogs.

        Returns:
            SpeciesCatalog

        Raises:
            ConfigurationError: On an empty catalog, a malformed record,
                non-positive d_max/h_max/age_max or an empty tolerance group
        """
        pfts = [_build_pft(i, record) for i, record in enumerate(records)]
        if not pfts:
            raise ConfigurationError("Species catalog is empty")

        catalog = cls(pfts)
        if require_all_groups:
            for tolerance in ToleranceClass:
                if not catalog.group(tolerance):
                    raise ConfigurationError(
                        f"No species with tolerance class '{tolerance.value}' in catalog"
                    )
        return catalog

    def __len__(self) -> int:
        return len(self._pfts)

    def __iter__(self) -> Iterator[Pft]:
        return iter(self._pfts)

    def __getitem__(self, pft_id: int) -> Pft:
        return self.get(pft_id)

    def get(self, pft_id: int) -> Pft:
        """Look up a species by id.

        Accepts any integer type, including numpy integers.

        Raises:
            SpeciesNotFoundError: If the id is not an integer or is outside the catalog
        """
        if isinstance(pft_id, bool):
            raise SpeciesNotFoundError(pft_id, len(self._pfts))
        try:
            index = operator.index(pft_id)
        except TypeError:
            raise SpeciesNotFoundError(pft_id, len(self._pfts)) from None
        if not 0 <= index < len(self._pfts):
            raise SpeciesNotFoundError(pft_id, len(self._pfts))
        return self._pfts[index]

    def by_name(self, name: str) -> Pft:
        """Look up a species by name (case-insensitive).

        Raises:
            SpeciesNotFoundError: If no species has that name
        """
        wanted = name.strip().lower()
        for pft in self._pfts:
            if pft.name.lower() == wanted:
                return pft
        raise SpeciesNotFoundError(name, len(self._pfts))

    def group(self, tolerance: ToleranceClass) -> Tuple[int, ...]:
        """Return the species ids of one tolerance class."""
        tolerance = ToleranceClass.from_string(tolerance)
        if tolerance is ToleranceClass.SHADE_TOLERANT:
            return self.shade_tolerant_ids
        if tolerance is ToleranceClass.CHERRY:
            return self.cherry_ids
        return self.birch_ids

    @property
    def names(self) -> List[str]:
        """Species names in id order."""
        return [pft.name for pft in self._pfts]

    def __repr__(self) -> str:
        return (f"SpeciesCatalog({len(self)} species: "
                f"{len(self.shade_tolerant_ids)} shade tolerant, "
                f"{len(self.cherry_ids)} cherry, {len(self.birch_ids)} birch)")
