"""
Leg Catalog Repository - cached, read-only catalog snapshots.

Builds immutable LegCatalog snapshots from a data provider and serves
them to concurrent searches:
- Timestamps parsed once at load time (malformed data fails here)
- TTL-based in-memory cache
- Background reloads that skip the rebuild when the rows are unchanged
"""

from __future__ import annotations

import hashlib
import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from typing import TYPE_CHECKING, FrozenSet, List, Optional

import pandas as pd

from src.itinerary_router.ports.catalog_cache import CatalogNotInitializedError
from src.itinerary_search.catalog import LegCatalog
from src.itinerary_search.exceptions import MalformedLegDataError
from src.itinerary_search.models import Leg
from src.itinerary_search.validation import validate_legs_df

if TYPE_CHECKING:
    from src.itinerary_router.ports.leg_data_provider import LegDataProvider

logger = logging.getLogger(__name__)


# =============================================================================
# CATALOG BUILD: DataFrame rows -> immutable Leg objects
# =============================================================================


def _parse_timestamps(series: pd.Series, legs_df: pd.DataFrame) -> pd.Series:
    parsed = pd.to_datetime(series, utc=True, errors="coerce", format="ISO8601")
    bad = parsed.isna()
    if bad.any():
        position = int(bad.to_numpy().nonzero()[0][0])
        raise MalformedLegDataError(
            str(legs_df["leg_id"].iloc[position]),
            f"unparseable {series.name} timestamp {series.iloc[position]!r}",
        )
    return parsed


def build_leg_catalog(legs_df: pd.DataFrame) -> LegCatalog:
    """
    Convert a LegSchema DataFrame into an immutable LegCatalog.

    Row order is preserved as catalog order. Timestamps are parsed as
    UTC instants; offsets in the source strings are honoured.

    Args:
        legs_df: Leg rows (normally already validated by the provider).

    Returns:
        LegCatalog holding one Leg per row.

    Raises:
        MissingColumnsError: If required columns are absent.
        MalformedLegDataError: If a timestamp or duration is invalid.
    """
    validate_legs_df(legs_df)

    if legs_df.empty:
        return LegCatalog(legs=())

    departures = _parse_timestamps(legs_df["departure"], legs_df)
    arrivals = _parse_timestamps(legs_df["arrival"], legs_df)

    legs: List[Leg] = []
    for row, dep, arr in zip(
        legs_df.itertuples(index=False), departures, arrivals
    ):
        try:
            legs.append(
                Leg(
                    leg_id=str(row.leg_id),
                    origin=str(row.origin),
                    destination=str(row.destination),
                    operator=str(row.operator),
                    duration_minutes=int(row.duration_minutes),
                    departure=dep.to_pydatetime(),
                    arrival=arr.to_pydatetime(),
                )
            )
        except (TypeError, ValueError) as e:
            raise MalformedLegDataError(str(row.leg_id), str(e)) from e

    return LegCatalog(legs=tuple(legs))


# =============================================================================
# CACHED CATALOG: snapshot plus metadata
# =============================================================================


@dataclass(frozen=True, eq=False)
class CachedLegCatalog:
    """
    Immutable catalog snapshot with load metadata.

    Attributes:
        catalog: The LegCatalog handed to searches.
        legs_df: Validated source rows the catalog was built from.
        built_at: When the rows were last loaded or confirmed unchanged.
        version: Content hash for change detection.
        row_count: Number of legs.
    """

    catalog: LegCatalog
    legs_df: pd.DataFrame
    built_at: datetime
    version: str
    row_count: int

    @property
    def locations(self) -> FrozenSet[str]:
        return self.catalog.locations

    @property
    def operators(self) -> FrozenSet[str]:
        return self.catalog.operators

    def has_location(self, location: str) -> bool:
        return location in self.catalog.locations


# =============================================================================
# IN-MEMORY CACHE
# =============================================================================


class InMemoryLegCatalogCache:
    """
    In-process snapshot cache with a time-to-live.

    Thread-safe for concurrent access within a single process.
    """

    def __init__(self, ttl: timedelta) -> None:
        """
        Args:
            ttl: How long a cached snapshot remains fresh.
        """
        self._snapshot: Optional[CachedLegCatalog] = None
        self._ttl = ttl
        self._lock = threading.Lock()

    def get(self) -> Optional[CachedLegCatalog]:
        with self._lock:
            return self._snapshot

    def set(self, snapshot: CachedLegCatalog) -> None:
        with self._lock:
            self._snapshot = snapshot

    @property
    def is_stale(self) -> bool:
        with self._lock:
            if self._snapshot is None:
                return True
            return datetime.now() - self._snapshot.built_at > self._ttl


# =============================================================================
# REPOSITORY: first load on the caller, reloads on a worker thread
# =============================================================================


def content_version(legs_df: pd.DataFrame) -> str:
    """Short hash of the leg rows and column names."""
    digest = hashlib.md5()
    digest.update(",".join(map(str, legs_df.columns)).encode())
    if len(legs_df) > 0:
        digest.update(
            pd.util.hash_pandas_object(legs_df, index=False).to_numpy().tobytes()
        )
    return digest.hexdigest()[:12]


class LegCatalogRepository:
    """
    Serves LegCatalog snapshots to concurrent searches.

    The first read loads the catalog on the caller's thread; if that load
    fails the read raises CatalogNotInitializedError. Later reads return
    the current snapshot at once. A snapshot past its TTL, or an explicit
    refresh_catalog() call, schedules a single reload on a worker thread:

    - rows are read and hashed before anything is built;
    - an unchanged hash keeps the existing LegCatalog and only renews its
      timestamp;
    - a changed hash builds a new catalog and swaps it in;
    - a failed reload is logged and the previous snapshot keeps serving.

    Usage:
        >>> repo = LegCatalogRepository(StaticLegProvider(), cache)
        >>> snapshot = repo.get_catalog()
    """

    def __init__(
        self,
        data_provider: LegDataProvider,
        cache: InMemoryLegCatalogCache,
        auto_refresh: bool = True,
    ) -> None:
        """
        Args:
            data_provider: Source of leg rows.
            cache: Snapshot cache.
            auto_refresh: If True, reload in the background once stale.
        """
        self._provider = data_provider
        self._cache = cache
        self._auto_refresh = auto_refresh

        self._load_lock = threading.Lock()
        self._pending: Optional[Future] = None

        self._executor = ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="catalog-reload"
        )

    def get_catalog(self) -> CachedLegCatalog:
        """
        Return the current snapshot, loading it on first use.

        Raises:
            CatalogNotInitializedError: If the first load fails.
        """
        snapshot = self._cache.get()
        if snapshot is None:
            return self._load_first()

        if self._auto_refresh and self._cache.is_stale:
            self._schedule_reload("stale")
        return snapshot

    def refresh_catalog(self) -> Future:
        """
        Schedule a reload regardless of snapshot age.

        Returns:
            Future of the reload. A reload already in flight is reused.
        """
        return self._schedule_reload("requested")

    def _load_first(self) -> CachedLegCatalog:
        with self._load_lock:
            snapshot = self._cache.get()
            if snapshot is not None:
                return snapshot

            try:
                snapshot = self._load(previous=None)
            except Exception as e:
                logger.error(
                    "Loading leg catalog from %s failed: %s", self._provider.name, e
                )
                raise CatalogNotInitializedError(
                    f"Failed to load leg catalog: {e}"
                ) from e
            self._cache.set(snapshot)

        logger.info(
            "Leg catalog %s loaded from %s: %d legs, %d locations",
            snapshot.version,
            self._provider.name,
            snapshot.row_count,
            len(snapshot.locations),
        )
        return snapshot

    def _schedule_reload(self, reason: str) -> Future:
        with self._load_lock:
            if self._pending is None or self._pending.done():
                logger.debug("Scheduling leg catalog reload (%s)", reason)
                self._pending = self._executor.submit(self._reload)
            return self._pending

    def _reload(self) -> None:
        previous = self._cache.get()
        try:
            snapshot = self._load(previous)
        except Exception as e:
            logger.error(
                "Leg catalog reload failed, still serving %s: %s",
                previous.version if previous else "nothing",
                e,
            )
            return

        self._cache.set(snapshot)
        if previous is not None and snapshot.catalog is previous.catalog:
            logger.debug("Leg catalog %s unchanged", snapshot.version)
        else:
            logger.info(
                "Leg catalog reloaded: %s -> %s, %d legs",
                previous.version if previous else None,
                snapshot.version,
                snapshot.row_count,
            )

    def _load(self, previous: Optional[CachedLegCatalog]) -> CachedLegCatalog:
        legs_df = self._provider.get_legs_df().reset_index(drop=True)
        version = content_version(legs_df)

        if previous is not None and previous.version == version:
            return replace(previous, built_at=datetime.now())

        return CachedLegCatalog(
            catalog=build_leg_catalog(legs_df),
            legs_df=legs_df,
            built_at=datetime.now(),
            version=version,
            row_count=len(legs_df),
        )

    def shutdown(self) -> None:
        """Wait for a pending reload, then stop the worker thread."""
        self._executor.shutdown(wait=True)

    @property
    def is_loaded(self) -> bool:
        return self._cache.get() is not None

    @property
    def loaded_version(self) -> Optional[str]:
        snapshot = self._cache.get()
        return snapshot.version if snapshot else None
