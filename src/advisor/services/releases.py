"""Release lookup against the releases API."""

import itertools
import logging
import threading
from typing import Optional

import httpx
from pydantic import BaseModel, Field, ValidationError

from advisor.models.config import AdvisorConfig, DEFAULT_CONFIG


class ReleaseInfo(BaseModel):
    """GET {releases_base_path}{platform} response body."""

    version: str = Field(..., min_length=1, description="Latest release version")


class ReleaseStore:
    """Singleton holding the most recent release lookup result.

    Lookups may finish out of order; each one takes a ticket when it starts
    and a result is applied only if no newer lookup has already landed.
    """

    _instance: Optional["ReleaseStore"] = None

    def __new__(cls):
        """Implement singleton pattern."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        """Initialize release store (only once due to singleton)."""
        if self._initialized:
            return

        self._initialized = True
        self.logger = logging.getLogger("advisor.release_store")
        self._lock = threading.Lock()
        self._tickets = itertools.count(1)
        self._applied_ticket = 0
        self._version: Optional[str] = None

    def begin(self) -> int:
        """Reserve a ticket for a lookup that is about to start."""
        with self._lock:
            return next(self._tickets)

    def apply(self, ticket: int, version: Optional[str]) -> bool:
        """Store a lookup result unless a newer one was already stored.

        Returns:
            True if applied, False if discarded as stale
        """
        with self._lock:
            if ticket < self._applied_ticket:
                self.logger.debug(
                    f"Discarding stale release result (ticket {ticket} < {self._applied_ticket})"
                )
                return False
            self._applied_ticket = ticket
            self._version = version
            return True

    @property
    def version(self) -> Optional[str]:
        with self._lock:
            return self._version

    def reset(self) -> None:
        with self._lock:
            self._applied_ticket = 0
            self._version = None


class ReleaseService:
    """Fetches the latest available OS release version for a device target.

    Given a platform, the releases API decides whether an update exists using
    the device's installed version, its update channel, and all published
    releases.
    """

    def __init__(
        self,
        config: AdvisorConfig = DEFAULT_CONFIG,
        store: Optional[ReleaseStore] = None,
    ):
        """Initialize release service.

        Args:
            config: Provides releases_base_path, unknown_target, request_timeout
            store: ReleaseStore instance (uses singleton if None)
        """
        self.logger = logging.getLogger("advisor.releases")
        self.config = config
        self.store = store or ReleaseStore()

    def platform_for(self, target: Optional[str]) -> Optional[str]:
        """Platform to query for a target; None when the target is unknown."""
        if not target or target == self.config.unknown_target:
            return None
        return target

    async def fetch_os_update_version(self, target: Optional[str]) -> Optional[str]:
        """Look up the latest release for a target and record it in the store.

        Args:
            target: Hardware target reported by the device

        Returns:
            Latest release version, or None on any failure

        Note:
            Failures are logged, never raised
        """
        ticket = self.store.begin()
        version = await self._lookup(target)
        self.store.apply(ticket, version)
        return version

    async def _lookup(self, target: Optional[str]) -> Optional[str]:
        platform = self.platform_for(target)
        if platform is None:
            self._log_failure("Platform not available.")
            return None

        url = f"{self.config.releases_base_path}{platform}"
        self.logger.debug(f"Fetching release info: {url}")

        try:
            async with httpx.AsyncClient(timeout=self.config.request_timeout) as client:
                response = await client.get(url)
                response.raise_for_status()
                release = ReleaseInfo(**response.json())

        except httpx.HTTPStatusError as e:
            # 404: no new or old releases available on channel
            # 422: invalid platform, or no new releases available (up to date)
            if e.response.status_code == 404:
                self.logger.error("No releases found for platform and channel.")
            self._log_failure(f"HTTP {e.response.status_code} from {url}")
            return None
        except httpx.HTTPError as e:
            self._log_failure(f"Request to {url} failed: {e}")
            return None
        except (ValueError, TypeError, ValidationError) as e:
            self._log_failure(f"Malformed release info from {url}: {e}")
            return None
        except Exception as e:
            self.logger.error(
                f"Unexpected error fetching release info for {platform}: {e}",
                exc_info=True,
            )
            self.logger.error("Could not download OS update information.")
            return None

        self.logger.info(f"Latest release for {platform}: {release.version}")
        return release.version

    def _log_failure(self, reason: str) -> None:
        self.logger.error(reason)
        self.logger.error("Could not download OS update information.")
