"""Entry point for the TMDB v3 API."""

from __future__ import annotations

import asyncio
import threading
import weakref
from types import TracebackType

import httpx

from tmdbkit.infrastructure.config.defaults import API_URL
from tmdbkit.infrastructure.config.schema import TmdbSettings
from tmdbkit.infrastructure.http.auth_transport import PARAM_API_KEY, ApiKeyTransport
from tmdbkit.infrastructure.http.bundle import ClientBundle
from tmdbkit.infrastructure.http.codec import JsonCodec
from tmdbkit.infrastructure.http.debug_transport import DebugLoggingTransport
from tmdbkit.infrastructure.logging.setup import get_logger
from tmdbkit.services import (
    CollectionService,
    ConfigurationService,
    DiscoverService,
    FindService,
    MoviesService,
    PeopleService,
    SearchService,
    TvEpisodesService,
    TvSeasonsService,
    TvService,
)

log = get_logger(__name__)

__all__ = ["API_URL", "PARAM_API_KEY", "Tmdb"]


class Tmdb:
    """Helper for easy usage of the TMDB v3 API.

    Create an instance, set the API key and call any of the service methods::

        async with Tmdb("my-key") as tmdb:
            page = (await tmdb.search().movie("Fight Club")).unwrap()

    The service methods build the ``httpx.AsyncClient`` on first use and
    reuse it until the API key or the debug flag changes.  Services are
    cheap; get a new one after changing the configuration instead of
    holding on to an old one.

    To customize the HTTP stack (proxies, timeouts, a mock transport in
    tests) override ``new_transport()`` or ``new_http_client()``.  The API
    key is always added on top of whatever they return.
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        debug: bool | None = None,
        settings: TmdbSettings | None = None,
    ) -> None:
        self._settings = settings or TmdbSettings()
        self._api_key = api_key if api_key is not None else self._settings.api_key
        self._debug = debug if debug is not None else self._settings.debug
        self._lock = threading.Lock()
        self._bundle: ClientBundle | None = None
        # Replaced bundles still held elsewhere, with their client.
        self._retired: list[tuple[weakref.ref[ClientBundle], httpx.AsyncClient]] = []
        self._closing: set[asyncio.Task[None]] = set()

    @classmethod
    def from_settings(cls, settings: TmdbSettings) -> Tmdb:
        return cls(settings=settings)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def settings(self) -> TmdbSettings:
        return self._settings

    @property
    def api_key(self) -> str | None:
        return self._api_key

    @property
    def debug(self) -> bool:
        return self._debug

    def set_api_key(self, value: str | None) -> Tmdb:
        """Set the TMDB API key.

        The next service method call builds a new client.  Services obtained
        earlier keep using the old key; the old client is closed once none
        of them is left.
        """
        with self._lock:
            self._api_key = value
            self._invalidate()
        return self

    def set_debug(self, enabled: bool) -> Tmdb:
        """Enable or disable request/response body logging.

        Bodies are logged at DEBUG on the ``tmdbkit`` stdlib logger, so the
        application has to let DEBUG through (e.g. ``configure_logging``).
        The client is rebuilt on the next service method call.
        """
        with self._lock:
            self._debug = enabled
            self._invalidate()
        return self

    def _invalidate(self) -> None:
        if self._bundle is not None:
            self._retired.append((weakref.ref(self._bundle), self._bundle.http))
            self._bundle = None
        self._release_idle()

    def _release_idle(self) -> None:
        """Close retired clients whose bundle is no longer referenced.

        A bundle stays referenced while a service (and so any in-flight
        request) or a caller holds it.  Must be called with the lock held.
        """
        idle = [http for ref, http in self._retired if ref() is None]
        if not idle:
            return
        self._retired = [(ref, http) for ref, http in self._retired if ref() is not None]

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            # No running loop, so nothing can be in flight on these clients.
            log.debug("tmdb_idle_clients_dropped", count=len(idle))
            return

        for http in idle:
            task = loop.create_task(http.aclose())
            self._closing.add(task)
            task.add_done_callback(self._closing.discard)
        log.debug("tmdb_idle_clients_closing", count=len(idle))

    # ------------------------------------------------------------------
    # Client construction
    # ------------------------------------------------------------------

    def new_transport(self) -> httpx.AsyncBaseTransport:
        """Create the innermost transport. Override to e.g. set a proxy.

        Returns:
            A plain ``httpx.AsyncHTTPTransport``.
        """
        return httpx.AsyncHTTPTransport()

    def new_http_client(self, transport: httpx.AsyncBaseTransport) -> httpx.AsyncClient:
        """Create the ``httpx.AsyncClient`` around *transport*.

        Overrides must pass *transport* on unchanged, it carries the API key.
        """
        return httpx.AsyncClient(
            base_url=self._settings.base_url,
            transport=transport,
            timeout=httpx.Timeout(self._settings.timeout_seconds),
            headers={
                "Accept": "application/json",
                "User-Agent": self._settings.user_agent,
            },
        )

    def _build_transport(self) -> httpx.AsyncBaseTransport:
        transport = self.new_transport()
        if self._debug:
            transport = DebugLoggingTransport(transport)
        return ApiKeyTransport(transport, self._api_key)

    def _build_client(self) -> ClientBundle:
        bundle = ClientBundle(
            base_url=self._settings.base_url,
            http=self.new_http_client(self._build_transport()),
            codec=JsonCodec(),
        )
        log.debug(
            "tmdb_client_built",
            base_url=bundle.base_url,
            debug=self._debug,
            has_api_key=bool(self._api_key),
        )
        return bundle

    def get_client(self) -> ClientBundle:
        """Return the current client bundle, building one if none exists."""
        with self._lock:
            if self._bundle is None:
                self._release_idle()
                self._bundle = self._build_client()
            return self._bundle

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def aclose(self) -> None:
        """Close the current client and every replaced client still open."""
        with self._lock:
            clients = [http for _, http in self._retired]
            if self._bundle is not None:
                clients.append(self._bundle.http)
            self._retired = []
            self._bundle = None
            closing = list(self._closing)

        for http in clients:
            await http.aclose()
        if closing:
            await asyncio.gather(*closing)
        if clients:
            log.debug("tmdb_clients_closed", count=len(clients))

    async def __aenter__(self) -> Tmdb:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    # ------------------------------------------------------------------
    # Service accessors
    # ------------------------------------------------------------------

    def configuration(self) -> ConfigurationService:
        return ConfigurationService(self.get_client())

    def find(self) -> FindService:
        return FindService(self.get_client())

    def movies(self) -> MoviesService:
        return MoviesService(self.get_client())

    def people(self) -> PeopleService:
        return PeopleService(self.get_client())

    def search(self) -> SearchService:
        return SearchService(self.get_client())

    def tv(self) -> TvService:
        return TvService(self.get_client())

    def tv_seasons(self) -> TvSeasonsService:
        return TvSeasonsService(self.get_client())

    def tv_episodes(self) -> TvEpisodesService:
        return TvEpisodesService(self.get_client())

    def discover(self) -> DiscoverService:
        return DiscoverService(self.get_client())

    def collections(self) -> CollectionService:
        return CollectionService(self.get_client())
