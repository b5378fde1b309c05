"""Process-wide ownership of the detected platform snapshot."""

from __future__ import annotations

import logging

from gldetect.platform import PlatformSnapshot, StringQuery, detect
from gldetect.version import VersionNumber

log = logging.getLogger(__name__)


class PlatformContext:
    """Holds at most one :class:`PlatformSnapshot` for the lifetime of a GL context.

    ``initialize`` runs detection only when no snapshot is held; ``teardown``
    drops the snapshot so the next ``initialize`` probes again, e.g. after
    the GL context has been recreated.
    """

    def __init__(self) -> None:
        self._snapshot: PlatformSnapshot | None = None

    @property
    def snapshot(self) -> PlatformSnapshot | None:
        return self._snapshot

    @property
    def is_initialized(self) -> bool:
        return self._snapshot is not None

    def initialize(
        self,
        query: StringQuery,
        *,
        server_version: VersionNumber | None = None,
        kernel_version: VersionNumber | None = None,
    ) -> PlatformSnapshot:
        if self._snapshot is not None:
            return self._snapshot
        self._snapshot = detect(
            query, server_version=server_version, kernel_version=kernel_version
        )
        log.info("platform initialized: %s", self._snapshot.renderer or "<no renderer>")
        return self._snapshot

    def teardown(self) -> None:
        if self._snapshot is None:
            return
        self._snapshot = None
        log.info("platform torn down")

    def require(self) -> PlatformSnapshot:
        """Return the snapshot, raising if ``initialize`` has not run."""
        if self._snapshot is None:
            raise RuntimeError("platform context is not initialized")
        return self._snapshot
