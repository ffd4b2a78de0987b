"""Channel identity resolution.

YouTube has five overlapping identifier spaces for a channel: channel IDs,
legacy usernames, vanity URLs, handles and legacy "+name" custom URLs. The
same string can be valid in several of them and point at different
channels, so each lookup type follows its own call sequence and checks
that the caller's declared type is the one that actually matches.

All upstream calls for one lookup are awaited one after another; later
probes only run when earlier ones did not decide the outcome.
"""

from dataclasses import dataclass
from enum import Enum

from ytlookup.core.exceptions import LookupNotFoundError, YouTubeError, YouTubeErrorKind
from ytlookup.core.logging import get_logger
from ytlookup.infrastructure.innertube import InnertubeClient
from ytlookup.infrastructure.youtube_data_api import ChannelLookup, YouTubeDataAPIClient
from ytlookup.models import BrowseTarget, Channel, RedirectTarget
from ytlookup.services.enrichment import ChannelEnricher

logger = get_logger(__name__)


class LookupType(str, Enum):
    """Identifier type declared by the caller."""

    CUSTOM_URL = "CUSTOM_URL"
    VANITY = "VANITY"
    USERNAME = "USERNAME"
    HANDLE = "HANDLE"
    CHANNEL_ID = "CHANNEL_ID"


@dataclass
class ChannelResolution:
    """Outcome of a successful lookup.

    Attributes:
        channel: Resolved (and, when possible, enriched) channel
        redirect_url: Canonical URL the identifier now redirects to, if any
    """

    channel: Channel
    redirect_url: str | None = None


class ChannelResolver:
    """Resolves a declared identifier into a canonical channel.

    Example:
        >>> resolver = ChannelResolver(data_api, innertube, enricher)
        >>> resolution = await resolver.resolve(LookupType.HANDLE, "youtube")
        >>> resolution.channel.user_id
        'UCBR8-60-B28hp2BmDPdntcQ'
    """

    def __init__(
        self,
        data_api: YouTubeDataAPIClient,
        innertube: InnertubeClient,
        enricher: ChannelEnricher,
    ) -> None:
        """Initialize the resolver.

        Args:
            data_api: Data API v3 client
            innertube: Innertube client for URL resolution
            enricher: Channel enricher
        """
        self.data_api = data_api
        self.innertube = innertube
        self.enricher = enricher

    async def resolve(self, lookup_type: LookupType, identifier: str) -> ChannelResolution:
        """Resolve an identifier of the declared type.

        Args:
            lookup_type: Identifier type claimed by the caller
            identifier: The identifier itself, without URL decoration

        Returns:
            ChannelResolution with the channel and an optional redirect URL

        Raises:
            LookupNotFoundError: If no channel matches the declared type
            YouTubeError: For upstream failures on the primary lookup
        """
        logger.info("Resolving channel", lookup_type=lookup_type.value, identifier=identifier)

        match lookup_type:
            case LookupType.CUSTOM_URL:
                return await self._resolve_custom_url(identifier)
            case LookupType.VANITY:
                return await self._resolve_vanity(identifier)
            case LookupType.USERNAME:
                return await self._resolve_direct(ChannelLookup.username(identifier))
            case LookupType.HANDLE:
                return await self._resolve_direct(ChannelLookup.handle(identifier))
            case LookupType.CHANNEL_ID:
                return await self._resolve_channel_id(identifier)

    # =========================================================================
    # Per-type procedures
    # =========================================================================

    async def _resolve_custom_url(self, identifier: str) -> ChannelResolution:
        try:
            target = await self.innertube.resolve_url(f"youtube.com/+{identifier}")
        except YouTubeError as e:
            if e.kind is YouTubeErrorKind.NOT_FOUND:
                raise LookupNotFoundError("Custom URL not found") from e
            raise

        if not isinstance(target, BrowseTarget):
            raise LookupNotFoundError("Custom URL not found")

        channel = await self.data_api.get_channel(ChannelLookup.channel_id(target.browse_id))
        channel = await self._enrich_or_keep(channel)

        # The bare form redirecting means the custom URL has a vanity/handle alias
        redirect_url = None
        try:
            alias = await self.innertube.resolve_url(f"youtube.com/{identifier.upper()}")
        except YouTubeError as e:
            logger.info(
                "Ignoring failed custom URL alias check",
                identifier=identifier,
                kind=e.kind.value,
            )
        else:
            if isinstance(alias, RedirectTarget):
                redirect_url = alias.url

        return ChannelResolution(channel=channel, redirect_url=redirect_url)

    async def _resolve_vanity(self, identifier: str) -> ChannelResolution:
        target = await self.innertube.resolve_url(f"youtube.com/{identifier.upper()}")
        if not isinstance(target, BrowseTarget):
            raise LookupNotFoundError("Invalid vanity URL")
        main_id = target.browse_id

        # A vanity claim is rejected when a +name or /user/ alias lands on the same channel
        for alias_url in (f"youtube.com/+{identifier}", f"youtube.com/user/{identifier}"):
            try:
                alias = await self.innertube.resolve_url(alias_url)
            except YouTubeError as e:
                logger.info("Ignoring failed vanity alias probe", url=alias_url, kind=e.kind.value)
                continue
            if isinstance(alias, BrowseTarget) and alias.browse_id == main_id:
                raise LookupNotFoundError("Not a vanity URL")

        channel = await self.data_api.get_channel(ChannelLookup.channel_id(main_id))
        channel = await self._enrich_or_keep(channel)
        return ChannelResolution(channel=channel)

    async def _resolve_direct(self, lookup: ChannelLookup) -> ChannelResolution:
        channel = await self.data_api.get_channel(lookup)
        return await self._finish_with_handle_redirect(channel)

    async def _resolve_channel_id(self, channel_id: str) -> ChannelResolution:
        try:
            channel = await self.data_api.get_channel(ChannelLookup.channel_id(channel_id))
        except YouTubeError as e:
            if e.kind is YouTubeErrorKind.NOT_FOUND:
                raise await self._diagnose_missing_channel(channel_id) from e
            raise
        return await self._finish_with_handle_redirect(channel)

    # =========================================================================
    # Shared steps
    # =========================================================================

    async def _finish_with_handle_redirect(self, channel: Channel) -> ChannelResolution:
        channel = await self._enrich_or_keep(channel)
        redirect_url = None
        if channel.handle:
            redirect_url = await self._handle_redirect(channel.handle)
        return ChannelResolution(channel=channel, redirect_url=redirect_url)

    async def _handle_redirect(self, handle: str) -> str | None:
        """Return where youtube.com/@handle redirects, if it redirects at all."""
        try:
            target = await self.innertube.resolve_url(f"youtube.com/@{handle}")
        except YouTubeError as e:
            if e.kind is YouTubeErrorKind.NOT_FOUND:
                return None
            raise
        if isinstance(target, RedirectTarget):
            return target.url
        return None

    async def _enrich_or_keep(self, channel: Channel) -> Channel:
        """Enrich the channel, keeping it unenriched when enrichment fails.

        Enrichment only adds fields, so its failure never fails a lookup.
        """
        try:
            return await self.enricher.enrich(channel)
        except YouTubeError as e:
            logger.warning(
                "Channel enrichment failed, continuing without it",
                channel_id=channel.user_id,
                **e.to_dict(),
            )
            return channel

    async def _diagnose_missing_channel(self, channel_id: str) -> LookupNotFoundError:
        """Build a not-found error that says why a channel ID is missing.

        A one-item subscriptions call reports closed and suspended accounts
        with distinct messages that channels.list does not expose.
        """
        try:
            await self.data_api.get_subscriptions(channel_id, None, max_results=1)
        except YouTubeError as e:
            match e.kind:
                case YouTubeErrorKind.ACCOUNT_TERMINATED:
                    return LookupNotFoundError(
                        "This channel has been terminated",
                        reason=YouTubeErrorKind.ACCOUNT_TERMINATED,
                        context={"channel_id": channel_id},
                    )
                case YouTubeErrorKind.ACCOUNT_CLOSED:
                    return LookupNotFoundError(
                        "This channel has been deleted",
                        reason=YouTubeErrorKind.ACCOUNT_CLOSED,
                        context={"channel_id": channel_id},
                    )
                case _:
                    logger.debug(
                        "Status probe gave no account state",
                        channel_id=channel_id,
                        kind=e.kind.value,
                    )
        return LookupNotFoundError("Channel not found", context={"channel_id": channel_id})


__all__ = ["ChannelResolution", "ChannelResolver", "LookupType"]
