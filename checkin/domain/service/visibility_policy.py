"""Status tag visibility policy."""

from collections.abc import Sequence

import logfire

from checkin.domain.error import UnknownVisibilityError
from checkin.domain.model import Status, StatusTag, User
from checkin.domain.repository import FollowRepository
from checkin.domain.value import Err, Ok, Result, StatusVisibility

from .base import Service

# Levels anyone may see, logged in or not
_OPEN_LEVELS = frozenset({StatusVisibility.PUBLIC, StatusVisibility.UNLISTED})


class VisibilityPolicy(Service):
    """Translates visibility names and decides who may view a tag."""

    def __init__(
        self,
        follow_repository: FollowRepository,
        default_visibility: StatusVisibility = StatusVisibility.PUBLIC,
    ) -> None:
        """Initialize visibility policy.

        Args:
            follow_repository: Used to resolve follower-only tags
            default_visibility: Level used when none is given
        """
        self.follow_repository = follow_repository
        self.default_visibility = default_visibility

    def default(self) -> StatusVisibility:
        """Visibility given to a tag created without an explicit level.

        Configured through ``Settings.tags.default_visibility``.
        """
        return self.default_visibility

    def parse(self, name: object) -> Result[StatusVisibility, UnknownVisibilityError]:
        """Resolve a level name such as ``"followers"``.

        Never raises; an unknown or non-string name is returned as ``Err``.
        """
        if not isinstance(name, str):
            return Err(UnknownVisibilityError(name))
        member = StatusVisibility.__members__.get(name.strip().upper())
        if member is None:
            return Err(UnknownVisibilityError(name))
        return Ok(member)

    def parse_value(
        self, raw: object
    ) -> Result[StatusVisibility, UnknownVisibilityError]:
        """Resolve either a level name or its stored integer value."""
        if isinstance(raw, bool):
            return Err(UnknownVisibilityError(raw))
        if isinstance(raw, int):
            try:
                return Ok(StatusVisibility(raw))
            except ValueError:
                return Err(UnknownVisibilityError(raw))
        if isinstance(raw, str) and raw.strip().isdigit():
            return self.parse_value(int(raw.strip()))
        return self.parse(raw)

    async def is_visible(self, tag: StatusTag, status: Status, viewer: User | None) -> bool:
        """Decide whether ``viewer`` may see ``tag`` on ``status``.

        The status owner sees every tag.
        """
        if viewer is not None and status.is_owned_by(viewer.id):
            return True
        if tag.visibility in _OPEN_LEVELS:
            return True
        if viewer is None:
            return False
        if tag.visibility == StatusVisibility.AUTHENTICATED:
            return True
        if tag.visibility == StatusVisibility.FOLLOWERS:
            return await self.follow_repository.is_following(viewer.id, status.user_id)
        return False

    async def filter_visible(
        self, tags: Sequence[StatusTag], status: Status, viewer: User | None
    ) -> list[StatusTag]:
        """Keep the tags ``viewer`` may see, preserving order."""
        with logfire.span(
            "visibility_policy.filter_visible",
            status_id=status.id,
            viewer_id=str(viewer.id) if viewer else None,
        ):
            visible = [tag for tag in tags if await self.is_visible(tag, status, viewer)]
            logfire.info("Tags filtered", total=len(tags), visible=len(visible))
            return visible
