"""Status tag domain service."""

from typing import Any

import logfire

from checkin.domain.error import (
    DuplicateKeyError,
    NotAuthorizedError,
    NotFoundError,
)
from checkin.domain.model import Status, StatusTag, User
from checkin.domain.repository import StatusTagRepository
from checkin.domain.value import Action, Err, StatusId, StatusVisibility

from .authorization_gate import AuthorizationGate
from .base import Service
from .status_service import StatusService
from .visibility_policy import VisibilityPolicy


class StatusTagService(Service):
    """Domain service for tags attached to a status."""

    def __init__(
        self,
        status_tag_repository: StatusTagRepository,
        status_service: StatusService,
        visibility_policy: VisibilityPolicy,
        authorization_gate: AuthorizationGate,
    ) -> None:
        """Initialize status tag service.

        Args:
            status_tag_repository: Tag store
            status_service: Loads parent statuses
            visibility_policy: Visibility parsing and viewer filter
            authorization_gate: Mutation capability checks
        """
        self.status_tag_repository = status_tag_repository
        self.status_service = status_service
        self.visibility_policy = visibility_policy
        self.authorization_gate = authorization_gate

    async def list_visible(
        self, status_id: StatusId, viewer: User | None
    ) -> list[StatusTag]:
        """List the tags of a status that ``viewer`` may see.

        Args:
            status_id: Parent status
            viewer: Requesting user, None when anonymous

        Returns:
            Visible tags in insertion order

        Raises:
            NotFoundError: If the status does not exist
        """
        with logfire.span("status_tag_service.list_visible", status_id=status_id):
            status = await self.status_service.get_by_id(status_id)
            tags = await self.status_tag_repository.list_for_status(status.id)
            return await self.visibility_policy.filter_visible(tags, status, viewer)

    async def create(
        self,
        status_id: StatusId,
        actor: User | None,
        key: str,
        value: str,
        visibility: str | int | None = None,
    ) -> StatusTag:
        """Attach a new tag to a status.

        The visibility is resolved before anything is loaded, so a bad level
        is reported ahead of a missing status or a denied actor.

        Args:
            status_id: Parent status
            actor: Acting user
            key: Tag key, unique per status
            value: Tag value
            visibility: Level name or stored integer value, the policy
                default when None

        Returns:
            Created tag

        Raises:
            UnknownVisibilityError: If ``visibility`` does not resolve
            NotFoundError: If the status does not exist
            DuplicateKeyError: If the status already has a tag with ``key``
            NotAuthorizedError: If ``actor`` may not update the status
        """
        with logfire.span("status_tag_service.create", status_id=status_id, key=key):
            resolved = self._resolve_value(visibility)

            status = await self.status_service.get_by_id(status_id)

            if await self.status_tag_repository.find_by_key(status.id, key) is not None:
                logfire.warn("Duplicate tag key", status_id=status.id, key=key)
                raise DuplicateKeyError(status.id, key)

            await self._authorize(actor, status, Action.UPDATE)

            tag = await self.status_tag_repository.create(
                StatusTag(status_id=status.id, key=key, value=value, visibility=resolved)
            )
            logfire.info("Status tag created", status_id=status.id, tag_id=tag.id)
            return tag

    async def update(
        self,
        status_id: StatusId,
        tag_key: str,
        actor: User | None,
        value: str,
        visibility: str | None = None,
        key: str | None = None,
    ) -> StatusTag:
        """Replace a tag's value and optionally its key and visibility.

        ``value`` is always overwritten. ``key`` and ``visibility`` are left
        unchanged when None.

        Raises:
            NotFoundError: If the status or tag does not exist
            NotAuthorizedError: If ``actor`` may not update the tag
            UnknownVisibilityError: If ``visibility`` does not resolve
            DuplicateKeyError: If the new key is taken on this status
        """
        with logfire.span(
            "status_tag_service.update", status_id=status_id, tag_key=tag_key
        ):
            status = await self.status_service.get_by_id(status_id)
            tag = await self._get_tag(status, tag_key)
            await self._authorize(actor, tag, Action.UPDATE)

            fields: dict[str, Any] = {"value": value}
            if visibility is not None:
                fields["visibility"] = self._resolve_name(visibility)
            if key is not None:
                fields["key"] = key

            # Re-validate bounds; model_copy does not
            StatusTag.model_validate({**tag.model_dump(), **fields})

            updated = await self.status_tag_repository.update(tag, **fields)
            logfire.info(
                "Status tag updated",
                status_id=status.id,
                tag_id=updated.id,
                fields=sorted(fields),
            )
            return updated

    async def destroy(
        self, status_id: StatusId, tag_key: str, actor: User | None
    ) -> None:
        """Delete a tag.

        Raises:
            NotFoundError: If the status or tag does not exist
            NotAuthorizedError: If ``actor`` may not destroy the tag
        """
        with logfire.span(
            "status_tag_service.destroy", status_id=status_id, tag_key=tag_key
        ):
            status = await self.status_service.get_by_id(status_id)
            tag = await self._get_tag(status, tag_key)
            await self._authorize(actor, tag, Action.DESTROY)
            await self.status_tag_repository.delete(tag)
            logfire.info("Status tag deleted", status_id=status.id, tag_id=tag.id)

    async def _get_tag(self, status: Status, tag_key: str) -> StatusTag:
        tag = await self.status_tag_repository.find_by_key(status.id, tag_key)
        if tag is None:
            logfire.warn("Status tag not found", status_id=status.id, key=tag_key)
            raise NotFoundError("StatusTag", f"{status.id}/{tag_key}")
        return tag

    async def _authorize(
        self, actor: User | None, target: Status | StatusTag, action: Action
    ) -> None:
        if await self.authorization_gate.can_mutate(actor, target, action):
            return
        resource = "Status" if isinstance(target, Status) else "StatusTag"
        resource_id = str(target.id) if isinstance(target, Status) else target.key
        logfire.warn(
            "Status tag mutation denied", resource=resource, action=action.value
        )
        raise NotAuthorizedError(
            resource, resource_id, str(actor.id) if actor else None
        )

    def _resolve_value(self, raw: str | int | None) -> StatusVisibility:
        if raw is None:
            return self.visibility_policy.default()
        result = self.visibility_policy.parse_value(raw)
        if isinstance(result, Err):
            logfire.warn("Unknown visibility", visibility=raw)
        return result.unwrap()

    def _resolve_name(self, name: str) -> StatusVisibility:
        result = self.visibility_policy.parse(name)
        if isinstance(result, Err):
            logfire.warn("Unknown visibility", visibility=name)
        return result.unwrap()
