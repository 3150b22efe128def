"""Authorization gate for status tag mutations."""

import logfire

from checkin.domain.model import Status, StatusTag, User
from checkin.domain.repository import StatusRepository
from checkin.domain.value import Action

from .base import Service


class AuthorizationGate(Service):
    """Capability checks for mutating statuses and their tags.

    Only the owner of a status may update it or update/destroy its tags.
    The gate answers with a boolean; turning a refusal into an error is the
    caller's decision.
    """

    def __init__(self, status_repository: StatusRepository) -> None:
        """Initialize authorization gate.

        Args:
            status_repository: Resolves the status of a tag target
        """
        self.status_repository = status_repository

    async def can_mutate(
        self, actor: User | None, target: Status | StatusTag, action: Action
    ) -> bool:
        """Check whether ``actor`` may perform ``action`` on ``target``.

        Args:
            actor: Acting user, None when anonymous
            target: Status (tag creation) or an existing tag
            action: Requested action

        Returns:
            True if allowed
        """
        with logfire.span(
            "authorization_gate.can_mutate",
            actor_id=str(actor.id) if actor else None,
            target=type(target).__name__,
            action=action.value,
        ):
            if actor is None:
                logfire.info("Anonymous actor denied", action=action.value)
                return False

            if isinstance(target, StatusTag):
                status = await self.status_repository.find_by_id(target.status_id)
                if status is None:
                    logfire.warn("Tag without status", status_id=target.status_id)
                    return False
            else:
                if action is not Action.UPDATE:
                    return False
                status = target

            allowed = status.is_owned_by(actor.id)
            logfire.info(
                "Authorization decided",
                status_id=status.id,
                action=action.value,
                allowed=allowed,
            )
            return allowed
