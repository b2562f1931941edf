"""Member service.

A member owns its preferences and registrations: deleting a member removes
them first instead of being refused.
"""

import logging

from club.domain import EventTypeId, Member, MemberId
from club.domain.errors import InvalidInputError, MemberNotFoundError
from club.services.association_service import AssociationService
from club.services.parsing import parse_id, parse_name, parse_type_ids
from club.stores.interfaces import ClubStore

logger = logging.getLogger(__name__)


class MemberService:
    """Service for member CRUD and preference lists."""

    def __init__(self, store: ClubStore) -> None:
        self._store = store
        self._associations = AssociationService(store)

    def list_members(self) -> list[Member]:
        return self._store.list_members()

    def get_member(self, member_id: str) -> Member:
        """Return a member with preference and registration ids.

        Raises:
            InvalidIdError: If member_id is not a positive integer.
            MemberNotFoundError: If the member does not exist.
        """
        member = self._store.get_member(parse_id(MemberId, member_id, "member"))
        if member is None:
            raise MemberNotFoundError()
        return member

    def create_member(
        self, name: object, preferred_event_types: object = None
    ) -> Member:
        """Create a member together with their preferred event types.

        Raises:
            InvalidInputError: If the name is blank or a preferred type is invalid.
        """
        parsed_name = parse_name(name)
        type_ids = (
            parse_type_ids(preferred_event_types)
            if preferred_event_types is not None
            else []
        )
        with self._store.atomic():
            self._require_event_types(type_ids)
            member = self._store.create_member(parsed_name)
            self._associations.replace_preferences(member.id, type_ids)
            member = self._store.get_member(member.id)
        logger.info("Created member %s with %d preferences", member.id, len(type_ids))
        return member

    def update_member(
        self, member_id: str, name: object, preferred_event_types: object = None
    ) -> Member:
        """Rename a member and, when given, replace their preferences wholesale.

        Raises:
            InvalidIdError: If member_id is not a positive integer.
            MemberNotFoundError: If the member does not exist.
            InvalidInputError: If the name is blank or a preferred type is invalid.
            PreferenceInUseError: If a dropped preference still backs a registration.
        """
        parsed_id = parse_id(MemberId, member_id, "member")
        with self._store.atomic():
            if not self._store.member_exists(parsed_id):
                raise MemberNotFoundError()
            parsed_name = parse_name(name)
            self._store.update_member(parsed_id, parsed_name)
            if preferred_event_types is not None:
                type_ids = parse_type_ids(preferred_event_types)
                self._require_event_types(type_ids)
                self._associations.replace_preferences(parsed_id, type_ids)
            member = self._store.get_member(parsed_id)
        logger.info("Updated member %s", parsed_id)
        return member

    def delete_member(self, member_id: str) -> int:
        """Delete a member after releasing their registrations and preferences.

        Raises:
            InvalidIdError: If member_id is not a positive integer.
            MemberNotFoundError: If the member does not exist.
        """
        parsed = parse_id(MemberId, member_id, "member")
        with self._store.atomic():
            if not self._store.member_exists(parsed):
                raise MemberNotFoundError()
            self._associations.release_member(parsed)
            deleted = self._store.delete_member(parsed)
            if not deleted:
                raise MemberNotFoundError()
        logger.info("Deleted member %s", parsed)
        return deleted

    def _require_event_types(self, type_ids: list[EventTypeId]) -> None:
        for type_id in type_ids:
            if not self._store.event_type_exists(type_id):
                raise InvalidInputError(f"Event type {type_id} does not exist")
