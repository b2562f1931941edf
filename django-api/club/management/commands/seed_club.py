"""Load the club's sample data set through the services."""

import logging

from django.core.management.base import BaseCommand

from club.services.association_service import AssociationService
from club.services.event_service import EventService
from club.services.event_type_service import EventTypeService
from club.services.member_service import MemberService
from club.stores.django_store import DjangoClubStore

logger = logging.getLogger(__name__)

EVENT_TYPES = ["Passeio", "Competição", "Treino"]

# (type name, event name, date)
EVENTS = [
    ("Passeio", "Passeio pelo parque", "2025-03-10"),
    ("Competição", "Competição de estrada", "2025-03-15"),
    ("Treino", "Treino de resistência", "2025-03-20"),
    ("Passeio", "Passeio pela praia", "2025-03-25"),
    ("Competição", "Competição de MTB", "2025-04-01"),
]

# member name -> (preferred type names, registered event names)
MEMBERS = {
    "Alice Oliveira": (
        ["Passeio", "Competição"],
        ["Passeio pelo parque", "Competição de estrada"],
    ),
    "Bruno Silva": (
        ["Passeio", "Treino"],
        ["Passeio pelo parque", "Treino de resistência"],
    ),
    "Carlos Santos": (
        ["Competição", "Treino"],
        ["Competição de estrada", "Competição de MTB"],
    ),
    "Daniela Costa": (
        ["Passeio", "Treino"],
        ["Passeio pelo parque", "Treino de resistência"],
    ),
}


class Command(BaseCommand):
    help = "Seed event types, events, members, preferences and registrations."

    def handle(self, *args, **options):
        store = DjangoClubStore()
        event_types = EventTypeService(store)
        if event_types.list_event_types():
            self.stdout.write("Club data already present, nothing to seed.")
            return

        with store.atomic():
            type_ids = {
                name: event_types.create_event_type(name).id.value
                for name in EVENT_TYPES
            }
            events = EventService(store)
            event_ids = {
                name: events.create_event(type_ids[type_name], name, day).id.value
                for type_name, name, day in EVENTS
            }
            members = MemberService(store)
            associations = AssociationService(store)
            for member_name, (preferred, registered) in MEMBERS.items():
                member = members.create_member(
                    member_name, [type_ids[name] for name in preferred]
                )
                for event_name in registered:
                    associations.register_member_for_event(
                        member.id.value, event_ids[event_name]
                    )

        logger.info("Seeded %d members", len(MEMBERS))
        self.stdout.write(
            self.style.SUCCESS(
                f"Seeded {len(EVENT_TYPES)} event types, {len(EVENTS)} events "
                f"and {len(MEMBERS)} members."
            )
        )
