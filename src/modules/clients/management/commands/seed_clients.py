from __future__ import annotations

from datetime import date

from django.core.management.base import BaseCommand

from modules.clients.dtos import ClientPayloadDTO
from modules.clients.exceptions import ClientValidationError
from modules.clients.repositories.django_repository import ClientDjangoRepository
from modules.clients.services import ClientService

SEED_PASSWORD = "123456AFtASF"

SEED_CLIENTS = [
    ("Ana Souza", "39053344705", "individual", "ana@example.com", date(1990, 3, 14), "female"),
    ("Bruno Lima Comércio Ltda", "11222333000181", "company", "bruno@example.com", None, None),
    ("Carla Mendes", "98765432100", "individual", "carla@example.com", date(1985, 7, 2), "female"),
    ("Daniel Costa", "12345678901", "individual", "daniel@example.com", date(1979, 11, 23), "male"),
    ("Eduardo Alves Serviços ME", "98765432000155", "company", "eduardo@example.com", None, None),
    ("Fernanda Rocha", "74125896300", "individual", "fernanda@example.com", date(1995, 1, 30), "female"),
    ("Gabriel Santos", "36925814700", "individual", "gabriel@example.com", date(2000, 5, 9), "other"),
    ("Helena Ferreira", "25814736900", "individual", "helena@example.com", date(1988, 9, 17), "female"),
    ("Igor Ramos Transportes SA", "74185296000130", "company", "igor@example.com", None, None),
    ("Julia Oliveira", "15935745600", "individual", "julia@example.com", date(1993, 12, 1), "female"),
]


class Command(BaseCommand):
    help = "Seed database with development clients."

    def handle(self, *args, **options):
        self.stdout.write("Creating clients...")
        service = ClientService(repository=ClientDjangoRepository())
        created = 0
        skipped = 0

        for index, (name, document, person_type, email, birth, gender) in enumerate(
            SEED_CLIENTS, start=1
        ):
            exempt = person_type == "individual"
            dto = ClientPayloadDTO(
                name=name,
                tax_document=document,
                email=email,
                person_type=person_type,
                phone=f"119{index:08d}",
                state_registration=None if exempt else f"{index:012d}",
                state_registration_exempt=exempt,
                gender=gender,
                birth_date=birth,
                password=SEED_PASSWORD,
                password_confirmation=SEED_PASSWORD,
            )
            try:
                service.create_client(dto)
            except ClientValidationError as exc:
                skipped += 1
                self.stdout.write(self.style.WARNING(f"Skipping {email}: {exc}"))
                continue
            created += 1

        self.stdout.write(
            self.style.SUCCESS(f"Seed completed: created={created}, skipped={skipped}")
        )
