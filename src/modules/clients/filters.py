import django_filters
from django.db.models import F, Q, Value
from django.db.models.functions import StrIndex

from modules.clients.models import Client

SEARCH_FIELDS = ("name", "email", "tax_document", "state_registration")


class ClientFilter(django_filters.FilterSet):
    """Free-text ``search`` over name, email, CPF/CNPJ and state registration.

    Matching is a case-sensitive substring test on every backend.
    ``contains`` is not used because SQLite compiles it to a
    case-insensitive ``LIKE``; ``StrIndex`` becomes ``INSTR`` (SQLite) or
    ``STRPOS`` (PostgreSQL), both case-sensitive.
    """

    search = django_filters.CharFilter(method="filter_search")

    class Meta:
        model = Client
        fields = ["search"]

    def filter_search(self, queryset, name, value):
        positions = {
            f"_{field}_pos": StrIndex(F(field), Value(value)) for field in SEARCH_FIELDS
        }
        match = Q()
        for alias in positions:
            match |= Q(**{f"{alias}__gt": 0})
        return queryset.alias(**positions).filter(match)
