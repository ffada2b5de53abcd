"""Server side of the single-page client registry UI.

The page is rendered once; listing, search, paging and the create/edit
dialog run in ``static/clients/app.js`` against the JSON API.
"""

from __future__ import annotations

from typing import Any

from django.conf import settings
from django.views.generic import TemplateView

from modules.clients import constants


class ClientRegistryPageView(TemplateView):
    template_name = "clients/index.html"

    def get_context_data(self, **kwargs: Any) -> dict[str, Any]:
        context = super().get_context_data(**kwargs)
        context.update(
            {
                "page_size": settings.CLIENTS_PAGE_SIZE,
                "person_types": constants.PersonType.choices,
                "genders": constants.Gender.choices,
                "statuses": constants.ClientStatus.choices,
                "limits": {
                    "name": constants.NAME_MAX_LENGTH,
                    "email": constants.EMAIL_MAX_LENGTH,
                    "document_min": constants.TAX_DOCUMENT_MIN_DIGITS,
                    "document_max": constants.TAX_DOCUMENT_MAX_DIGITS,
                    "phone": constants.PHONE_MAX_DIGITS,
                    "state_registration": constants.STATE_REGISTRATION_MAX_LENGTH,
                    "password_min": constants.PASSWORD_MIN_LENGTH,
                    "password_max": constants.PASSWORD_MAX_LENGTH,
                },
            }
        )
        return context
