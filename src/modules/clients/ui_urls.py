from django.urls import path

from modules.clients.ui_views import ClientRegistryPageView

urlpatterns = [
    path("", ClientRegistryPageView.as_view(), name="client_registry"),
]
