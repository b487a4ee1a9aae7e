"""Core app URL configuration."""

from django.urls import path

from . import views

app_name = "core"

urlpatterns = [
    path("", views.IndexView.as_view(), name="index"),
    path("contact/submit/", views.ContactSubmitView.as_view(), name="contact_submit"),
]
