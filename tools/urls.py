"""URL configuration for the calculator tools."""

from __future__ import annotations

from django.urls import path

from tools import views

app_name = "tools"

urlpatterns = [
    path("", views.index, name="index"),
    path("tools/artifact-calculator/", views.artifact_calculator, name="artifact_calculator"),
    path("tools/skin-calculator/", views.skin_calculator, name="skin_calculator"),
    path("api/artifact-upgrade/", views.artifact_upgrade_api, name="artifact_upgrade_api"),
    path("api/skin-upgrade/", views.skin_upgrade_api, name="skin_upgrade_api"),
    path("api/skins/other/", views.other_skin_names_api, name="other_skin_names_api"),
]
