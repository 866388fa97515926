"""Keeps the local fallback database limited to event registrations."""

from django.conf import settings

LOCAL_MODELS = {("events", "eventregistration")}


class LocalFallbackRouter:
    """Stores pick their alias explicitly; this router only guards migrations."""

    def allow_migrate(self, db, app_label, model_name=None, **hints):
        if db != settings.LOCAL_DATABASE_ALIAS:
            return None
        return (app_label, model_name) in LOCAL_MODELS
