from django.apps import AppConfig


class ExtractorappConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'extractorapp'
