from django.apps import AppConfig


class MultiblockConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'multiblock'
    verbose_name = 'Multiblock'

    def ready(self):
        # Block types register themselves on import.
        from . import blocks  # noqa: F401
