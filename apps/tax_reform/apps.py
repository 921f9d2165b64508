from django.apps import AppConfig


class TaxReformConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.tax_reform'
    verbose_name = 'Reforma tributária'
