from django.urls import path, include

from apps.tax_reform import views as tax_reform_views

urlpatterns = [
    path('', tax_reform_views.simulation, name='home'),

    path('', include('apps.core.urls')),
    path('tax-reform/', include('apps.tax_reform.urls')),
]
