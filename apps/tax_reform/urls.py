from django.urls import path
from . import views

app_name = 'tax_reform'

urlpatterns = [
    # Simulação rápida / detalhada
    path('', views.simulation, name='simulation'),
    path('detailed/', views.detailed_simulation, name='detailed_simulation'),
    # Resultado da última simulação
    path('results/', views.results, name='results'),
]
