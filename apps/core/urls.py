from django.urls import path
from . import views

app_name = 'core'

urlpatterns = [
    path('money/normalize/', views.normalize_money, name='normalize_money'),
]
