from django.urls import path
from .views import extract_view, player
app_name = 'extractorapp'
urlpatterns = [
    path('extract/', extract_view, name='extract'),
    path('player/', player, name='player'),
]
