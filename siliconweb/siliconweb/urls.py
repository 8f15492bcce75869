from django.urls import path
from . import views

handler404 = "siliconweb.views.error_404_view"

urlpatterns = [
    path("", views.index, name="index"),
]
