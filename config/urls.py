"""URL configuration for Homely project.

The `urlpatterns` list routes URLs to views. It includes both Django admin
and application‑level routers provided by Django Rest Framework and each app.
"""
from django.contrib import admin  # type: ignore
from django.urls import path, include  # type: ignore
from drf_spectacular.views import SpectacularAPIView  # type: ignore

# API versioning. v1 is our initial version; future versions can be added here.

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    # Application URLs
    path('api/v1/auth/', include(('apps.users.auth_urls', 'auth'), namespace='auth')),
    path('api/v1/users/', include(('apps.users.urls', 'users'), namespace='users')),
    path('api/v1/listings/', include('apps.listings.urls')),
    path('api/v1/reservations/', include('apps.reservations.urls')),
    path('api/v1/favorites/', include('apps.favorites.urls')),
]
