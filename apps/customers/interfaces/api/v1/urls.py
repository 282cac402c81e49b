"""
Customers API v1 URLs.
"""
from django.urls import path

from .views import LoginView, LogoutView, MeView

urlpatterns = [
    path('login/', LoginView.as_view(), name='customer-login'),
    path('logout/', LogoutView.as_view(), name='customer-logout'),
    path('me/', MeView.as_view(), name='customer-me'),
]
