"""
Customers API URLs.
"""
from django.urls import path, include

urlpatterns = [
    path('', include('apps.customers.interfaces.api.v1.urls')),
]
