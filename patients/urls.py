from django.urls import path
from . import views

urlpatterns = [
    # patient profile
    path('register/', views.PatientRegisterView.as_view(), name='patient-register'),
    path('me/', views.PatientProfileView.as_view(), name='patient-profile'),

    # temporary tokens and QR code
    path('tokens/', views.TemporaryTokenListCreateView.as_view(), name='patient-tokens'),
    path('tokens/<int:pk>/deactivate/', views.TemporaryTokenDeactivateView.as_view(), name='patient-token-deactivate'),

    # lookup by permanent id or token
    path('resolve/', views.PatientResolveView.as_view(), name='patient-resolve'),
]
