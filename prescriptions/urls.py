from django.urls import path
from . import views

urlpatterns = [
    # pharmacist search / doctor create
    path('', views.PrescriptionListCreateView.as_view(), name='prescription-list-create'),
    path('<int:pk>/verify/', views.PrescriptionVerifyView.as_view(), name='prescription-verify'),

    # patient: own prescriptions
    path('mine/', views.OwnPrescriptionListView.as_view(), name='prescription-mine'),
]
