from django.urls import path
from . import views

urlpatterns = [
    # doctor: list and record visits of a resolved patient
    path('', views.VisitListCreateView.as_view(), name='visit-list-create'),

    # patient: own recent visits
    path('mine/', views.OwnVisitListView.as_view(), name='visit-mine'),
]
