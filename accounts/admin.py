from django.contrib import admin
from .models import User


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    list_display = ('id', 'username', 'full_name', 'role')
    list_filter = ('role',)
    search_fields = ('username', 'email', 'full_name')
