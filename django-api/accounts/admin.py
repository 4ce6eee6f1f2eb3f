from django.contrib import admin

from accounts.models import User


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    list_display = ["email", "name", "role", "registration_date"]
    list_filter = ["role"]
    search_fields = ["email", "name"]
    exclude = ["password"]
