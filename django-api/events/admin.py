from django.contrib import admin

from events.models import Event


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ["event_name", "event_date", "created_at"]
    search_fields = ["event_name"]
    filter_horizontal = ["photographers"]
