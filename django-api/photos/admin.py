from django.contrib import admin

from photos.models import Photo


@admin.register(Photo)
class PhotoAdmin(admin.ModelAdmin):
    list_display = ["original_name", "event_id", "user_id", "url", "uploaded_at"]
    list_filter = ["event_id"]
    search_fields = ["original_name"]
