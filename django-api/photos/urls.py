from django.urls import path

from photos.handlers import EventPhotosView, PhotoCollectionView, PhotographerPhotosView

urlpatterns = [
    path("photos", PhotoCollectionView.as_view(), name="photo-collection"),
    path("photos/event/<str:event_id>", EventPhotosView.as_view(), name="event-photos"),
    path(
        "photos/event/<str:event_id>/photographer/<str:user_id>",
        PhotographerPhotosView.as_view(),
        name="photographer-photos",
    ),
]
