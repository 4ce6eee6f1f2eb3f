from photos.handlers.views import EventPhotosView, PhotoCollectionView, PhotographerPhotosView

__all__ = ["EventPhotosView", "PhotoCollectionView", "PhotographerPhotosView"]
