from .photo_storage import PhotoStorageService, UploadedImage, sign_params

__all__ = ["PhotoStorageService", "UploadedImage", "sign_params"]
