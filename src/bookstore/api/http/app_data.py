from dataclasses import dataclass

from src.bookstore.core.services.database import DbSessionService
from src.bookstore.core.services.jwt import JwtGeneratorService, JwtVerificationService
from src.bookstore.core.services.notifications import EmailService
from src.bookstore.core.services.storage import PhotoStorageService


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
    jwt_generation_service: JwtGeneratorService
    jwt_verify_service: JwtVerificationService
    email_service: EmailService
    photo_storage_service: PhotoStorageService
