from .jwt_gen import JwtGeneratorService, TokenConfigurationError
from .jwt_verify import JwtVerificationService

__all__ = ["JwtGeneratorService", "JwtVerificationService", "TokenConfigurationError"]
