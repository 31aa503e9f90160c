from .client import BackofficeAPIClient
