"""Clientes generados (una fachada por superficie de API).

Cada módulo declara sus endpoints y hereda el cableado de
`adapters.api_clients.base.BaseApiClient`.
"""

from adapters.api_clients.auth_upload import AuthUploadApiClient
from adapters.api_clients.base import BaseApiClient
from adapters.api_clients.blog import BlogApiClient
from adapters.api_clients.pets import InheritanceApiClient
from adapters.api_clients.reports import NestedDataApiClient
from adapters.api_clients.sample import SampleApiClient

__all__ = [
    "AuthUploadApiClient",
    "BaseApiClient",
    "BlogApiClient",
    "InheritanceApiClient",
    "NestedDataApiClient",
    "SampleApiClient",
]
