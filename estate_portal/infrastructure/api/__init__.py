# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .auth_client import AuthApiClient
from .client import MUTATING_METHODS, AuthenticatedClient
from .errors import raise_for_api_error, server_message
from .query import decode_list_query, encode_list_query
from .transport import ApiEndpoint

__all__ = [
    "ApiEndpoint",
    "AuthApiClient",
    "AuthenticatedClient",
    "MUTATING_METHODS",
    "decode_list_query",
    "encode_list_query",
    "raise_for_api_error",
    "server_message",
]
