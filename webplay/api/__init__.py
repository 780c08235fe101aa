"""HTTP API ability and request actions."""

from webplay.api.ability import UseAPI
from webplay.api.actions import Delete, Get, Head, Patch, Post, Put, Request
from webplay.api.models import ApiResponse, RequestMethod

__all__ = [
    "ApiResponse",
    "Delete",
    "Get",
    "Head",
    "Patch",
    "Post",
    "Put",
    "Request",
    "RequestMethod",
    "UseAPI",
]
