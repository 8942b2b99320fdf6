from .base import CrdResource
