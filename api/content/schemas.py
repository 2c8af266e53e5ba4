"""API request and response schemas for content endpoints."""

from configs.endpoints_base_models import ContentRequest, ContentResponse

# Re-export for convenience
__all__ = ["ContentRequest", "ContentResponse"]
