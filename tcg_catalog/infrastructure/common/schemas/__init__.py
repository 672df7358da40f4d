from .response_wrappers import ErrorResponse, PageResponse, SuccessResponse

__all__ = ["ErrorResponse", "PageResponse", "SuccessResponse"]
