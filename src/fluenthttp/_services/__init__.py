from ._request_executor import RequestExecutor

__all__ = ["RequestExecutor"]
