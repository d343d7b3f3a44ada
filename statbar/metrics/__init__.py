from .collector import StatusService, get_status_service, render_status

__all__ = ["StatusService", "get_status_service", "render_status"]
