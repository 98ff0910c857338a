from merge_marker_guard.infrastructure.configuration.main_settings import Settings

__all__ = ["Settings"]
