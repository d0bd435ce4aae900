"""Service management runners (``service start`` / ``service stop``)."""
