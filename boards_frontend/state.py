# boards_frontend/state.py
# Shared state of the viewer, refreshed from the backend by handlers.py.

# Cloudinary cloud name reported by the backend, used to build media URLs.
CLOUD_NAME = None

# Last board snapshot, format: [{"name": ..., "images": [...], "videos": [...], "error": ...}].
BOARDS = []

# ISO timestamp of the backend's last completed load, or None.
LAST_LOADED_AT = None

# Media host reported by the backend; None falls back to config.MEDIA_BASE_URL.
MEDIA_BASE_URL = None
