"""Feature flags."""

SIGNUP = True
BETA = ["search", "export"]
MAX_UPLOAD_MB = 25
